from django.contrib import admin
from .models import Task
from .services import next_timestamp


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'status', 'priority', 'due_date', 'created_at', 'updated_at']
    list_filter = ['status', 'priority']
    search_fields = ['title', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']

    def save_model(self, request, obj, form, change):
        # Admin edits bypass services.update_task, so keep updated_at moving here too.
        if change:
            obj.updated_at = next_timestamp(obj.updated_at)
        else:
            obj.updated_at = obj.created_at
        super().save_model(request, obj, form, change)
