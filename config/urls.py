"""
URL configuration for Taskboard project.
"""
from django.contrib import admin
from django.urls import path
from ninja import NinjaAPI

from apps.core.responses import register_exception_handlers

api = NinjaAPI(
    title="Taskboard API",
    version="1.0.0",
    description="Task management REST API",
    docs_url="/docs",
)
register_exception_handlers(api)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks", tasks_router)

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', api.urls),
]
