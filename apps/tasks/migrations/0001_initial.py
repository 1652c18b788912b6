import django.utils.timezone
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Task',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(error_messages={'blank': 'Please add a task title', 'max_length': 'Title cannot be more than 200 characters', 'null': 'Please add a task title'}, max_length=200)),
                ('description', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('in-progress', 'In Progress'), ('completed', 'Completed')], default='pending', error_messages={'blank': 'Status must be one of: pending, in-progress, completed', 'invalid_choice': 'Status must be one of: pending, in-progress, completed', 'null': 'Status must be one of: pending, in-progress, completed'}, max_length=20)),
                ('priority', models.CharField(choices=[('low', 'Low'), ('medium', 'Medium'), ('high', 'High')], default='medium', error_messages={'blank': 'Priority must be one of: low, medium, high', 'invalid_choice': 'Priority must be one of: low, medium, high', 'null': 'Priority must be one of: low, medium, high'}, max_length=20)),
                ('due_date', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, editable=False)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['status'], name='tasks_task_status_idx'), models.Index(fields=['priority'], name='tasks_task_priority_idx')],
            },
        ),
    ]
