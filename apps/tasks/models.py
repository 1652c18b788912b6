import uuid
from django.db import models
from django.utils import timezone


class TaskStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    IN_PROGRESS = 'in-progress', 'In Progress'
    COMPLETED = 'completed', 'Completed'


class TaskPriority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


def _choices_label(choices) -> str:
    return ", ".join(choices.values)


class Task(models.Model):
    """
    A single unit of work.
    Timestamps are assigned by the service layer, not auto_now, so that
    updated_at can be forced strictly forward on every mutation.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(
        max_length=200,
        error_messages={
            'blank': 'Please add a task title',
            'null': 'Please add a task title',
            'max_length': 'Title cannot be more than 200 characters',
        },
    )
    description = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=20,
        choices=TaskStatus.choices,
        default=TaskStatus.PENDING,
        error_messages={
            'invalid_choice': f"Status must be one of: {_choices_label(TaskStatus)}",
            'null': f"Status must be one of: {_choices_label(TaskStatus)}",
            'blank': f"Status must be one of: {_choices_label(TaskStatus)}",
        },
    )
    priority = models.CharField(
        max_length=20,
        choices=TaskPriority.choices,
        default=TaskPriority.MEDIUM,
        error_messages={
            'invalid_choice': f"Priority must be one of: {_choices_label(TaskPriority)}",
            'null': f"Priority must be one of: {_choices_label(TaskPriority)}",
            'blank': f"Priority must be one of: {_choices_label(TaskPriority)}",
        },
    )

    due_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, editable=False, db_index=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status'], name='tasks_task_status_idx'),
            models.Index(fields=['priority'], name='tasks_task_priority_idx'),
        ]

    def __str__(self):
        return self.title
