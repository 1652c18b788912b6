"""
Task store.

Every read and write of Task records goes through these functions. The API
layer keeps no task state between requests; consistency of a single task's
read-modify-write is left to the database row lock taken in update_task().
"""
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone

from apps.core.exceptions import InvalidIdentifier, NotFound
from .dtos import TaskStatsDTO
from .models import Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

# Fields a client may set. id and both timestamps are server-owned.
EDITABLE_FIELDS = ('title', 'description', 'status', 'priority', 'due_date')

# JSON timestamps are rendered with millisecond precision.
TIMESTAMP_STEP = timedelta(milliseconds=1)


class TaskNotFound(NotFound):
    message = "Task not found"


class InvalidTaskId(InvalidIdentifier, TaskNotFound):
    message = "Invalid task ID"


def _parse_task_id(task_id) -> UUID:
    if isinstance(task_id, UUID):
        return task_id
    try:
        return UUID(str(task_id))
    except ValueError:
        raise InvalidTaskId(task_id) from None


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only editable keys and trim the text fields."""
    cleaned = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}

    if isinstance(cleaned.get('title'), str):
        cleaned['title'] = cleaned['title'].strip()

    if 'description' in cleaned:
        description = cleaned['description']
        cleaned['description'] = description.strip() if isinstance(description, str) else ""

    return cleaned


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Value for updated_at on a mutation: now, but always past `previous`."""
    now = timezone.now()
    if previous is not None and now < previous + TIMESTAMP_STEP:
        # updated_at must visibly advance even when the clock has not.
        now = previous + TIMESTAMP_STEP
    return now


def list_tasks(status: Optional[str] = None, priority: Optional[str] = None) -> List[Task]:
    """
    List tasks, newest first.
    Filter values outside the enumerations simply match nothing.
    """
    queryset = Task.objects.all()

    if status:
        queryset = queryset.filter(status=status)
    if priority:
        queryset = queryset.filter(priority=priority)

    return list(queryset.order_by('-created_at', '-id'))


def search_tasks(query: str) -> List[Task]:
    """
    Case-insensitive substring match on title or description, newest first.
    A blank query matches every task; otherwise surrounding whitespace is
    part of the text searched for.
    """
    queryset = Task.objects.all()

    query = query or ""
    if query.strip():
        queryset = queryset.filter(
            Q(title__icontains=query) |
            Q(description__icontains=query)
        )

    return list(queryset.order_by('-created_at', '-id'))


def get_task(task_id) -> Task:
    pk = _parse_task_id(task_id)
    try:
        return Task.objects.get(pk=pk)
    except Task.DoesNotExist:
        raise TaskNotFound(pk) from None


def create_task(fields: Dict[str, Any]) -> Task:
    """
    Validate and persist a new task.

    Raises django.core.exceptions.ValidationError when the title is missing
    or blank, or status/priority fall outside their choices. Nothing is
    written in that case.
    """
    data = _clean_fields(fields)
    now = timezone.now()

    task = Task(created_at=now, updated_at=now, **data)
    task.full_clean()
    task.save(force_insert=True)

    logger.info(f"Created task {task.id} ({task.status}/{task.priority})")
    return task


def update_task(task_id, patch: Dict[str, Any]) -> Task:
    """
    Apply a partial update.

    Only keys present in `patch` are touched; a key present with a None or
    empty value is applied and then validated like any other value.
    """
    pk = _parse_task_id(task_id)
    changes = _clean_fields(patch)

    with transaction.atomic():
        try:
            task = Task.objects.select_for_update().get(pk=pk)
        except Task.DoesNotExist:
            raise TaskNotFound(pk) from None

        for attr, value in changes.items():
            setattr(task, attr, value)
        task.updated_at = next_timestamp(task.updated_at)

        task.full_clean()
        task.save()

    logger.info(f"Updated task {task.id} fields={sorted(changes)}")
    return task


def delete_task(task_id) -> None:
    pk = _parse_task_id(task_id)
    deleted, _ = Task.objects.filter(pk=pk).delete()
    if not deleted:
        raise TaskNotFound(pk)
    logger.info(f"Deleted task {pk}")


def get_task_stats() -> TaskStatsDTO:
    """Counts shown on the dashboard, computed in a single aggregate query."""
    aggregated = Task.objects.aggregate(
        total=Count('id'),
        pending=Count('id', filter=Q(status=TaskStatus.PENDING)),
        in_progress=Count('id', filter=Q(status=TaskStatus.IN_PROGRESS)),
        completed=Count('id', filter=Q(status=TaskStatus.COMPLETED)),
        high_priority=Count('id', filter=Q(priority=TaskPriority.HIGH)),
    )
    return TaskStatsDTO(**aggregated)
