"""
Tasks API endpoints.

CRUD, filtering, search and dashboard counters for task records. Every
response is wrapped in the {success, data, error, count} envelope; errors
are produced by the handlers in apps.core.responses.
"""
from dataclasses import asdict
from typing import Optional
from ninja import Router
from django.http import HttpRequest

from apps.core.responses import success
from .schemas import (
    TaskIn, TaskEnvelope, TaskListEnvelope, TaskStatsEnvelope,
    EmptyEnvelope, ErrorEnvelope,
)
from . import services

router = Router(tags=["Tasks"])


@router.get("", response={200: TaskListEnvelope, 400: ErrorEnvelope}, by_alias=True)
def list_tasks_api(
    request: HttpRequest,
    status: Optional[str] = None,
    priority: Optional[str] = None,
):
    """
    List all tasks, newest first.

    Query Parameters:
    - status: pending | in-progress | completed
    - priority: low | medium | high

    Unknown values return an empty list rather than an error.
    """
    tasks = services.list_tasks(status=status, priority=priority)
    return success(tasks, count=len(tasks))


@router.get("/search", response={200: TaskListEnvelope, 400: ErrorEnvelope}, by_alias=True)
def search_tasks_api(request: HttpRequest, q: str):
    """Case-insensitive search over title and description."""
    tasks = services.search_tasks(q)
    return success(tasks, count=len(tasks))


@router.get("/stats", response=TaskStatsEnvelope, by_alias=True)
def task_stats_api(request: HttpRequest):
    """Totals per status plus the number of high-priority tasks."""
    return success(asdict(services.get_task_stats()))


@router.get("/{task_id}", response={200: TaskEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope}, by_alias=True)
def get_task_api(request: HttpRequest, task_id: str):
    return success(services.get_task(task_id))


@router.post("", response={201: TaskEnvelope, 400: ErrorEnvelope}, by_alias=True)
def create_task_api(request: HttpRequest, payload: TaskIn):
    """
    Create a task.
    Only title is required; status defaults to pending and priority to medium.
    """
    task = services.create_task(payload.dict(exclude_unset=True))
    return 201, success(task)


@router.api_operation(
    ["PUT", "PATCH"],
    "/{task_id}",
    response={200: TaskEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope},
    by_alias=True,
)
def update_task_api(request: HttpRequest, task_id: str, payload: TaskIn):
    """
    Partially update a task.

    Fields omitted from the body keep their current values. A field sent as
    null is applied: dueDate null clears the due date, title null is rejected.
    """
    task = services.update_task(task_id, payload.dict(exclude_unset=True))
    return success(task)


@router.delete("/{task_id}", response={200: EmptyEnvelope, 400: ErrorEnvelope, 404: ErrorEnvelope})
def delete_task_api(request: HttpRequest, task_id: str):
    """Hard delete. Responds with an empty data object."""
    services.delete_task(task_id)
    return success({})
