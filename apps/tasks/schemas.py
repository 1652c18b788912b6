"""
API Schemas for Tasks app.
Request bodies and the response envelopes returned by every endpoint.
"""
from typing import List, Optional, Union
from uuid import UUID
from datetime import date, datetime
from ninja import Field, Schema
from pydantic import model_validator


# =============================================================================
# Request Schemas
# =============================================================================

class TaskIn(Schema):
    """
    Body for create and update.

    All fields are optional: the store decides what is required, and the
    API forwards only the keys the client actually sent (exclude_unset).
    Unknown keys such as _id or createdAt are dropped.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    due_date: Optional[date] = Field(None, alias="dueDate")

    @model_validator(mode="before")
    @classmethod
    def require_object(cls, values):
        # Ninja may hand over its DjangoGetter wrapper instead of the raw body.
        body = getattr(values, "_obj", values)
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        return values


# =============================================================================
# Response Schemas
# =============================================================================

class TaskOut(Schema):
    id: UUID = Field(..., serialization_alias="_id")
    title: str
    description: str
    status: str
    priority: str
    due_date: Optional[date] = Field(None, serialization_alias="dueDate")
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")


class TaskStatsOut(Schema):
    total: int
    pending: int
    in_progress: int = Field(..., serialization_alias="inProgress")
    completed: int
    high_priority: int = Field(..., serialization_alias="highPriority")


class TaskEnvelope(Schema):
    success: bool = True
    data: TaskOut


class TaskListEnvelope(Schema):
    success: bool = True
    count: int
    data: List[TaskOut]


class TaskStatsEnvelope(Schema):
    success: bool = True
    data: TaskStatsOut


class EmptyEnvelope(Schema):
    success: bool = True
    data: dict = Field(default_factory=dict)


class ErrorEnvelope(Schema):
    success: bool = False
    error: Union[str, List[str]]
