"""Task API schemas.

JSON uses camelCase keys (dueDateTime, createdAt); Python code uses the
snake_case field names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from task_api.application.services.task_request_validator import (
    DUE_DATE_NOT_FUTURE,
    DUE_DATE_OUT_OF_RANGE,
)
from task_api.domain.entities import Task
from task_api.domain.enums import TaskStatus
from task_api.shared.utils.datetime import ensure_utc


class CreateTaskRequest(BaseModel):
    """Request body for POST /tasks.

    Every key is optional here; missing and out-of-range values are reported
    by validate_create_task_request so all rule messages come from one place.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    due_date_time: datetime | None = Field(
        default=None,
        alias="dueDateTime",
        description="ISO-8601 timestamp; without an offset it is taken as UTC.",
    )

    @field_validator("due_date_time")
    @classmethod
    def normalize_due_date_time(cls, value: datetime | None) -> datetime | None:
        """Convert to UTC; instants UTC cannot represent are rejected as field errors.

        A positive offset on 0001-01-01 lands before datetime.min, so that
        value is necessarily in the past.
        """
        try:
            return ensure_utc(value)
        except OverflowError:
            offset = value.utcoffset() if value is not None else None
            if offset is not None and offset.total_seconds() > 0:
                raise PydanticCustomError("due_date_not_future", DUE_DATE_NOT_FUTURE)
            raise PydanticCustomError("due_date_out_of_range", DUE_DATE_OUT_OF_RANGE)


class TaskResponse(BaseModel):
    """Created task. description is omitted from the JSON when absent."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    due_date_time: datetime = Field(alias="dueDateTime")
    created_at: datetime = Field(alias="createdAt")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        """Build the response from a persisted Task."""
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date_time=task.due_date_time,
            created_at=task.created_at,
        )


class FieldErrorResponse(BaseModel):
    """Response for 400: JSON field name -> message for every failed rule."""

    field_errors: dict[str, str] = Field(alias="fieldErrors")


class ErrorResponse(BaseModel):
    """Response for 500 and other non-validation errors."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
