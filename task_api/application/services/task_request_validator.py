"""Create-task request validation.

Checks every field of a CreateTaskRequest and collects one message per
failing field, so the caller gets every violation in a single response.
Runs before the Task entity is built.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from task_api.core.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from task_api.domain.exceptions import ValidationException
from task_api.shared.utils.datetime import ensure_utc, utc_now

if TYPE_CHECKING:
    from task_api.schemas.task import CreateTaskRequest

TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = f"Title must not exceed {TITLE_MAX_LENGTH} characters"
DESCRIPTION_TOO_LONG = f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
DUE_DATE_REQUIRED = "Due date is required"
DUE_DATE_NOT_FUTURE = "Due date must be in the future"
DUE_DATE_OUT_OF_RANGE = "Due date is out of range"


def _title_error(title: str | None) -> str | None:
    if title is None or not title.strip():
        return TITLE_REQUIRED
    if len(title) > TITLE_MAX_LENGTH:
        return TITLE_TOO_LONG
    return None


def _description_error(description: str | None) -> str | None:
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        return DESCRIPTION_TOO_LONG
    return None


def _due_date_time_error(due_date_time: datetime | None, now: datetime) -> str | None:
    if due_date_time is None:
        return DUE_DATE_REQUIRED
    if ensure_utc(due_date_time) <= now:
        return DUE_DATE_NOT_FUTURE
    return None


def validate_create_task_request(
    request: CreateTaskRequest, now: datetime | None = None
) -> dict[str, str]:
    """Return field errors for request; empty dict when the request is valid.

    Keys are the JSON field names (title, description, dueDateTime). For a
    field failing several rules the first rule wins (a blank title is
    reported as required, not as too long).

    Args:
        request: Parsed create-task body.
        now: Reference time for the due-date check (defaults to UTC now).

    Returns:
        Dict of field name -> message.
    """
    reference = ensure_utc(now) if now is not None else utc_now()
    checks = {
        "title": _title_error(request.title),
        "description": _description_error(request.description),
        "dueDateTime": _due_date_time_error(request.due_date_time, reference),
    }
    return {field: message for field, message in checks.items() if message}


def ensure_valid_create_task_request(
    request: CreateTaskRequest, now: datetime | None = None
) -> None:
    """Raise ValidationException carrying all field errors if request is invalid.

    Raises:
        ValidationException: If any rule fails.
    """
    field_errors = validate_create_task_request(request, now)
    if field_errors:
        raise ValidationException(field_errors)
