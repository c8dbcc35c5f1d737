"""Task API: POST /tasks validates the body, creates the task, returns 201."""

from typing import Annotated

from fastapi import APIRouter, Depends

from task_api.api.v1.dependencies import get_task_creation_service
from task_api.application.services.task_creation_service import TaskCreationService
from task_api.application.services.task_request_validator import (
    ensure_valid_create_task_request,
)
from task_api.schemas.task import (
    CreateTaskRequest,
    ErrorResponse,
    FieldErrorResponse,
    TaskResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    status_code=201,
    summary="Create a new task",
    description="Creates a new task with the provided details",
    responses={
        201: {"description": "Task created successfully"},
        400: {"description": "Validation failed - invalid input", "model": FieldErrorResponse},
        500: {"description": "Task could not be stored", "model": ErrorResponse},
    },
)
async def create_task(
    body: CreateTaskRequest,
    task_service: Annotated[
        TaskCreationService, Depends(get_task_creation_service)
    ],
) -> TaskResponse:
    """Validate every field (400 with fieldErrors on failure), then create the task."""
    ensure_valid_create_task_request(body)
    task = await task_service.create_task(body)
    return TaskResponse.from_task(task)
