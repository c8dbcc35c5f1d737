"""Application layer: interfaces (ports) and services.

Depends only on domain and protocol definitions. Infrastructure
implements the interfaces (task store).
"""

from task_api.application.interfaces import ITaskRepository
from task_api.application.services.task_creation_service import TaskCreationService
from task_api.application.services.task_request_validator import (
    validate_create_task_request,
)

__all__ = [
    "ITaskRepository",
    "TaskCreationService",
    "validate_create_task_request",
]
