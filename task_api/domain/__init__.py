"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from task_api.domain.entities import Task
from task_api.domain.enums import TaskStatus
from task_api.domain.exceptions import (
    PersistenceException,
    TaskApiException,
    ValidationException,
)

__all__ = [
    # Entities
    "Task",
    # Enums
    "TaskStatus",
    # Exceptions
    "PersistenceException",
    "TaskApiException",
    "ValidationException",
]
