"""Domain entities."""

from task_api.domain.entities.task import Task

__all__ = ["Task"]
