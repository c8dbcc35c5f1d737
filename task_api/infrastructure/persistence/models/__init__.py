"""ORM models. Importing this package registers every table on Base.metadata."""

from task_api.infrastructure.persistence.models.task import Task

__all__ = ["Task"]
