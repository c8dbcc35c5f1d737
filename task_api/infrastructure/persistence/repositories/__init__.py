"""Persistence repositories. Re-exports for dependency injection."""

from task_api.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["TaskRepository"]
