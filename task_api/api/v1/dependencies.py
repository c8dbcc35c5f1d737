"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and application services.
Services are built from infrastructure implementations here; routes
depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.application.services.task_creation_service import TaskCreationService
from task_api.infrastructure.persistence.database import get_db_transactional
from task_api.infrastructure.persistence.repositories import TaskRepository


async def get_task_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskRepository:
    """Task repository bound to the request's transactional session."""
    return TaskRepository(db)


async def get_task_creation_service(
    task_repo: Annotated[TaskRepository, Depends(get_task_repo_for_write)],
) -> TaskCreationService:
    """Task creation service over the SQL task store."""
    return TaskCreationService(task_repo=task_repo)
