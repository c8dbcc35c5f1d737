"""Task repository: SQL implementation of ITaskRepository."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from task_api.domain.entities import Task
from task_api.domain.enums import TaskStatus
from task_api.domain.exceptions import PersistenceException
from task_api.infrastructure.persistence.models.task import Task as TaskModel
from task_api.shared.utils.datetime import ensure_utc, utc_now

logger = logging.getLogger(__name__)


def _to_entity(t: TaskModel) -> Task:
    """Map Task ORM row to the Task entity (datetimes normalized to UTC)."""
    return Task(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        due_date_time=ensure_utc(t.due_date_time),
        created_at=ensure_utc(t.created_at),
    )


class TaskRepository:
    """Task repository. Implements ITaskRepository.

    Writes go through the caller's session; the transaction boundary is the
    session dependency (get_db_transactional), so one insert either commits
    or rolls back as a whole.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save(self, task: Task) -> Task:
        """Insert task and return it with id and created_at assigned.

        created_at is set to UTC now when the task does not carry one.

        Raises:
            PersistenceException: If the insert fails.
        """
        row = TaskModel(
            title=task.title,
            description=task.description,
            status=task.status.value,
            due_date_time=ensure_utc(task.due_date_time),
            created_at=ensure_utc(task.created_at) or utc_now(),
        )
        if task.id is not None:
            row.id = task.id
        try:
            self.db.add(row)
            await self.db.flush()
            await self.db.refresh(row)
        except SQLAlchemyError as exc:
            logger.error("Task insert failed: %s", exc.__class__.__name__)
            raise PersistenceException() from exc
        return _to_entity(row)
