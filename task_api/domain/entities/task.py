"""Task domain entity.

A task is a unit of work with a title, optional description, due timestamp
and status. id and created_at are None until the store persists the task.
"""

from dataclasses import dataclass
from datetime import datetime

from task_api.domain.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity for a task (no dependency on ORM)."""

    title: str
    due_date_time: datetime
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    id: int | None = None
    created_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        """Return whether the store has assigned an id."""
        return self.id is not None
