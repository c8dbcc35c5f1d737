"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from task_api.domain.entities import Task


class ITaskRepository(Protocol):
    """Protocol for the task store. Save is the only operation."""

    async def save(self, task: Task) -> Task:
        """Persist a new task; return it with id and created_at assigned."""
