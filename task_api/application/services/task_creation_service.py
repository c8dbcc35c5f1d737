"""Task creation: build a PENDING Task from a validated request and store it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from task_api.application.interfaces.repositories import ITaskRepository
from task_api.domain.entities import Task
from task_api.domain.enums import TaskStatus
from task_api.shared.telemetry.tracing import add_span_attributes, traced
from task_api.shared.utils.datetime import ensure_utc

if TYPE_CHECKING:
    from task_api.schemas.task import CreateTaskRequest

logger = logging.getLogger(__name__)


class TaskCreationService:
    """Creates tasks. Holds the task store it delegates to."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    @traced("task.create")
    async def create_task(self, request: CreateTaskRequest) -> Task:
        """Build a Task from request and return exactly what the store returns.

        The request must already have passed validation; due_date_time is
        not re-checked here. Status is always PENDING; id and created_at
        are left for the store. Store errors propagate unchanged.
        """
        logger.info("Creating new task with title: %s", request.title)

        task = Task(
            title=request.title,
            description=request.description,
            due_date_time=ensure_utc(request.due_date_time),
            status=TaskStatus.PENDING,
        )
        saved = await self.task_repo.save(task)

        if saved.id is not None:
            add_span_attributes(**{"task.id": saved.id})
        logger.info("Task created successfully with id: %s", saved.id)
        return saved
