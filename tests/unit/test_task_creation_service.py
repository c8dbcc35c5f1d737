"""TaskCreationService.create_task unit tests with a mocked task store."""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from task_api.application.services.task_creation_service import TaskCreationService
from task_api.domain.entities import Task
from task_api.domain.enums import TaskStatus
from task_api.domain.exceptions import PersistenceException
from task_api.schemas.task import CreateTaskRequest
from task_api.shared.utils.datetime import utc_now


def _request(
    title: str = "Test Task", description: str | None = "Test Description"
) -> CreateTaskRequest:
    return CreateTaskRequest(
        title=title,
        description=description,
        due_date_time=utc_now() + timedelta(days=7),
    )


@pytest.fixture
def service_with_repo():
    """TaskCreationService over an AsyncMock repo that echoes with id/created_at."""
    repo = AsyncMock()

    async def _save(task: Task) -> Task:
        return Task(
            id=1,
            title=task.title,
            description=task.description,
            status=task.status,
            due_date_time=task.due_date_time,
            created_at=utc_now(),
        )

    repo.save = AsyncMock(side_effect=_save)
    return TaskCreationService(task_repo=repo), repo


async def test_create_task_returns_saved_task(service_with_repo) -> None:
    """Result carries the store's id and the request's fields."""
    svc, _ = service_with_repo
    request = _request()

    result = await svc.create_task(request)

    assert result.id == 1
    assert result.title == "Test Task"
    assert result.description == "Test Description"
    assert result.status is TaskStatus.PENDING
    assert result.due_date_time == request.due_date_time
    assert result.created_at is not None


async def test_create_task_maps_request_fields_to_entity(service_with_repo) -> None:
    """The entity handed to the store is PENDING with no id or created_at."""
    svc, repo = service_with_repo
    request = _request(title="My Task", description="My Description")

    await svc.create_task(request)

    repo.save.assert_awaited_once()
    captured: Task = repo.save.await_args.args[0]
    assert captured.title == "My Task"
    assert captured.description == "My Description"
    assert captured.due_date_time == request.due_date_time
    assert captured.status is TaskStatus.PENDING
    assert captured.id is None
    assert captured.created_at is None
    assert not captured.is_persisted


async def test_create_task_with_null_description(service_with_repo) -> None:
    svc, _ = service_with_repo

    result = await svc.create_task(_request(title="Task Without Description", description=None))

    assert result.title == "Task Without Description"
    assert result.description is None


async def test_create_task_returns_store_result_untransformed() -> None:
    """Whatever the store returns is returned as-is (same object)."""
    stored = Task(
        id=42,
        title="stored",
        due_date_time=utc_now() + timedelta(days=1),
        created_at=utc_now(),
    )
    repo = AsyncMock()
    repo.save = AsyncMock(return_value=stored)

    result = await TaskCreationService(task_repo=repo).create_task(_request())

    assert result is stored


async def test_create_task_propagates_store_failure() -> None:
    repo = AsyncMock()
    repo.save = AsyncMock(side_effect=PersistenceException())

    with pytest.raises(PersistenceException):
        await TaskCreationService(task_repo=repo).create_task(_request())
