"""POST /tasks against the real service and a temporary SQLite database."""

from datetime import datetime, timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import event, func, select
from sqlalchemy.exc import OperationalError

from task_api.infrastructure.persistence import database
from task_api.infrastructure.persistence.models.task import Task as TaskModel
from task_api.shared.utils.datetime import utc_now

pytestmark = pytest.mark.requires_db


async def test_create_task_persists_and_returns_server_fields(
    client: AsyncClient,
) -> None:
    """201 with integer id, submitted title, PENDING status, createdAt >= request time."""
    requested_at = utc_now()
    due = utc_now() + timedelta(days=7)

    response = await client.post(
        "/tasks",
        json={
            "title": "Test Task",
            "description": "Test Description",
            "dueDateTime": due.isoformat(),
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["title"] == "Test Task"
    assert data["description"] == "Test Description"
    assert data["status"] == "PENDING"
    assert datetime.fromisoformat(data["dueDateTime"]) == due
    assert datetime.fromisoformat(data["createdAt"]) >= requested_at


async def test_create_task_without_description_has_no_description_key(
    client: AsyncClient,
) -> None:
    """Stored task without description serializes without the key."""
    response = await client.post(
        "/tasks",
        json={
            "title": "Minimal Task",
            "dueDateTime": (utc_now() + timedelta(days=1)).isoformat(),
        },
    )

    assert response.status_code == 201
    assert "description" not in response.json()


async def test_each_created_task_gets_a_new_id(client: AsyncClient) -> None:
    """Two creates return two distinct ids."""
    body = {
        "title": "Repeat",
        "dueDateTime": (utc_now() + timedelta(hours=2)).isoformat(),
    }
    first = await client.post("/tasks", json=body)
    second = await client.post("/tasks", json=body)

    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]


async def test_due_date_without_offset_is_taken_as_utc(client: AsyncClient) -> None:
    """A naive ISO timestamp is accepted and echoed back as UTC."""
    due = (utc_now() + timedelta(days=3)).replace(microsecond=0)
    naive = due.replace(tzinfo=None).isoformat()

    response = await client.post(
        "/tasks", json={"title": "Naive due", "dueDateTime": naive}
    )

    assert response.status_code == 201
    assert datetime.fromisoformat(response.json()["dueDateTime"]) == due


async def test_title_is_stored_as_provided(client: AsyncClient) -> None:
    """Surrounding whitespace is not trimmed from a valid title."""
    response = await client.post(
        "/tasks",
        json={
            "title": "  padded  ",
            "dueDateTime": (utc_now() + timedelta(days=1)).isoformat(),
        },
    )

    assert response.status_code == 201
    assert response.json()["title"] == "  padded  "


async def _task_row_count() -> int:
    async with database.get_engine().connect() as conn:
        result = await conn.execute(select(func.count()).select_from(TaskModel))
        return result.scalar_one()


async def test_failure_after_insert_rolls_back_the_request(client: AsyncClient) -> None:
    """The INSERT runs, the reload SELECT fails: 500 with the generic body and no row kept."""
    sync_engine = database.get_engine().sync_engine

    def fail_task_reload(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("SELECT") and "FROM task" in statement:
            raise OperationalError(statement, parameters, Exception("disk I/O error"))

    event.listen(sync_engine, "before_cursor_execute", fail_task_reload)
    try:
        response = await client.post(
            "/tasks",
            json={
                "title": "Never stored",
                "dueDateTime": (utc_now() + timedelta(days=1)).isoformat(),
            },
        )
    finally:
        event.remove(sync_engine, "before_cursor_execute", fail_task_reload)

    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_ERROR",
        "message": "Internal server error",
    }
    assert await _task_row_count() == 0


async def test_successful_request_commits_the_row(client: AsyncClient) -> None:
    response = await client.post(
        "/tasks",
        json={
            "title": "Stored",
            "dueDateTime": (utc_now() + timedelta(days=1)).isoformat(),
        },
    )

    assert response.status_code == 201
    assert await _task_row_count() == 1
