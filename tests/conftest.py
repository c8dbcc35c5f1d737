"""Pytest configuration and fixtures for task-api.

Points DATABASE_URL at a temporary SQLite file before task_api.main is
imported, so HTTP and repository tests run without external services.
"""

import os
import tempfile
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="task-api-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'test.db'}"
os.environ["TELEMETRY_ENABLED"] = "false"

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from task_api.api.v1.dependencies import get_task_creation_service  # noqa: E402
from task_api.core.config import get_settings  # noqa: E402
from task_api.infrastructure.persistence import database  # noqa: E402

get_settings.cache_clear()

from task_api.main import app  # noqa: E402


@pytest.fixture
async def db_schema() -> AsyncIterator[None]:
    """Create tables in the test database; drop them and dispose the engine after."""
    await database.init_db()
    yield
    async with database.get_engine().begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.dispose_engine()


@pytest.fixture
async def client(db_schema: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI) with a fresh schema."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(db_schema: None) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests. Rolls back after test."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def task_service() -> Iterator[AsyncMock]:
    """Replace the creation service with an AsyncMock for endpoint tests."""
    service = AsyncMock()
    app.dependency_overrides[get_task_creation_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_task_creation_service, None)


@pytest.fixture
async def mocked_client(task_service: AsyncMock) -> AsyncIterator[AsyncClient]:
    """HTTP client whose POST /tasks reaches the mocked creation service (no DB)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
