"""Pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the environment must be in place first
os.environ.setdefault("API_TITLE", "SBTE Portal Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")
os.environ.setdefault("DEBUG", "False")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-hs256-signing-0001")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("RUN_MIGRATIONS", "False")

from datetime import datetime, timezone  # noqa: E402
from typing import AsyncGenerator, Callable, Generator, Optional  # noqa: E402
from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import sbte_portal.models  # noqa: E402,F401
from sbte_portal.application import create_app  # noqa: E402
from sbte_portal.config import Settings, get_settings  # noqa: E402
from sbte_portal.models import College, Department, Subject  # noqa: E402
from sbte_portal.utils.db import Base  # noqa: E402
from sbte_portal.utils.session import (  # noqa: E402
    SessionUser,
    UserRole,
    generate_session_token,
)

NOW = datetime(2026, 10, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    """Process-wide settings configured for tests."""
    return get_settings()


@pytest.fixture
def app() -> Generator[FastAPI, None, None]:
    """Create FastAPI application instance with database startup disabled."""
    with patch("sbte_portal.application.init_db", new_callable=AsyncMock):
        with patch("sbte_portal.application.close_db", new_callable=AsyncMock):
            application = create_app()
            yield application
            application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client for FastAPI application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers(settings: Settings) -> Callable[..., dict[str, str]]:
    """Build Authorization headers carrying a signed session."""

    def _build(
        role: UserRole | str,
        department_id: Optional[str] = None,
        user_id: str = "u1",
    ) -> dict[str, str]:
        principal = SessionUser(
            user_id=user_id,
            role=role.value if isinstance(role, UserRole) else role,
            department_id=department_id,
        )
        token = generate_session_token(principal, settings.SECRET_KEY)
        return {"Authorization": f"Bearer {token}"}

    return _build


@pytest.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """In-memory SQLite session with all tables created.

    Foreign keys are enforced so constraint failures behave as on Postgres.
    """
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


@pytest.fixture
async def department(db_session: AsyncSession) -> Department:
    """Department "d1" belonging to college "c1"."""
    db_session.add(College(id="c1", name="Government Polytechnic"))
    dept = Department(id="d1", name="Computer Science", college_id="c1")
    db_session.add(dept)
    await db_session.commit()
    await db_session.refresh(dept)
    return dept


@pytest.fixture
def make_subject() -> Callable[..., Subject]:
    """Build detached Subject instances for mocked service results."""

    def _build(**overrides) -> Subject:
        data = {
            "id": "s1",
            "name": "Algorithms",
            "code": "CS201",
            "semester": 3,
            "credit_score": 4.0,
            "department_id": "d1",
            "teacher_id": None,
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return Subject(**data)

    return _build


@pytest.fixture
def make_department() -> Callable[..., Department]:
    """Build detached Department instances for mocked service results."""

    def _build(**overrides) -> Department:
        data = {
            "id": "d1",
            "name": "Computer Science",
            "is_active": True,
            "college_id": "c1",
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return Department(**data)

    return _build
