"""Pytest configuration and fixtures for roles_api.

Each test gets its own in-memory SQLite database (aiosqlite, foreign keys
enabled) with tables created from ORM metadata. HTTP tests run against
roles_api.main:app with the session dependencies overridden, except
committing_client, which keeps the real ones over a file-backed database.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from roles_api.infrastructure.persistence import database
from roles_api.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    get_db,
    get_db_transactional,
    init_models,
)
from roles_api.infrastructure.persistence.models import (
    Permission,
    RoleHasPermission,
)
from roles_api.infrastructure.persistence.repositories import RoleRepository
from roles_api.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncEngine:
    """Fresh in-memory database with all tables."""
    test_engine = build_engine(TEST_DATABASE_URL)
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test."""
    async with build_session_factory(engine)() as session:
        yield session
        await session.rollback()


@pytest.fixture
def role_repo(db_session: AsyncSession) -> RoleRepository:
    return RoleRepository(db_session)


@pytest.fixture
def grant_permissions(db_session: AsyncSession):
    """Return an async helper that creates permissions by name and links them to a role."""

    async def _grant(role_id: int, *names: str) -> list[Permission]:
        permissions = [Permission(name=name) for name in names]
        db_session.add_all(permissions)
        await db_session.flush()
        db_session.add_all(
            RoleHasPermission(role_id=role_id, permission_id=p.id) for p in permissions
        )
        await db_session.flush()
        return permissions

    return _grant


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), sharing db_session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_db_transactional] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def file_engine(tmp_path) -> AsyncEngine:
    """File-backed SQLite database; each session gets its own connection."""
    file_db_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'roles.db'}")
    await init_models(file_db_engine)
    yield file_db_engine
    await file_db_engine.dispose()


@pytest.fixture
async def committing_client(file_engine: AsyncEngine, monkeypatch) -> AsyncClient:
    """HTTP client using the real get_db / get_db_transactional against file_engine."""
    monkeypatch.setattr(database, "engine", file_engine)
    monkeypatch.setattr(database, "AsyncSessionLocal", build_session_factory(file_engine))
    app.dependency_overrides.clear()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
