"""Pytest configuration and fixtures for taskflow.

HTTP tests run taskflow.main:app through httpx's ASGITransport. Database
tests use a throwaway SQLite file per test (sqlite+aiosqlite) with the schema
created from Base.metadata; get_db and get_db_transactional are overridden
to hand out sessions on that engine.

Env is set before taskflow is imported: settings are validated on first use
and create_app() reads them at import time.
"""

import os
from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime, timedelta

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskflow.core.config import get_settings
from taskflow.infrastructure.persistence.database import (
    Base,
    get_db,
    get_db_transactional,
)
from taskflow.infrastructure.persistence.models import Label, Status, User
from taskflow.main import app

get_settings.cache_clear()


@pytest.fixture
async def engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    """Async engine on a fresh SQLite file with all tables created."""
    db_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'taskflow.db'}")
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def seeded(session_factory: async_sessionmaker[AsyncSession]) -> dict[str, str]:
    """Reference rows owned by other services: two users, two statuses, one label.

    Returns a name -> id map (alice, bob, todo, done, urgent).
    """
    rows = {
        "alice": User(name="Alice", email="alice@example.com"),
        "bob": User(name="Bob", email="bob@example.com"),
        "todo": Status(title="To do"),
        "done": Status(title="Done"),
        "urgent": Label(name="urgent", color="#ff0000"),
    }
    async with session_factory() as session:
        async with session.begin():
            session.add_all(rows.values())
    return {name: row.id for name, row in rows.items()}


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Return a function that signs a bearer token for a user id.

    Tokens are issued by the identity service in production; tests sign them
    with the shared SECRET_KEY.
    """
    settings = get_settings()

    def _make(user_id: str, expires_in: timedelta = timedelta(hours=1)) -> str:
        payload = {"sub": user_id, "exp": datetime.now(UTC) + expires_in}
        return jwt.encode(
            payload, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
        )

    return _make


@pytest.fixture
def auth_headers(
    seeded: dict[str, str], make_token: Callable[..., str]
) -> dict[str, str]:
    """Authorization header for alice."""
    return {"Authorization": f"Bearer {make_token(seeded['alice'])}"}


@pytest.fixture
def bob_headers(
    seeded: dict[str, str], make_token: Callable[..., str]
) -> dict[str, str]:
    """Authorization header for bob."""
    return {"Authorization": f"Bearer {make_token(seeded['bob'])}"}


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database."""

    async def _get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    async def _get_db_transactional() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
