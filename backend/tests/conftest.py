"""Shared fixtures: a throwaway SQLite database and an app wired to it."""

import asyncio
import uuid
from datetime import datetime, timezone

import pytest
from fastapi import Request
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from design_api.auth import get_current_user_id
from design_api.db.session import Base, get_db
from design_api.main import app
from design_api.models.design import Design

USER_HEADER = "X-Test-User"
DEFAULT_USER = "user-a"


async def _header_user(request: Request) -> str:
    return request.headers.get(USER_HEADER, DEFAULT_USER)


def as_user(user_id: str) -> dict[str, str]:
    return {USER_HEADER: user_id}


@pytest.fixture
def session_factory(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'designs.db'}",
        poolclass=NullPool,
    )

    async def _create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create_tables())
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def db_override(session_factory):
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(db_override):
    """Client whose caller identity comes from the ``X-Test-User`` header."""
    app.dependency_overrides[get_current_user_id] = _header_user
    return TestClient(app)


@pytest.fixture
def anon_client(db_override):
    """Client going through the real bearer-token dependency."""
    return TestClient(app)


@pytest.fixture
def seed_design(session_factory):
    """Insert a design directly and return its id as a string."""

    def _seed(user_id: str = DEFAULT_USER, **fields) -> str:
        fields.setdefault("name", "Seeded")
        fields.setdefault(
            "updated_at", datetime(2020, 1, 1, tzinfo=timezone.utc)
        )

        async def _insert():
            async with session_factory() as session:
                design = Design(user_id=user_id, **fields)
                session.add(design)
                await session.commit()
                return str(design.id)

        return asyncio.run(_insert())

    return _seed


@pytest.fixture
def fetch_design(session_factory):
    """Read a design straight from the database, bypassing the API."""

    def _fetch(design_id: str) -> Design | None:
        async def _get():
            async with session_factory() as session:
                return await session.get(Design, uuid.UUID(design_id))

        return asyncio.run(_get())

    return _fetch
