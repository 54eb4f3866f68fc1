"""
Core pytest configuration for the entire test suite.

This module provides only the essential database setup and core utilities
needed across ALL types of tests (repositories, services, APIs).

Domain-specific fixtures live in:
- tests/test_fixtures/repository_fixtures.py
- tests/test_fixtures/api_fixtures.py

and are imported at the bottom of this file so they are globally available.
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import os
import logging
from pathlib import Path
from urllib.parse import urlparse
from typing import AsyncGenerator

# -------------------------------
# Early logging tuning (IMPORTANT)
# -------------------------------
# Silence noisy third-party loggers at import time, before importing modules that
# might initialize them. Keep this block above the blog_api imports.
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
    "urllib3",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
)

from blog_api.database.base import Base
from blog_api import models  # noqa: F401 - import to register models with Base.metadata
from blog_api.config import Settings
from blog_api.core.logging.builder import setup_logging

logger = logging.getLogger(__name__)


# -------------------------------
# Logging: install application logging once per session
# -------------------------------

@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Settings for the test session: console-only logging, no files, no table creation on startup."""
    return Settings(ENV="testing", LOG_TO_STDOUT=True, LOG_FORMAT="text", LOG_LEVEL="DEBUG", DB_CREATE_TABLES=False)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(test_settings: Settings):
    """
    Install the application's dictConfig logging for the whole session, so the
    formatters and filters the app relies on are active in tests too.

    caplog keeps working: pytest attaches its capture handler to the root logger
    per test phase, after this fixture has run.
    """
    setup_logging(test_settings)
    yield


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------

def safe_log_db_url(db_url: str) -> str:
    """
    Return the database URL without credentials (scheme, host, port, database only).
    """
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url(tmp_path: Path) -> str:
    """
    Determine the test database URL.

    1. `TEST_DATABASE_URL` environment variable (CI override, e.g. a Postgres test DB)
    2. otherwise a fresh SQLite file under the test's tmp_path, so each test starts empty
    """
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url
    return f"sqlite+aiosqlite:///{tmp_path / 'test_database.db'}"


# ------------------------------------------------------------------------------------------------
# DATABASE FIXTURES
# ------------------------------------------------------------------------------------------------

@pytest.fixture()
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine bound to the test's own event loop (function scope) with all tables created.
    Tables are dropped on teardown so a shared TEST_DATABASE_URL is left clean.
    """
    url = get_test_database_url(tmp_path)
    logger.debug(f"Using test DB: {safe_log_db_url(url)}")

    engine = create_async_engine(url, echo=False, pool_pre_ping=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture()
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
async def db_session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """
    A plain session on the per-test database.

    The repository rolls the session back after a failed statement (e.g. a unique
    violation), which discards anything not yet committed. Tests that set up rows
    and then provoke a failure must `await db_session.commit()` in between.
    """
    async with session_maker() as session:
        yield session
        await session.rollback()


# Shared fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402
    base_repo,
    post_repository,
    fake_repository,
    post_service,
    sample_post_data,
    create_post,
    created_post,
    multiple_posts,
)
from .test_fixtures.api_fixtures import (  # noqa: E402
    app,
    client,
    db_app,
    async_client,
)
