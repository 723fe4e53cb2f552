"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import AsyncGenerator, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

# Add src directory to path so imports work without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clientdesk.auth.context import AuthUser
from clientdesk.graphql.context import RequestContext
from clientdesk.store.sql import Collections, default_collections

ADMIN_ROLE = "admin"


@pytest_asyncio.fixture(scope="function")
async def sqlite_database(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared engine at a fresh SQLite file with the tables created."""
    from clientdesk.database.connection import create_tables, dispose_database, init_database

    dsn = f"sqlite:///{tmp_path / 'clientdesk.db'}"
    init_database(dsn, force_reinit=True)
    await create_tables()

    yield dsn

    await dispose_database()


@pytest.fixture(scope="function")
def collections(sqlite_database: str) -> Collections:
    """SQL-backed collections bound to the test database."""
    _ = sqlite_database
    return default_collections()


@pytest.fixture
def admin_user() -> AuthUser:
    return AuthUser(subject="admin-user", role=ADMIN_ROLE, claims={"sub": "admin-user"})


@pytest.fixture
def make_context(admin_user: AuthUser) -> Callable[..., RequestContext]:
    """Build request contexts; authenticated as an admin unless told otherwise."""

    def _make(
        collections: Collections,
        user: AuthUser | None = admin_user,
        required_role: str | None = ADMIN_ROLE,
    ) -> RequestContext:
        return RequestContext(collections=collections, user=user, required_role=required_role)

    return _make


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
