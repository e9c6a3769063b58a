"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio


@pytest.fixture(scope="function")
def test_database(tmp_path: Path) -> Generator[str, None, None]:
    """Return the URL of a throwaway SQLite database file for this test."""
    dsn = f"sqlite+aiosqlite:///{tmp_path / 'projecthub_test.db'}"
    os.environ["PROJECTHUB_DATABASE_URL"] = dsn
    yield dsn


@pytest_asyncio.fixture(scope="function")
async def db_schema(test_database: str) -> Any:
    """Point the shared engine at the test database and create the tables."""
    from projecthub.database.connection import (
        create_tables,
        dispose_database,
        init_database,
        reset_database,
    )

    reset_database()
    init_database(test_database, force_reinit=True)
    await create_tables()

    yield test_database

    await dispose_database()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_schema: str) -> Any:
    """Provide an async SQLAlchemy session bound to the test database."""
    from projecthub.database.connection import get_async_session

    async with get_async_session() as session:
        yield session


@pytest.fixture(scope="function")
def execute_graphql(db_schema: str) -> Callable[..., Awaitable[Any]]:
    """Execute a GraphQL document against the real schema and test database."""
    from projecthub.graphql.loaders import Loaders
    from projecthub.graphql.schema import schema

    async def _execute(query: str, variables: dict[str, Any] | None = None) -> Any:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value={"loaders": Loaders()},
        )

    return _execute


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
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
