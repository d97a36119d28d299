"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
Requires PostgreSQL to be running (via docker-compose).
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from storifal.adapters.repository.postgres import PostgresUserRepository, run_migrations
from storifal.config.settings import get_settings

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool for adversarial tests."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=20,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def repository(pool: ConnectionPool) -> PostgresUserRepository:
    """Create repository instance for each test."""
    return PostgresUserRepository(pool)


@pytest.fixture(autouse=True)
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Clean users table before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield
