"""
Shared fixtures for integration tests.

Requires PostgreSQL at DATABASE_URL (via docker-compose).
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool

from storifal.adapters.repository.postgres import run_migrations
from storifal.config.settings import get_settings


@pytest.fixture(scope="module")
def pool() -> Generator[ConnectionPool, None, None]:
    """Create connection pool and apply migrations."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture(autouse=True)
def clean_database(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Empty the tables before each database test."""
    if "pool" in request.fixturenames:
        pool = request.getfixturevalue("pool")
        with pool.connection() as conn:
            conn.execute("DELETE FROM users")
            conn.execute("DELETE FROM contact_submissions")
            conn.commit()
    yield
