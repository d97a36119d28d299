"""Repository adapters - Database implementations."""

from .postgres import PostgresContactRepository, PostgresUserRepository, run_migrations

__all__ = ["PostgresContactRepository", "PostgresUserRepository", "run_migrations"]
