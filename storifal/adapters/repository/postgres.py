"""
PostgreSQL repository adapters - Implement UserRepository and ContactRepository.

This module provides the PostgreSQL implementations of the domain's
repository ports using psycopg3 with raw SQL.

Verification is a conditional UPDATE (mark_verified), so concurrent
verifications of one user flip the flag exactly once.

Email uniqueness is enforced by the ``users_email_key`` constraint, not
by the domain: create() uses INSERT ... ON CONFLICT DO NOTHING, so of
two concurrent registrations for one email exactly one row is inserted
and the other call raises EmailAlreadyExists.
"""

import logging
import uuid
from pathlib import Path

from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from storifal.domain.exceptions import EmailAlreadyExists
from storifal.domain.ports import AuthType, Contact, User

logger = logging.getLogger(__name__)

_USER_COLUMNS = """
    id::text AS id, name, email, password, is_verified,
    email_verification_token, auth_type, created_at
"""

_CONTACT_COLUMNS = "id::text AS id, full_name, email, message, created_at"


def _parse_id(user_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(user_id)
    except (ValueError, TypeError, AttributeError):
        return None


def _to_user(row: dict) -> User:
    return User(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        password=row["password"],
        is_verified=row["is_verified"],
        email_verification_token=row["email_verification_token"],
        auth_type=AuthType(row["auth_type"]),
        created_at=row["created_at"],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_email(self, email: str) -> User | None:
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s"
        with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
        return _to_user(row) if row is not None else None

    def find_by_id(self, user_id: str) -> User | None:
        # Non-UUID ids cannot match
        key = _parse_id(user_id)
        if key is None:
            return None
        sql = f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s"
        with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            cursor.execute(sql, (key,))
            row = cursor.fetchone()
        return _to_user(row) if row is not None else None

    def create(
        self,
        name: str,
        email: str,
        password_hash: str | None,
        verification_token: str | None,
        auth_type: AuthType = AuthType.MANUAL,
    ) -> User:
        """
        Insert a new unverified user.

        Raises:
            EmailAlreadyExists: If the email row already exists
        """
        sql = f"""
            INSERT INTO users (name, email, password, is_verified, email_verification_token, auth_type)
            VALUES (%s, %s, %s, FALSE, %s, %s)
            ON CONFLICT (email) DO NOTHING
            RETURNING {_USER_COLUMNS}
        """
        with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            cursor.execute(sql, (name, email, password_hash, verification_token, auth_type.value))
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            raise EmailAlreadyExists()
        return _to_user(row)

    def save(self, user: User) -> None:
        """
        Persist name, verification flag and verification token.

        ``is_verified`` is OR-ed with the stored value so it never resets.
        """
        sql = """
            UPDATE users
            SET name = %s,
                is_verified = users.is_verified OR %s,
                email_verification_token = %s
            WHERE id = %s
        """
        key = _parse_id(user.id)
        if key is None:
            return
        with self._pool.connection() as conn:
            conn.execute(
                sql,
                (user.name, user.is_verified, user.email_verification_token, key),
            )
            conn.commit()

    def mark_verified(self, user_id: str) -> bool:
        """
        Conditionally verify a user in a single UPDATE.

        The ``NOT is_verified`` predicate makes concurrent callers serialize
        on the row lock; only the first one matches a row.
        """
        key = _parse_id(user_id)
        if key is None:
            return False
        sql = """
            UPDATE users
            SET is_verified = TRUE,
                email_verification_token = NULL
            WHERE id = %s AND NOT is_verified
        """
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (key,))
            flipped = cursor.rowcount == 1
            conn.commit()
        return flipped


class PostgresContactRepository:
    """
    Implements ContactRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def create(self, full_name: str, email: str, message: str) -> Contact:
        sql = f"""
            INSERT INTO contact_submissions (full_name, email, message)
            VALUES (%s, %s, %s)
            RETURNING {_CONTACT_COLUMNS}
        """
        with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
            cursor.execute(sql, (full_name, email, message))
            row = cursor.fetchone()
            conn.commit()

        return Contact(
            id=row["id"],
            full_name=row["full_name"],
            email=row["email"],
            message=row["message"],
            created_at=row["created_at"],
        )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: storifal/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
