"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repository fakes (no database needed for unit tests)
- Fast, real hashing and token adapters
- Domain services wired from the above
"""

import os
import threading
import uuid
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

# Required settings for modules that build Settings at import time
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("FRONTEND_URL", "http://localhost:3000")

from storifal.adapters.security import (  # noqa: E402
    BcryptPasswordHasher,
    BlocklistDisposablePolicy,
    JoseTokenIssuer,
)
from storifal.domain.auth import AuthService  # noqa: E402
from storifal.domain.contact import ContactService  # noqa: E402
from storifal.domain.exceptions import EmailAlreadyExists  # noqa: E402
from storifal.domain.ports import AuthType, Contact, User  # noqa: E402

TEST_SECRET = "test-secret-key"
DISPOSABLE_DOMAINS = {"mailinator.com", "guerrillamail.com", "10minutemail.com"}


class InMemoryUserRepository:
    """UserRepository fake keyed by exact email."""

    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        user = self.users.get(email)
        return _copy(user) if user is not None else None

    def find_by_id(self, user_id: str) -> User | None:
        for user in self.users.values():
            if user.id == user_id:
                return _copy(user)
        return None

    def create(
        self,
        name: str,
        email: str,
        password_hash: str | None,
        verification_token: str | None,
        auth_type: AuthType = AuthType.MANUAL,
    ) -> User:
        if email in self.users:
            raise EmailAlreadyExists()
        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            password=password_hash,
            is_verified=False,
            email_verification_token=verification_token,
            auth_type=auth_type,
            created_at=datetime.now(timezone.utc),
        )
        self.users[email] = user
        return _copy(user)

    def save(self, user: User) -> None:
        stored = self.users[user.email]
        stored.name = user.name
        stored.is_verified = stored.is_verified or user.is_verified
        stored.email_verification_token = user.email_verification_token

    def mark_verified(self, user_id: str) -> bool:
        with self._lock:
            for stored in self.users.values():
                if stored.id == user_id and not stored.is_verified:
                    stored.is_verified = True
                    stored.email_verification_token = None
                    return True
        return False


class InMemoryContactRepository:
    """ContactRepository fake that keeps submissions in a list."""

    def __init__(self) -> None:
        self.contacts: list[Contact] = []

    def create(self, full_name: str, email: str, message: str) -> Contact:
        contact = Contact(
            id=str(uuid.uuid4()),
            full_name=full_name,
            email=email,
            message=message,
            created_at=datetime.now(timezone.utc),
        )
        self.contacts.append(contact)
        return contact


def _copy(user: User) -> User:
    return User(**vars(user))


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def contact_repository() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture
def hasher() -> BcryptPasswordHasher:
    """Real bcrypt at the minimum cost factor to keep tests fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> JoseTokenIssuer:
    return JoseTokenIssuer(TEST_SECRET)


@pytest.fixture
def notifier() -> Mock:
    return Mock()


@pytest.fixture
def disposable_policy() -> BlocklistDisposablePolicy:
    return BlocklistDisposablePolicy(base=DISPOSABLE_DOMAINS)


@pytest.fixture
def auth_service(
    user_repository: InMemoryUserRepository,
    hasher: BcryptPasswordHasher,
    tokens: JoseTokenIssuer,
    notifier: Mock,
    disposable_policy: BlocklistDisposablePolicy,
) -> AuthService:
    return AuthService(
        repository=user_repository,
        hasher=hasher,
        tokens=tokens,
        notifier=notifier,
        disposable_policy=disposable_policy,
    )


@pytest.fixture
def contact_service(contact_repository: InMemoryContactRepository) -> ContactService:
    return ContactService(repository=contact_repository)
