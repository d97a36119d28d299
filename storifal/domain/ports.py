"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the records the domain works with and the interfaces
(ports) it requires from infrastructure. Adapters implement these
protocols through structural subtyping.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Protocol


class AuthType(str, Enum):
    """How a user authenticates."""

    MANUAL = "manual"
    EXTERNAL = "external"


class DispatchOutcome(Enum):
    """
    Result of a best-effort notification dispatch.

    Returned by the orchestrator's dispatch step and discarded by callers:
    delivery failure never changes the result of the operation.
    """

    SENT = "sent"
    FAILED = "failed"


@dataclass
class User:
    """
    Persistent user record.

    Verification lifecycle (forward-only):
        unverified -> verified   (successful email verification)

    ``password`` holds the bcrypt digest and is None for externally
    authenticated users. ``email_verification_token`` is cleared once
    the verification succeeds.
    """

    id: str
    name: str
    email: str
    password: str | None
    is_verified: bool = False
    email_verification_token: str | None = None
    auth_type: AuthType = AuthType.MANUAL
    created_at: datetime | None = None


@dataclass
class Contact:
    """Append-only contact form submission."""

    id: str
    full_name: str
    email: str
    message: str
    created_at: datetime | None = None


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def find_by_email(self, email: str) -> User | None:
        """Return the user with exactly this email, or None."""
        ...

    def find_by_id(self, user_id: str) -> User | None:
        """Return the user with this identifier, or None."""
        ...

    def create(
        self,
        name: str,
        email: str,
        password_hash: str | None,
        verification_token: str | None,
        auth_type: AuthType = AuthType.MANUAL,
    ) -> User:
        """
        Persist a new unverified user.

        Raises:
            EmailAlreadyExists: If the storage unique constraint on email
                rejects the insert (including concurrent duplicates).
        """
        ...

    def save(self, user: User) -> None:
        """
        Persist mutable fields of an existing user.

        Implementations must never move ``is_verified`` from True to False.
        """
        ...

    def mark_verified(self, user_id: str) -> bool:
        """
        Flip ``is_verified`` to True and clear the verification token.

        The check and the write are one atomic step: of any number of
        concurrent calls for one user, exactly one returns True.

        Returns:
            True if this call verified the user, False if it already was
            verified (or the user does not exist)
        """
        ...


class ContactRepository(Protocol):
    """Port interface for contact submission persistence."""

    def create(self, full_name: str, email: str, message: str) -> Contact:
        """Persist a contact submission and return the stored record."""
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Return a salted one-way digest of ``plaintext``."""
        ...

    def compare(self, plaintext: str, digest: str | None) -> bool:
        """Constant-time check of ``plaintext`` against ``digest``."""
        ...


class TokenIssuer(Protocol):
    """Port interface for signed, time-bounded tokens."""

    def sign(self, claims: dict[str, Any], ttl: timedelta) -> str:
        """Return a signed token carrying ``claims`` valid for ``ttl``."""
        ...

    def verify(self, token: str) -> dict[str, Any]:
        """
        Validate signature and expiry and return the claims.

        Raises:
            InvalidOrExpiredToken: On any validation failure.
        """
        ...


class NotificationSender(Protocol):
    """Port interface for verification email delivery."""

    def send_verification_link(self, email: str, token: str) -> None:
        """
        Deliver a verification link embedding ``token`` to ``email``.

        May raise; callers treat delivery as best-effort.
        """
        ...


class DisposableEmailPolicy(Protocol):
    """Port interface for throwaway-inbox detection."""

    def is_disposable(self, email: str) -> bool:
        """True if the address belongs to a disposable-email domain."""
        ...
