"""
Auth domain service - registration, email verification and login.

This module contains the core business logic for user accounts:

Verification lifecycle (forward-only)
=====================================

States:
- Unverified: after registration; a 30-minute verification token is issued
- Verified: terminal; set by a successful verify_email call

Valid Transitions:
    Unverified -> Verified   (valid, unexpired token whose email matches a user)

Login never succeeds for an unverified user. Unknown email and wrong
password produce the same InvalidCredentials error so the response
cannot be used to enumerate accounts.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

from .exceptions import (
    AlreadyVerified,
    DisposableEmailRejected,
    EmailAlreadyExists,
    EmailNotVerified,
    InvalidCredentials,
    InvalidOrExpiredToken,
    MissingFields,
    UserNotFound,
)
from .ports import (
    AuthType,
    DispatchOutcome,
    DisposableEmailPolicy,
    NotificationSender,
    PasswordHasher,
    TokenIssuer,
    User,
    UserRepository,
)
from .validation import (
    ensure_email_format,
    ensure_password_strength,
    ensure_storable_text,
    is_blank,
)

logger = logging.getLogger(__name__)

VERIFICATION_TOKEN_TTL = timedelta(minutes=30)
ACCESS_TOKEN_TTL = timedelta(days=7)


@dataclass
class RegistrationResult:
    """Outcome of a successful registration."""

    user_id: str


@dataclass
class LoginResult:
    """Bearer token plus the sanitized user it was issued for."""

    token: str
    user: User


@dataclass
class AuthService:
    """
    Domain service for the account lifecycle.

    Orchestrates validation, repository lookups, hashing, token issuance
    and verification email dispatch.
    """

    repository: UserRepository
    hasher: PasswordHasher
    tokens: TokenIssuer
    notifier: NotificationSender
    disposable_policy: DisposableEmailPolicy
    verification_token_ttl: timedelta = VERIFICATION_TOKEN_TTL
    access_token_ttl: timedelta = ACCESS_TOKEN_TTL

    def register(self, name: str | None, email: str | None, password: str | None) -> RegistrationResult:
        """
        Register a new unverified user and send the verification link.

        Returns:
            RegistrationResult with the new user's identifier

        Raises:
            MissingFields: If any field is missing or empty
            InvalidCharacters: If the name contains a NUL character
            InvalidFormat: If the email is malformed
            DisposableEmailRejected: If the email domain is a throwaway inbox
            WeakPassword: If the password fails the strength rules
            EmailAlreadyExists: If the email is already registered
        """
        if is_blank(name) or is_blank(email) or not password:
            raise MissingFields()

        ensure_storable_text(name)
        ensure_email_format(email)
        if self.disposable_policy.is_disposable(email):
            raise DisposableEmailRejected()
        ensure_password_strength(password)

        if self.repository.find_by_email(email) is not None:
            raise EmailAlreadyExists()

        password_hash = self.hasher.hash(password)
        token = self.tokens.sign({"email": email}, self.verification_token_ttl)

        # The unique constraint still decides concurrent duplicates here
        user = self.repository.create(
            name=name,
            email=email,
            password_hash=password_hash,
            verification_token=token,
            auth_type=AuthType.MANUAL,
        )
        logger.info("Registered user %s", user.id)

        self._dispatch_verification(email, token)
        return RegistrationResult(user_id=user.id)

    def verify_email(self, token: str | None) -> User:
        """
        Consume a verification token and mark its user verified.

        Raises:
            InvalidOrExpiredToken: Missing, tampered, expired or malformed token
            UserNotFound: No user has the token's email
            AlreadyVerified: The user was verified before
        """
        if not token:
            raise InvalidOrExpiredToken()

        claims = self.tokens.verify(token)
        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidOrExpiredToken()

        user = self.repository.find_by_email(email)
        if user is None:
            raise UserNotFound()
        if user.is_verified:
            raise AlreadyVerified()

        # Lost a race with a concurrent verification of the same token
        if not self.repository.mark_verified(user.id):
            raise AlreadyVerified()

        user.is_verified = True
        user.email_verification_token = None
        logger.info("Verified email for user %s", user.id)
        return user

    def email_exists(self, email: str | None) -> bool:
        """
        Report whether any user (verified or not) has this email.

        Raises:
            MissingFields: If the email is missing
            InvalidFormat: If the email is malformed
        """
        if is_blank(email):
            raise MissingFields("Email is required.")
        ensure_email_format(email)
        return self.repository.find_by_email(email) is not None

    def login(self, email: str | None, password: str | None) -> LoginResult:
        """
        Authenticate with email and password and issue a bearer token.

        Raises:
            MissingFields: If email or password is missing
            InvalidFormat: If the email is malformed
            InvalidCredentials: Unknown email or wrong password
            EmailNotVerified: Correct account but email not yet verified
        """
        if is_blank(email) or not password:
            raise MissingFields("Email and password are required.")
        ensure_email_format(email)

        user = self.repository.find_by_email(email)
        if user is None:
            # Burn the same bcrypt time as a real comparison
            self.hasher.compare(password, None)
            raise InvalidCredentials()

        if not user.is_verified:
            raise EmailNotVerified()

        if not self.hasher.compare(password, user.password):
            raise InvalidCredentials()

        token = self.tokens.sign(
            {"userId": user.id, "email": user.email}, self.access_token_ttl
        )
        logger.info("Login: user %s", user.id)
        return LoginResult(token=token, user=user)

    def authenticate(self, token: str | None) -> User:
        """
        Resolve a bearer token issued by login to its user.

        Raises:
            InvalidOrExpiredToken: Missing or invalid token, or a token
                without a user id (e.g. a verification token)
            UserNotFound: The user no longer exists
        """
        if not token:
            raise InvalidOrExpiredToken()
        claims = self.tokens.verify(token)
        user_id = claims.get("userId")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidOrExpiredToken()

        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def _dispatch_verification(self, email: str, token: str) -> DispatchOutcome:
        """
        Send the verification link once, best-effort.

        Delivery errors are logged and reported as FAILED, never raised:
        the user record stays and registration still succeeds.
        """
        try:
            self.notifier.send_verification_link(email, token)
        except Exception:
            logger.exception("Verification email to %s could not be sent", email)
            return DispatchOutcome.FAILED
        return DispatchOutcome.SENT
