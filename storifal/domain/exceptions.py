"""
Domain exceptions - Semantic error types for the auth and contact flows.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Each exception carries the human-readable message shown to clients;
the HTTP layer maps the category (base class) to a status code.
"""


class StorifalError(Exception):
    """Base class for domain errors."""

    message = "Request failed."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InputError(StorifalError):
    """Malformed or missing input - user-correctable."""

    pass


class MissingFields(InputError):
    """One or more required fields are missing or empty."""

    message = "All fields are required."


class InvalidFormat(InputError):
    """Email address is not syntactically valid."""

    message = "Invalid email format."


class InvalidCharacters(InputError):
    """A text field contains characters that cannot be stored (NUL)."""

    message = "Fields must not contain null characters."


class DisposableEmailRejected(InputError):
    """Email belongs to a known throwaway-inbox domain."""

    message = "Disposable emails are not allowed."


class WeakPassword(InputError):
    """Password does not satisfy the strength rules."""

    def __init__(self, unmet_rules: list[str]) -> None:
        self.unmet_rules = list(unmet_rules)
        super().__init__("Password must " + ", ".join(self.unmet_rules) + ".")


class ConflictError(StorifalError):
    """Request conflicts with existing state."""

    pass


class EmailAlreadyExists(ConflictError):
    """A user with this email is already registered."""

    message = "Email already exists."


class AlreadyVerified(ConflictError):
    """Email verification was already completed."""

    message = "Email already verified."


class AuthenticationError(StorifalError):
    """Credentials rejected or account not yet usable."""

    pass


class InvalidCredentials(AuthenticationError):
    """Unknown email or wrong password (deliberately indistinguishable)."""

    message = "Invalid email or password."


class EmailNotVerified(AuthenticationError):
    """Account exists but its email has not been verified."""

    message = "Email is not verified. Please verify your email."


class NotFoundError(StorifalError):
    """Referenced record does not exist."""

    pass


class UserNotFound(NotFoundError):
    """No user matches the token's email or id."""

    message = "User not found."


class TokenError(StorifalError):
    """Token rejected."""

    pass


class InvalidOrExpiredToken(TokenError):
    """Bad signature, expired, malformed or missing token."""

    message = "Invalid or expired token."


class TransientError(StorifalError):
    """Failure of a best-effort side channel. Never surfaced to clients."""

    pass


class NotificationFailed(TransientError):
    """Verification email could not be delivered."""

    message = "Notification delivery failed."
