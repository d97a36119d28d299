"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account lifecycle (register, verify, login)
and contact submission logic. It defines its own port interfaces for
infrastructure abstraction; adapters live in ``storifal.adapters``.
"""

from .auth import AuthService, LoginResult, RegistrationResult
from .contact import ContactService
from .exceptions import (
    AlreadyVerified,
    AuthenticationError,
    ConflictError,
    DisposableEmailRejected,
    EmailAlreadyExists,
    EmailNotVerified,
    InputError,
    InvalidCharacters,
    InvalidCredentials,
    InvalidFormat,
    InvalidOrExpiredToken,
    MissingFields,
    NotFoundError,
    NotificationFailed,
    StorifalError,
    TokenError,
    TransientError,
    UserNotFound,
    WeakPassword,
)
from .ports import (
    AuthType,
    Contact,
    ContactRepository,
    DispatchOutcome,
    DisposableEmailPolicy,
    NotificationSender,
    PasswordHasher,
    TokenIssuer,
    User,
    UserRepository,
)

__all__ = [
    "AlreadyVerified",
    "AuthService",
    "AuthType",
    "AuthenticationError",
    "ConflictError",
    "Contact",
    "ContactRepository",
    "ContactService",
    "DispatchOutcome",
    "DisposableEmailPolicy",
    "DisposableEmailRejected",
    "EmailAlreadyExists",
    "EmailNotVerified",
    "InputError",
    "InvalidCharacters",
    "InvalidCredentials",
    "InvalidFormat",
    "InvalidOrExpiredToken",
    "LoginResult",
    "MissingFields",
    "NotFoundError",
    "NotificationFailed",
    "NotificationSender",
    "PasswordHasher",
    "RegistrationResult",
    "StorifalError",
    "TokenError",
    "TokenIssuer",
    "TransientError",
    "User",
    "UserNotFound",
    "UserRepository",
    "WeakPassword",
]
