"""
Unit tests for domain ports and exceptions.

Tests verify:
- Exception taxonomy and client messages
- Record defaults
- Domain purity (zero framework imports)
"""

import subprocess
from enum import Enum

import pytest

from storifal.domain.exceptions import (
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
from storifal.domain.ports import AuthType, DispatchOutcome, User


class TestExceptionTaxonomy:
    """Each exception belongs to exactly one category."""

    @pytest.mark.parametrize(
        "exc_class,category",
        [
            (MissingFields, InputError),
            (InvalidFormat, InputError),
            (InvalidCharacters, InputError),
            (DisposableEmailRejected, InputError),
            (EmailAlreadyExists, ConflictError),
            (AlreadyVerified, ConflictError),
            (InvalidCredentials, AuthenticationError),
            (EmailNotVerified, AuthenticationError),
            (UserNotFound, NotFoundError),
            (InvalidOrExpiredToken, TokenError),
            (NotificationFailed, TransientError),
        ],
    )
    def test_category(self, exc_class: type, category: type) -> None:
        assert issubclass(exc_class, category)
        assert issubclass(exc_class, StorifalError)

    def test_weak_password_is_input_error(self) -> None:
        assert isinstance(WeakPassword(["contain a number"]), InputError)

    def test_default_message(self) -> None:
        assert str(EmailAlreadyExists()) == "Email already exists."
        assert EmailAlreadyExists().message == "Email already exists."

    def test_custom_message(self) -> None:
        exc = MissingFields("Email is required.")
        assert exc.message == "Email is required."
        assert MissingFields().message == "All fields are required."

    def test_weak_password_message_lists_rules(self) -> None:
        exc = WeakPassword(["contain a number", "contain an uppercase letter"])
        assert exc.message == "Password must contain a number, contain an uppercase letter."
        assert exc.unmet_rules == ["contain a number", "contain an uppercase letter"]


class TestRecords:
    def test_user_defaults(self) -> None:
        user = User(id="1", name="Ada", email="a@x.com", password="h")
        assert user.is_verified is False
        assert user.email_verification_token is None
        assert user.auth_type == AuthType.MANUAL

    def test_auth_type_values(self) -> None:
        assert issubclass(AuthType, Enum)
        assert {t.value for t in AuthType} == {"manual", "external"}

    def test_dispatch_outcome_values(self) -> None:
        assert {o.value for o in DispatchOutcome} == {"sent", "failed"}


class TestDomainPurity:
    """Domain layer imports no web, validation-model or database framework."""

    @pytest.mark.parametrize(
        "pattern",
        [
            "from fastapi",
            "import fastapi",
            "from pydantic",
            "import pydantic",
            "from psycopg",
            "import psycopg",
            "from jose",
            "import bcrypt",
        ],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        result = subprocess.run(
            ["grep", "-r", pattern, "storifal/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{pattern} found: {result.stdout}"
