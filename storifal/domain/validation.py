"""
Input validation rules shared by the auth and contact flows.
"""

import re

from email_validator import EmailNotValidError, validate_email

from .exceptions import InvalidCharacters, InvalidFormat, WeakPassword

PASSWORD_MIN_LENGTH = 6
PASSWORD_SYMBOLS = "@$!%*?&"

_ALLOWED_PASSWORD = re.compile(r"^[A-Za-z\d" + re.escape(PASSWORD_SYMBOLS) + r"]*$")

# (rule description, predicate) pairs, checked in order
_PASSWORD_RULES = [
    (
        f"be at least {PASSWORD_MIN_LENGTH} characters long",
        lambda p: len(p) >= PASSWORD_MIN_LENGTH,
    ),
    ("contain a lowercase letter", lambda p: re.search(r"[a-z]", p) is not None),
    ("contain an uppercase letter", lambda p: re.search(r"[A-Z]", p) is not None),
    ("contain a number", lambda p: re.search(r"\d", p) is not None),
    (
        f"contain a special character ({PASSWORD_SYMBOLS})",
        lambda p: any(c in PASSWORD_SYMBOLS for c in p),
    ),
    (
        f"only use letters, numbers and {PASSWORD_SYMBOLS}",
        lambda p: _ALLOWED_PASSWORD.match(p) is not None,
    ),
]


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def ensure_storable_text(*values: str) -> None:
    """
    Raises:
        InvalidCharacters: If any value contains a NUL character, which
            text columns cannot hold.
    """
    if any("\x00" in value for value in values):
        raise InvalidCharacters()


def ensure_email_format(email: str) -> None:
    """
    Reject syntactically malformed addresses.

    Only syntax is checked; no DNS lookups are made.

    Raises:
        InvalidFormat: If the address is not well-formed.
    """
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise InvalidFormat() from None


def unmet_password_rules(password: str) -> list[str]:
    """Return the descriptions of every rule ``password`` fails."""
    return [rule for rule, check in _PASSWORD_RULES if not check(password)]


def ensure_password_strength(password: str) -> None:
    """
    Raises:
        WeakPassword: Listing every unmet rule.
    """
    unmet = unmet_password_rules(password)
    if unmet:
        raise WeakPassword(unmet)
