"""
Contact domain service - contact form submissions.
"""

from dataclasses import dataclass

from .exceptions import MissingFields
from .ports import Contact, ContactRepository
from .validation import ensure_storable_text, is_blank


@dataclass
class ContactService:
    """Validates and stores contact form submissions."""

    repository: ContactRepository

    def submit(self, full_name: str | None, email: str | None, message: str | None) -> Contact:
        """
        Store a submission.

        Raises:
            MissingFields: If any field is missing or empty (nothing is stored)
            InvalidCharacters: If any field contains a NUL character
        """
        if is_blank(full_name) or is_blank(email) or is_blank(message):
            raise MissingFields()
        ensure_storable_text(full_name, email, message)
        return self.repository.create(full_name=full_name, email=email, message=message)
