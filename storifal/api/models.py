"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are optional at this layer: missing or empty values are
rejected by the domain services with a 400 and a readable message.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: str = Field(alias="userId")


class MessageResponse(BaseModel):
    """Response carrying only a message."""

    message: str


class CheckEmailRequest(BaseModel):
    """Request model for the duplicate-email check."""

    email: str | None = None


class CheckEmailResponse(BaseModel):
    """Existence flag only; never which fields or verification state."""

    exists: bool


class LoginRequest(BaseModel):
    """Request model for login."""

    email: str | None = None
    password: str | None = None


class UserSummary(BaseModel):
    """Sanitized user - never the password hash or tokens."""

    id: str
    name: str
    email: str


class LoginResponse(BaseModel):
    """Response model for successful login."""

    message: str
    token: str
    user: UserSummary


class ContactRequest(BaseModel):
    """Request model for a contact form submission."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    email: str | None = None
    message: str | None = None


class ContactOut(BaseModel):
    """Stored contact submission as echoed to the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str = Field(alias="fullName")
    email: str
    message: str
    created_at: datetime | None = Field(default=None, alias="createdAt")


class ContactResponse(BaseModel):
    """Response model for a stored contact submission."""

    message: str
    contact: ContactOut


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
