"""
Auth API routes.

Defines REST endpoints for the account lifecycle. Handlers are plain
``def`` so bcrypt and database calls run in FastAPI's threadpool.
Domain errors propagate to the exception handlers in ``storifal.api.errors``.
"""

from fastapi import APIRouter, Depends, Query, status

from storifal.api.dependencies import get_auth_service, get_current_user
from storifal.api.models import (
    CheckEmailRequest,
    CheckEmailResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserSummary,
)
from storifal.domain.auth import AuthService
from storifal.domain.ports import User

router = APIRouter(tags=["auth"])

REGISTERED_MESSAGE = "Verification link sent to your email. Please verify your account."
VERIFIED_MESSAGE = "Email verified successfully. You can now log in."
LOGIN_MESSAGE = "Login successful."


def _summary(user: User) -> UserSummary:
    return UserSummary(id=user.id, name=user.name, email=user.email)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or email already exists"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Register a new user",
    description="Submit name, email and password to register. "
    "A verification link will be sent to the provided email.",
)
def register(
    request_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """
    Register a new user and send the verification link.

    - **name**: Display name
    - **email**: Valid, non-disposable email address
    - **password**: At least 6 characters with lowercase, uppercase, digit and symbol
    """
    result = service.register(request_data.name, request_data.email, request_data.password)
    return RegisterResponse(message=REGISTERED_MESSAGE, user_id=result.user_id)


@router.get(
    "/verify-email",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or expired token, or already verified"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
    summary="Verify email address",
    description="Consume the token from the verification link.",
)
def verify_email(
    token: str | None = Query(default=None),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    service.verify_email(token)
    return MessageResponse(message=VERIFIED_MESSAGE)


@router.post(
    "/check-email",
    response_model=CheckEmailResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid email"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Check whether an email is registered",
)
def check_email(
    request_data: CheckEmailRequest,
    service: AuthService = Depends(get_auth_service),
) -> CheckEmailResponse:
    return CheckEmailResponse(exists=service.email_exists(request_data.email))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
        403: {"model": ErrorResponse, "description": "Email not verified"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Log in and receive a bearer token",
)
def login(
    request_data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password return the identical 401 response.
    """
    result = service.login(request_data.email, request_data.password)
    return LoginResponse(message=LOGIN_MESSAGE, token=result.token, user=_summary(result.user))


@router.get(
    "/me",
    response_model=UserSummary,
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired token"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
    summary="Current user",
    description="Return the user identified by the bearer token from login.",
)
def me(user: User = Depends(get_current_user)) -> UserSummary:
    return _summary(user)
