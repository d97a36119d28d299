"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting domain services
and infrastructure adapters into routes. Every adapter is constructed
from the Settings object rather than reading the environment itself.
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from psycopg_pool import ConnectionPool

from storifal.adapters.repository.postgres import (
    PostgresContactRepository,
    PostgresUserRepository,
)
from storifal.adapters.security import (
    BcryptPasswordHasher,
    BlocklistDisposablePolicy,
    JoseTokenIssuer,
)
from storifal.adapters.smtp.console import ConsoleNotificationSender
from storifal.adapters.smtp.sender import SmtpNotificationSender
from storifal.config.settings import Settings, get_settings
from storifal.domain.auth import AuthService
from storifal.domain.contact import ContactService
from storifal.domain.exceptions import InvalidOrExpiredToken
from storifal.domain.ports import NotificationSender, User


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_user_repository(request: Request) -> PostgresUserRepository:
    """Create user repository with connection pool from app state."""
    return PostgresUserRepository(get_pool(request))


def get_contact_repository(request: Request) -> PostgresContactRepository:
    """Create contact repository with connection pool from app state."""
    return PostgresContactRepository(get_pool(request))


def get_password_hasher(settings: Settings = Depends(get_settings)) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_cost)


def get_token_issuer(settings: Settings = Depends(get_settings)) -> JoseTokenIssuer:
    return JoseTokenIssuer(settings.jwt_secret_key, settings.jwt_algorithm)


def get_notification_sender(settings: Settings = Depends(get_settings)) -> NotificationSender:
    """Select the verification email transport named by ``email_backend``."""
    if settings.email_backend == "smtp":
        return SmtpNotificationSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            frontend_url=settings.frontend_url,
            username=settings.smtp_username,
            password=settings.smtp_password,
            sender=settings.smtp_sender,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )
    return ConsoleNotificationSender(settings.frontend_url)


@lru_cache
def _disposable_policy(extra_domains: tuple[str, ...]) -> BlocklistDisposablePolicy:
    # The packaged blocklist is large; build the lookup set once per configuration
    return BlocklistDisposablePolicy(extra_domains)


def get_disposable_policy(settings: Settings = Depends(get_settings)) -> BlocklistDisposablePolicy:
    return _disposable_policy(tuple(settings.disposable_domains_extra))


def get_auth_service(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Create auth service with injected dependencies.

    Wires together the repository, hasher, token issuer, notification
    sender and disposable-email policy for the domain service.
    """
    return AuthService(
        repository=get_user_repository(request),
        hasher=get_password_hasher(settings),
        tokens=get_token_issuer(settings),
        notifier=get_notification_sender(settings),
        disposable_policy=get_disposable_policy(settings),
        verification_token_ttl=timedelta(minutes=settings.verification_token_ttl_minutes),
        access_token_ttl=timedelta(days=settings.access_token_ttl_days),
    )


def get_contact_service(request: Request) -> ContactService:
    """Create contact service with the contact repository."""
    return ContactService(repository=get_contact_repository(request))


# Bearer scheme for OpenAPI documentation; missing headers are handled below
http_bearer = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the bearer token issued by login to its user.

    Returns 401 with a generic message for a missing, invalid or
    expired token.
    """
    token = credentials.credentials if credentials is not None else None
    try:
        return service.authenticate(token)
    except InvalidOrExpiredToken:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=InvalidOrExpiredToken.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from None
