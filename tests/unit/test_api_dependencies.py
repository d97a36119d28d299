"""
Unit tests for dependency factories.
"""

from datetime import timedelta
from unittest.mock import MagicMock

from storifal.adapters.repository.postgres import PostgresUserRepository
from storifal.adapters.security import BcryptPasswordHasher, JoseTokenIssuer
from storifal.adapters.smtp.console import ConsoleNotificationSender
from storifal.adapters.smtp.sender import SmtpNotificationSender
from storifal.api.dependencies import (
    get_auth_service,
    get_disposable_policy,
    get_notification_sender,
)
from storifal.config.settings import Settings


def make_request() -> MagicMock:
    request = MagicMock()
    request.app.state.pool = MagicMock()
    return request


class TestNotificationSenderSelection:
    def test_console_backend(self) -> None:
        settings = Settings(_env_file=None, jwt_secret_key="s", email_backend="console")
        assert isinstance(get_notification_sender(settings), ConsoleNotificationSender)

    def test_smtp_backend(self) -> None:
        settings = Settings(
            _env_file=None,
            jwt_secret_key="s",
            email_backend="smtp",
            smtp_username="u",
            smtp_password="p",
        )
        assert isinstance(get_notification_sender(settings), SmtpNotificationSender)


class TestAuthServiceWiring:
    def test_components_built_from_settings(self) -> None:
        settings = Settings(
            _env_file=None,
            jwt_secret_key="s",
            verification_token_ttl_minutes=45,
            access_token_ttl_days=3,
        )

        service = get_auth_service(make_request(), settings)

        assert isinstance(service.repository, PostgresUserRepository)
        assert isinstance(service.hasher, BcryptPasswordHasher)
        assert isinstance(service.tokens, JoseTokenIssuer)
        assert service.verification_token_ttl == timedelta(minutes=45)
        assert service.access_token_ttl == timedelta(days=3)

    def test_disposable_policy_is_reused(self) -> None:
        settings = Settings(_env_file=None, jwt_secret_key="s", disposable_domains_extra=["junk.test"])
        first = get_disposable_policy(settings)
        assert first is get_disposable_policy(settings)
        assert first.is_disposable("x@junk.test") is True
