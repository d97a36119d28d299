"""
Console notification sender adapter - Implements NotificationSender protocol.

This module provides a console-based implementation of the domain's
notification port, logging verification links for development.
"""

import logging

from .message import build_verification_link

logger = logging.getLogger(__name__)


class ConsoleNotificationSender:
    """
    Implements NotificationSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints verification links to the log.
    """

    def __init__(self, frontend_url: str) -> None:
        self._frontend_url = frontend_url

    def send_verification_link(self, email: str, token: str) -> None:
        """
        Log the verification link (simulates email delivery).

        The link is logged at INFO level to be visible in docker-compose logs.

        Args:
            email: Recipient email address
            token: Signed verification token
        """
        link = build_verification_link(self._frontend_url, token)
        logger.info("[VERIFICATION] Email: %s Link: %s", email, link)
