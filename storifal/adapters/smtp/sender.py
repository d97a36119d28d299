"""
SMTP notification sender adapter - Implements NotificationSender protocol.

Delivers verification links through an SMTP relay using the standard
library client. One attempt per message; failures surface as
NotificationFailed for the caller to log.
"""

import logging
import smtplib

from storifal.domain.exceptions import NotificationFailed

from .message import build_verification_link, build_verification_message

logger = logging.getLogger(__name__)


class SmtpNotificationSender:
    """
    Implements NotificationSender protocol via smtplib.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        host: str,
        port: int,
        frontend_url: str,
        username: str = "",
        password: str = "",
        sender: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._frontend_url = frontend_url
        self._username = username
        self._password = password
        self._sender = sender or username
        self._use_tls = use_tls
        self._timeout = timeout

    def send_verification_link(self, email: str, token: str) -> None:
        """
        Send the verification email.

        Raises:
            NotificationFailed: On any SMTP or connection error
        """
        link = build_verification_link(self._frontend_url, token)
        message = build_verification_message(self._sender, email, link)

        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as smtp:
                if self._use_tls:
                    smtp.starttls()
                if self._username:
                    smtp.login(self._username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationFailed(f"SMTP delivery to {email} failed: {e}") from e

        logger.info("Verification email sent to %s", email)
