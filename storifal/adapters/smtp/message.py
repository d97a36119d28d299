"""
Verification email content shared by the notification senders.
"""

from email.message import EmailMessage
from urllib.parse import urlencode

SUBJECT = "Email Verification"


def build_verification_link(frontend_url: str, token: str) -> str:
    """Return ``{frontend_url}/auth/verify-email?token=...``."""
    return f"{frontend_url.rstrip('/')}/auth/verify-email?{urlencode({'token': token})}"


def build_verification_message(sender: str, recipient: str, link: str) -> EmailMessage:
    message = EmailMessage()
    message["Subject"] = SUBJECT
    message["From"] = sender
    message["To"] = recipient
    message.set_content(f"Open this link to verify your email: {link}")
    message.add_alternative(
        f'<p>Click <a href="{link}">here</a> to verify your email.</p>',
        subtype="html",
    )
    return message
