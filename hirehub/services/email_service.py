"""
Email service for notifications and password reset links.

Two backends, chosen by settings.email_backend:
- "log":  writes the email to the application log (development default)
- "smtp": sends through an SMTP relay with aiosmtplib
"""

import logging
import re
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from functools import lru_cache
from typing import Optional

import aiosmtplib

from hirehub.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


def html_to_text(html: str) -> str:
    """Plain-text alternative: drop tags, keep line breaks."""
    text = re.sub(r"<br\s*/?>", "\n", html, flags=re.IGNORECASE)
    text = re.sub(r"</p\s*>", "\n", text, flags=re.IGNORECASE)
    text = _TAG_RE.sub("", text)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


class EmailService:
    """Interface: send one email, report success. Must never raise."""

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None
    ) -> bool:
        raise NotImplementedError


class LoggingEmailService(EmailService):
    """Pretends to send by logging the message."""

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None
    ) -> bool:
        logger.info(
            "Email (log backend) to=%s subject=%r\n%s",
            to_email, subject, text_content or html_to_text(html_content)
        )
        return True


class SmtpEmailService(EmailService):
    """Email service sending over SMTP"""

    def __init__(self, settings: Settings):
        self.smtp_server = settings.smtp_host
        self.smtp_port = settings.smtp_port
        self.use_ssl = settings.smtp_use_ssl
        self.smtp_username = settings.smtp_user
        self.smtp_password = settings.smtp_password
        self.from_email = settings.smtp_from_email
        self.from_name = settings.smtp_from_name

    def build_message(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None
    ) -> MIMEMultipart:
        message = MIMEMultipart('alternative')
        message['Subject'] = subject
        message['From'] = f"{self.from_name} <{self.from_email}>"
        message['To'] = to_email

        # Plain part first so clients prefer the HTML part
        message.attach(MIMEText(text_content or html_to_text(html_content), 'plain'))
        message.attach(MIMEText(html_content, 'html'))
        return message

    async def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        text_content: Optional[str] = None
    ) -> bool:
        """Send an email using SMTP"""
        try:
            message = self.build_message(to_email, subject, html_content, text_content)

            # Implicit TLS on SSL ports, otherwise upgrade with STARTTLS
            async with aiosmtplib.SMTP(
                hostname=self.smtp_server,
                port=self.smtp_port,
                use_tls=self.use_ssl,
                start_tls=None if self.use_ssl else True,
            ) as server:
                if self.smtp_username:
                    await server.login(self.smtp_username, self.smtp_password)
                await server.send_message(message)

            logger.info("Email sent successfully to %s", to_email)
            return True

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            return False


@lru_cache()
def get_email_service() -> EmailService:
    settings = get_settings()
    if settings.email_backend.lower() == "smtp":
        return SmtpEmailService(settings)
    return LoggingEmailService()
