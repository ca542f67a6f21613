"""
Tests for the email backends and HTML templates.
"""

from datetime import datetime
from unittest.mock import AsyncMock, patch

import pytest

from hirehub.core.config import Settings
from hirehub.services import email_templates
from hirehub.services.email_service import LoggingEmailService, SmtpEmailService, html_to_text


def _smtp_settings(**overrides):
    values = {
        "smtp_host": "smtp.example.com",
        "smtp_port": 587,
        "smtp_use_ssl": False,
        "smtp_user": "mailer",
        "smtp_password": "pw",
        "smtp_from_email": "no-reply@example.com",
        "smtp_from_name": "HireHub",
    }
    values.update(overrides)
    return Settings(**values)


def _mock_smtp():
    server = AsyncMock()
    smtp = patch("hirehub.services.email_service.aiosmtplib.SMTP")
    return smtp, server


class TestHtmlToText:
    def test_strips_tags_and_keeps_lines(self):
        assert html_to_text("<p>Hi <b>Sam</b></p><p>Line<br/>two</p>") == "Hi Sam\nLine\ntwo"


class TestLoggingBackend:
    @pytest.mark.asyncio
    async def test_always_succeeds(self, caplog):
        caplog.set_level("INFO")
        sent = await LoggingEmailService().send_email("sam@example.com", "Hello", "<p>Body</p>")
        assert sent is True
        assert "sam@example.com" in caplog.text


class TestSmtpBackend:
    def test_build_message(self):
        service = SmtpEmailService(_smtp_settings())
        message = service.build_message("sam@example.com", "Subject", "<p>Body</p>")
        assert message["To"] == "sam@example.com"
        assert message["From"] == "HireHub <no-reply@example.com>"
        parts = message.get_payload()
        assert [p.get_content_type() for p in parts] == ["text/plain", "text/html"]

    @pytest.mark.asyncio
    async def test_send_with_starttls_and_login(self, caplog):
        caplog.set_level("INFO")
        smtp, server = _mock_smtp()
        with smtp as smtp_class:
            smtp_class.return_value.__aenter__.return_value = server
            sent = await SmtpEmailService(_smtp_settings()).send_email("sam@example.com", "S", "<p>B</p>")

        assert sent is True
        smtp_class.assert_called_once_with(
            hostname="smtp.example.com", port=587, use_tls=False, start_tls=True
        )
        server.login.assert_awaited_once_with("mailer", "pw")
        server.send_message.assert_awaited_once()
        assert "Email sent successfully to sam@example.com" in caplog.text

    @pytest.mark.asyncio
    async def test_ssl_without_credentials(self):
        smtp, server = _mock_smtp()
        with smtp as smtp_class:
            smtp_class.return_value.__aenter__.return_value = server
            service = SmtpEmailService(_smtp_settings(smtp_port=465, smtp_use_ssl=True, smtp_user=""))
            sent = await service.send_email("sam@example.com", "S", "<p>B</p>")

        assert sent is True
        smtp_class.assert_called_once_with(hostname="smtp.example.com", port=465, use_tls=True, start_tls=None)
        server.login.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_returns_false(self, caplog):
        smtp, server = _mock_smtp()
        server.send_message.side_effect = OSError("connection refused")
        with smtp as smtp_class:
            smtp_class.return_value.__aenter__.return_value = server
            sent = await SmtpEmailService(_smtp_settings()).send_email("sam@example.com", "S", "<p>B</p>")
        assert sent is False

        record = next(r for r in caplog.records if r.levelname == "ERROR")
        assert record.msg == "Failed to send email to %s: %s"
        assert record.args[0] == "sam@example.com"
        assert record.getMessage() == "Failed to send email to sam@example.com: connection refused"


class TestTemplates:
    def test_values_are_escaped(self):
        html = email_templates.shortlisted("<script>", "Dev & Ops", "Acme")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "Dev &amp; Ops" in html

    def test_interview_date(self):
        html = email_templates.interview_scheduled("Sam", "Dev", "Acme", datetime(2030, 1, 2, 9, 0))
        assert "Wednesday, 02 January 2030 09:00" in html

    def test_password_reset_link(self):
        html = email_templates.password_reset("Sam", "https://app.example.com/reset-password?token=abc", 2)
        assert 'href="https://app.example.com/reset-password?token=abc"' in html
        assert "expires in 2 hours" in html
