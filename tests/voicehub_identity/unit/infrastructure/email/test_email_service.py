"""Tests for the SMTP email service."""

from unittest.mock import MagicMock, patch

import pytest

from voicehub_config import Settings
from voicehub_identity.infrastructure.email import EmailService

SMTP_PATH = "voicehub_identity.infrastructure.email.email_service.smtplib"


def smtp_settings(**overrides) -> Settings:
    values = {
        "smtp_enabled": True,
        "smtp_host": "smtp.example.com",
        "smtp_port": 587,
        "smtp_user": "mailer",
        "smtp_password": "secret",
        "smtp_from_email": "noreply@example.com",
        "smtp_use_tls": True,
        "smtp_starttls": True,
    }
    values.update(overrides)
    return Settings(**values)


class TestEmailService:
    def test_disabled_smtp_sends_nothing(self):
        service = EmailService(smtp_settings(smtp_enabled=False))

        with patch(SMTP_PATH) as smtplib:
            service.send_reviewer_approved_email(
                "reviewer@example.com",
                "Jane",
                "https://voice.example.com/dashboard",
            )
            service.send_reviewer_rejected_email("reviewer@example.com", "Jane")

        smtplib.SMTP.assert_not_called()
        smtplib.SMTP_SSL.assert_not_called()

    def test_approval_email_over_starttls(self):
        service = EmailService(smtp_settings())

        with patch(SMTP_PATH) as smtplib:
            server = MagicMock()
            smtplib.SMTP.return_value.__enter__.return_value = server

            service.send_reviewer_approved_email(
                "reviewer@example.com",
                "Jane",
                "https://voice.example.com/dashboard",
            )

        smtplib.SMTP.assert_called_once_with("smtp.example.com", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "secret")
        message = server.send_message.call_args[0][0]
        assert message["To"] == "reviewer@example.com"
        assert message["Subject"] == "Reviewer Application Approved - Common Voice Luo"
        assert message["From"] == "Common Voice Luo <noreply@example.com>"
        text = message.get_payload()[0].get_payload(decode=True).decode()
        assert "Congratulations, Jane!" in text
        assert "https://voice.example.com/dashboard" in text

    def test_rejection_email_over_implicit_tls(self):
        service = EmailService(smtp_settings(smtp_port=465, smtp_starttls=False))

        with patch(SMTP_PATH) as smtplib:
            server = MagicMock()
            smtplib.SMTP_SSL.return_value.__enter__.return_value = server

            service.send_reviewer_rejected_email("reviewer@example.com", None)

        smtplib.SMTP.assert_not_called()
        message = server.send_message.call_args[0][0]
        assert message["Subject"] == "Reviewer Application Update - Common Voice Luo"
        text = message.get_payload()[0].get_payload(decode=True).decode()
        assert "Dear Reviewer," in text

    def test_smtp_failure_propagates(self):
        service = EmailService(smtp_settings())

        with patch(SMTP_PATH) as smtplib:
            smtplib.SMTP.side_effect = OSError("connection refused")

            with pytest.raises(OSError):
                service.send_reviewer_rejected_email("reviewer@example.com", "Jane")
