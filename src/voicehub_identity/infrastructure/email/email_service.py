import logging
import smtplib
import ssl
from datetime import date
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from voicehub_config.settings import Settings

logger = logging.getLogger(__name__)

REVIEWER_APPROVED_SUBJECT = "Reviewer Application Approved - Common Voice Luo"

REVIEWER_APPROVED_TEXT = """Congratulations, {name}!

Your reviewer application has been approved by our admin team.

You can now access the reviewer dashboard and start reviewing voice
recordings contributed by our community members:
{dashboard_link}

-- Common Voice Luo
"""

REVIEWER_APPROVED_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px; box-shadow: 0 2px 4px rgba(0,0,0,0.1);">
        <h2 style="color: #1a1a1a; margin-top: 0;">Congratulations, {name}!</h2>
        <p style="color: #4a4a4a; line-height: 1.6;">Your reviewer application has been <strong style="color: #10b981;">approved</strong> by our admin team.</p>
        <p style="color: #4a4a4a; line-height: 1.6;">You can now access the reviewer dashboard and start reviewing voice recordings contributed by our community members.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{dashboard_link}" style="display: inline-block; padding: 14px 28px; background-color: #667eea; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600; font-size: 16px;">Go to Dashboard</a>
        </p>
        <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb;">
            <p style="color: #6b7280; font-size: 12px; margin: 0;">This is an automated notification from Common Voice Luo Platform.</p>
            <p style="color: #9ca3af; font-size: 12px; margin-top: 8px;">&copy; {year} Common Voice Luo</p>
        </div>
    </div>
</body>
</html>
"""

REVIEWER_REJECTED_SUBJECT = "Reviewer Application Update - Common Voice Luo"

REVIEWER_REJECTED_TEXT = """Dear {name},

Thank you for your interest in becoming a reviewer for the Common Voice Luo
platform.

After careful consideration, your reviewer application has not been approved
at this time. You are welcome to reapply in the future.

You can still contribute to the platform by recording voice samples.

-- Common Voice Luo
"""

REVIEWER_REJECTED_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px; box-shadow: 0 2px 4px rgba(0,0,0,0.1);">
        <h2 style="color: #1a1a1a; margin-top: 0;">Dear {name},</h2>
        <p style="color: #4a4a4a; line-height: 1.6;">Thank you for your interest in becoming a reviewer for the Common Voice Luo platform.</p>
        <p style="color: #4a4a4a; line-height: 1.6;">After careful consideration, your reviewer application has not been approved at this time. You are welcome to reapply in the future.</p>
        <div style="background-color: #fef3c7; border-left: 4px solid #f59e0b; padding: 16px; margin: 20px 0; border-radius: 4px;">
            <p style="margin: 0; color: #92400e; font-size: 14px; line-height: 1.6;"><strong>Note:</strong> You can still contribute to the platform by recording voice samples.</p>
        </div>
        <div style="margin-top: 40px; padding-top: 20px; border-top: 1px solid #e5e7eb;">
            <p style="color: #6b7280; font-size: 12px; margin: 0;">This is an automated notification from Common Voice Luo Platform.</p>
            <p style="color: #9ca3af; font-size: 12px; margin-top: 8px;">&copy; {year} Common Voice Luo</p>
        </div>
    </div>
</body>
</html>
"""


class EmailService:
    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, email not sent to %s", to_email)
            return

        if not self._settings.smtp_host:
            logger.error("SMTP host not configured")
            return

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

    def send_reviewer_approved_email(
        self,
        to_email: str,
        reviewer_name: str | None,
        dashboard_link: str,
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping approval email to %s",
                to_email,
            )
            return

        values = {
            "name": reviewer_name or "Reviewer",
            "dashboard_link": dashboard_link,
            "year": date.today().year,
        }
        message = self._create_message(
            to_email=to_email,
            subject=REVIEWER_APPROVED_SUBJECT,
            text_body=REVIEWER_APPROVED_TEXT.format(**values),
            html_body=REVIEWER_APPROVED_HTML.format(**values),
        )

        self._send_email(to_email, message)

    def send_reviewer_rejected_email(
        self,
        to_email: str,
        reviewer_name: str | None,
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping rejection email to %s",
                to_email,
            )
            return

        values = {"name": reviewer_name or "Reviewer", "year": date.today().year}
        message = self._create_message(
            to_email=to_email,
            subject=REVIEWER_REJECTED_SUBJECT,
            text_body=REVIEWER_REJECTED_TEXT.format(**values),
            html_body=REVIEWER_REJECTED_HTML.format(**values),
        )

        self._send_email(to_email, message)
