"""Service for sending transactional emails."""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

logger = logging.getLogger(__name__)


class EmailService:
    """Service for sending emails via SMTP."""

    def __init__(
        self,
        smtp_host: Optional[str] = None,
        smtp_port: int = 587,
        smtp_username: Optional[str] = None,
        smtp_password: Optional[str] = None,
        from_email: Optional[str] = None,
        from_name: str = "Bookmarker",
    ):
        self.smtp_host = smtp_host or ""
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username or ""
        self.smtp_password = smtp_password or ""
        self.from_email = from_email or ""
        self.from_name = from_name
        self.enabled = bool(self.smtp_host and self.smtp_username and self.from_email)

    def send_verification_email(self, to_email: str, verification_token: str, base_url: str) -> bool:
        """
        Send the email confirmation message for a new account.

        Args:
            to_email: Recipient email
            verification_token: 6-digit verification token
            base_url: Public base URL of the API

        Returns:
            True if sent (or logged while SMTP is disabled), False otherwise
        """
        verification_url = f"{base_url}/auth/verify-email?token={verification_token}"

        if not self.enabled:
            logger.info("Verification URL for %s: %s", to_email, verification_url)
            return True

        name = to_email.split("@")[0]
        subject = "Welcome to Bookmarker! Please confirm your email"
        html_body = f"""
        <html>
            <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
                <h2 style="color: #1e293b;">Hey {name},</h2>

                <p style="color: #475569; line-height: 1.6;">
                    Thanks for signing up to Bookmarker. Please confirm your email address
                    by clicking the link below:
                </p>

                <p style="text-align: center; margin: 30px 0;">
                    <a href="{verification_url}"
                       style="background-color: #3b82f6; color: white; padding: 15px 30px;
                              text-decoration: none; border-radius: 5px; font-weight: bold;">
                        Confirm email
                    </a>
                </p>

                <p style="color: #64748b; font-size: 14px;">
                    Your verification code is <strong>{verification_token}</strong>.
                </p>

                <p style="color: #64748b; font-size: 14px;">
                    If you did not create an account, you can ignore this email.
                </p>
            </body>
        </html>
        """

        text_body = f"""
        Hey {name},

        Thanks for signing up to Bookmarker. Confirm your email address here:
        {verification_url}

        Your verification code is {verification_token}.

        If you did not create an account, you can ignore this email.
        """

        return self._send_email(to_email, subject, html_body, text_body)

    def _send_email(self, to_email: str, subject: str, html_body: str, text_body: str) -> bool:
        """
        Send an email via SMTP.

        Returns:
            True if sent successfully, False otherwise
        """
        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = f"{self.from_name} <{self.from_email}>"
            msg["To"] = to_email

            msg.attach(MIMEText(text_body, "plain", "utf-8"))
            msg.attach(MIMEText(html_body, "html", "utf-8"))

            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

            return True

        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Failed to send email to %s: %s", to_email, exc)
            return False
