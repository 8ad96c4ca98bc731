"""SMTP notifier announcing new comments to the blog owner.

smtplib is blocking, so delivery runs in a worker thread.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

import logfire

from meh.adapter.error import NotificationError
from meh.config import NotificationSettings
from meh.domain.model import Comment
from meh.domain.service.notification_service import Notifier

SENDER_NAME = "Meh"
TIMEOUT = 30


def build_message(
    comment: Comment, settings: NotificationSettings, site_url: str
) -> EmailMessage:
    """Compose the plain-text notification mail for a comment.

    Args:
        comment: The stored comment
        settings: Notification settings with the recipient
        site_url: Base URL of the blog

    Returns:
        Ready to send message
    """
    link = site_url.rstrip("/") + "/" + comment.post.lstrip("/")

    body = "A new comment was posted on your blog:\n\n"
    body += f"{link}\n\n"
    body += f"Status: {comment.status.value}\n"
    body += f"Author: {comment.author}\n"
    body += f"E-Mail: {comment.email}\n"
    body += f"Website: {comment.website}\n\n"
    body += f"{comment.text}\n\n"

    message = EmailMessage()
    message["Subject"] = f"New Comment on {comment.post}"
    message["From"] = f"{SENDER_NAME} <{settings.notify_email}>"
    message["To"] = settings.notify_email
    message.set_content(body)
    return message


class NullNotifier(Notifier):
    """Notifier used when no recipient or mail server is configured."""

    async def send(self, comment: Comment) -> None:
        logfire.debug("Notifications disabled", comment_id=comment.id)


class SmtpNotifier(Notifier):
    """Sends notification mails through an SMTP server."""

    def __init__(self, settings: NotificationSettings, site_url: str) -> None:
        """Initialize SMTP notifier.

        Args:
            settings: Recipient and server settings
            site_url: Base URL of the blog, used for the link in the mail
        """
        self.settings = settings
        self.site_url = site_url

    def _tls_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if not self.settings.smtp_verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return context

    def _connect(self) -> smtplib.SMTP:
        settings = self.settings
        if settings.smtp_encryption == "ssl":
            return smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                timeout=TIMEOUT,
                context=self._tls_context(),
            )

        client = smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=TIMEOUT)
        if settings.smtp_encryption == "tls":
            client.starttls(context=self._tls_context())
        return client

    def _deliver(self, message: EmailMessage) -> None:
        with self._connect() as client:
            if self.settings.smtp_user:
                client.login(self.settings.smtp_user, self.settings.smtp_password)
            client.send_message(message)

    async def send(self, comment: Comment) -> None:
        """Mail a notification about a new comment.

        Raises:
            NotificationError: If the server rejects or cannot be reached
        """
        message = build_message(comment, self.settings, self.site_url)

        with logfire.span(
            "smtp.send",
            host=self.settings.smtp_host,
            port=self.settings.smtp_port,
            comment_id=comment.id,
        ):
            try:
                await asyncio.to_thread(self._deliver, message)
            except (smtplib.SMTPException, OSError) as e:
                raise NotificationError(f"Failed to send notification: {e}") from e

            logfire.info("Notification sent", comment_id=comment.id)
