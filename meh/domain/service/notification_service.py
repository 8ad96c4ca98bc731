"""New comment notification domain service."""

import logfire

from meh.domain.model import Comment

from .base import Service


class Notifier:
    """Generic notifier interface for outbound notifications."""

    async def send(self, comment: Comment) -> None:
        """Announce a newly created comment.

        Args:
            comment: The stored comment

        Raises:
            NotificationError: If delivery fails
        """
        raise NotImplementedError


class NotificationService(Service):
    """Fire-and-forget notifications about new comments.

    A comment is already stored when this runs, so delivery problems are
    logged and never reach the caller.
    """

    def __init__(self, notifier: Notifier) -> None:
        """Initialize notification service.

        Args:
            notifier: Delivery channel
        """
        self.notifier = notifier

    async def notify_new_comment(self, comment: Comment) -> None:
        """Send a notification about a new comment, swallowing failures.

        Args:
            comment: The stored comment
        """
        with logfire.span(
            "notification_service.notify_new_comment",
            comment_id=comment.id,
            post=comment.post,
        ):
            try:
                await self.notifier.send(comment)
            except Exception as e:
                logfire.error(
                    "Failed to send notification",
                    comment_id=comment.id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
