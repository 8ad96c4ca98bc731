"""Moderation policy for new comments.

Decides whether a submission is admitted and which status it starts with.
The decision functions are pure; ModerationService only gathers the
submitter's history from the repository and feeds it to them.

IP addresses are noisy (NAT, dynamic assignment) so they only ever act as a
soft spam signal. Token subjects persist across one visitor's session and are
the stronger signal.
"""

import time

import logfire

from meh.config import ModerationSettings
from meh.domain.error import RateLimitError
from meh.domain.repository import CommentRepository
from meh.domain.value import CommentStatus, IdentityToken

from .base import Service


def check_token_age(iat: int, now: float, min_age: int, max_age: int) -> None:
    """Reject tokens that are too fresh or too stale to post with.

    Args:
        iat: Token issuance time (seconds)
        now: Current time (seconds)
        min_age: Minimum seconds between issuance and posting
        max_age: Maximum seconds between issuance and posting

    Raises:
        RateLimitError: toosoon or toolate
    """
    age = now - iat
    if age < min_age:
        raise RateLimitError(
            RateLimitError.TOO_SOON,
            "You are posting too fast. Please wait a moment and try again.",
        )
    if age > max_age:
        raise RateLimitError(
            RateLimitError.TOO_LATE,
            "Your session is too old. Please reload the page and try again.",
        )


def decide_initial_status(
    is_admin: bool,
    user_status: CommentStatus | None,
    ip_status: CommentStatus | None,
) -> CommentStatus:
    """Pick the status a new comment starts with.

    Args:
        is_admin: Whether the submitter holds the admin scope
        user_status: Status of the submitter's newest non-deleted comment,
            looked up by token subject
        ip_status: Status of the newest non-deleted comment from the same IP

    Returns:
        The initial status
    """
    if is_admin:
        return CommentStatus.APPROVED

    # Returning posters inherit their last known standing
    if user_status is not None:
        return user_status

    # A spammer on the same IP is a hint, not proof: accept but mark as spam
    if ip_status == CommentStatus.SPAM:
        return CommentStatus.SPAM

    return CommentStatus.PENDING


class ModerationService(Service):
    """Domain service applying the anti-abuse gates and initial status policy."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            moderation_settings: Token age limits
        """
        self.comment_repository = comment_repository
        self.settings = moderation_settings

    async def check_rate_limits(
        self, token: IdentityToken | None, ip: str, now: float | None = None
    ) -> None:
        """Run the anti-abuse gates for a non-admin submitter.

        Gates run in order and the first failing one aborts the submission:
        token too fresh, token too old, subject has a pending comment,
        IP has a pending comment. Without a token only the IP gate applies.

        Args:
            token: Submitter's identity token
            ip: Submitter's network address
            now: Current time in seconds, defaults to the wall clock

        Raises:
            RateLimitError: If any gate fails
        """
        now = time.time() if now is None else now

        with logfire.span(
            "moderation_service.check_rate_limits",
            token_age=now - token.iat if token else None,
            ip=ip,
        ):
            try:
                if token is not None:
                    check_token_age(
                        token.iat,
                        now,
                        self.settings.min_token_age,
                        self.settings.max_token_age,
                    )

                sub = token.sub if token is not None else None
                if sub and await self.comment_repository.has_pending("user", sub):
                    raise RateLimitError(
                        RateLimitError.PENDING,
                        "You already have a comment awaiting moderation.",
                    )

                if ip and await self.comment_repository.has_pending("ip", ip):
                    raise RateLimitError(
                        RateLimitError.PENDING,
                        "There is already a comment from your address awaiting moderation.",
                    )
            except RateLimitError as e:
                logfire.warn("Submission rate limited", tag=e.tag, ip=ip)
                raise

    async def initial_status(
        self, token: IdentityToken | None, ip: str
    ) -> CommentStatus:
        """Determine the initial status of an admitted comment.

        Args:
            token: Submitter's identity token
            ip: Submitter's network address

        Returns:
            The initial status
        """
        with logfire.span("moderation_service.initial_status", ip=ip):
            is_admin = token is not None and token.is_admin
            user_status = None
            ip_status = None

            if not is_admin:
                if token is not None and token.sub:
                    user_status = await self.comment_repository.find_latest_status(
                        "user", token.sub
                    )
                if user_status is None and ip:
                    ip_status = await self.comment_repository.find_latest_status(
                        "ip", ip
                    )

            status = decide_initial_status(is_admin, user_status, ip_status)
            logfire.info(
                "Initial status decided",
                status=status.value,
                is_admin=is_admin,
                user_status=user_status.value if user_status else None,
                ip_status=ip_status.value if ip_status else None,
            )
            return status
