"""Domain services."""

from .avatar_service import AvatarService
from .base import Service
from .comment_service import CommentService, Renderer
from .moderation_service import (
    ModerationService,
    check_token_age,
    decide_initial_status,
)
from .notification_service import NotificationService, Notifier
from .token_service import TokenService

__all__ = [
    "AvatarService",
    "CommentService",
    "ModerationService",
    "NotificationService",
    "Notifier",
    "Renderer",
    "Service",
    "TokenService",
    "check_token_age",
    "decide_initial_status",
]
