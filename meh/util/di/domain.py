"""Domain layer DI providers."""

from dishka import Scope, provide

from meh.config import AuthSettings, AvatarSettings, ModerationSettings
from meh.domain.repository import CommentRepository
from meh.domain.service import (
    AvatarService,
    CommentService,
    ModerationService,
    NotificationService,
    Notifier,
    Renderer,
    TokenService,
)
from meh.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide identity token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_avatar_service(self, avatar_settings: AvatarSettings) -> AvatarService:
        return AvatarService(avatar_settings=avatar_settings)

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        moderation_settings: ModerationSettings,
    ) -> ModerationService:
        """Provide moderation policy service."""
        return ModerationService(
            comment_repository=comment_repository,
            moderation_settings=moderation_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        moderation_service: ModerationService,
        renderer: Renderer,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            moderation_service=moderation_service,
            renderer=renderer,
        )

    @provide
    def get_notification_service(self, notifier: Notifier) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notifier=notifier)
