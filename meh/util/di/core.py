"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from meh.config import (
    AuthSettings,
    AvatarSettings,
    ModerationSettings,
    Settings,
)
from meh.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        return settings.moderation

    @provide
    def provide_avatar_settings(self, settings: Settings) -> AvatarSettings:
        return settings.avatar
