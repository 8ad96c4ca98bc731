"""Notifier infrastructure providers."""

import logfire
from dishka import Scope, provide

from meh.adapter.smtp import NullNotifier, SmtpNotifier
from meh.config import Settings
from meh.domain.service import Notifier
from meh.util.di.base import ProviderBase


class NotifierProvider(ProviderBase):
    """Notifier component base."""

    __mock_component__ = "notifier"


class ProdNotifierProvider(NotifierProvider):
    """Production notifier provider sending mail over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide the SMTP notifier, or a no-op one when mail is not configured."""
        if not settings.notification.enabled:
            logfire.info("E-mail notifications disabled")
            return NullNotifier()
        return SmtpNotifier(settings.notification, settings.site_url)
