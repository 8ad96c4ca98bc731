"""Mock notifier providers for testing."""

from dishka import Scope, provide

from meh.domain.model import Comment
from meh.domain.service import Notifier
from meh.util.di.infrastructure.notifier import NotifierProvider


class RecordingNotifier(Notifier):
    """Notifier that remembers what it was asked to send."""

    def __init__(self) -> None:
        self.sent: list[Comment] = []
        self.fail = False

    async def send(self, comment: Comment) -> None:
        if self.fail:
            raise ConnectionError("mail server unreachable")
        self.sent.append(comment)


class MockNotifierProvider(NotifierProvider):
    """Mock notifier provider recording notifications in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notifier(self) -> Notifier:
        """Provide recording notifier."""
        return RecordingNotifier()
