"""Mock providers for testing."""

from .notifier import MockNotifierProvider, RecordingNotifier
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNotifierProvider",
    "MockPersistenceProvider",
    "RecordingNotifier",
    "build_test_container",
]
