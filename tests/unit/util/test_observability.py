"""Unit tests for the Logfire send decision."""

import pytest

from meh.config import ObservabilitySettings
from meh.util.observability import should_send


@pytest.mark.parametrize(
    "token, explicit, expected",
    [
        (None, None, False),
        ("tok", None, True),
        ("tok", False, False),
        (None, True, True),
    ],
)
def test_should_send(token, explicit, expected):
    settings = ObservabilitySettings(logfire_token=token, send_to_logfire=explicit)

    assert should_send(settings) is expected
