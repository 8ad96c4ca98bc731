"""Unit tests for the SMTP notifier."""

import smtplib
from datetime import datetime, timezone

import pytest

from meh.adapter.error import NotificationError
from meh.adapter.smtp import NullNotifier, SmtpNotifier, build_message
from meh.config import NotificationSettings
from meh.domain.model import Comment
from meh.domain.value import CommentId, CommentStatus, PostPath

SETTINGS = NotificationSettings(
    notify_email="owner@example.com",
    smtp_host="smtp.example.com",
    smtp_port=587,
    smtp_encryption="tls",
    smtp_user="owner",
    smtp_password="secret",
)


def sample_comment() -> Comment:
    return Comment(
        id=CommentId(3),
        post=PostPath("/2024/05/hello-world"),
        author="Alice",
        email="alice@example.com",
        website="https://alice.example.com",
        text="Great *post*",
        html="<p>Great <em>post</em></p>",
        ip="10.0.0.1",
        status=CommentStatus.PENDING,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


class FakeSMTP:
    """Stands in for smtplib.SMTP and records the conversation."""

    instances: list["FakeSMTP"] = []

    def __init__(self, host, port, timeout=None, context=None):
        self.host = host
        self.port = port
        self.calls: list[str] = []
        self.messages = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.calls.append("quit")

    def starttls(self, context=None):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(f"login:{user}")

    def send_message(self, message):
        self.calls.append("send")
        self.messages.append(message)


class TestBuildMessage:
    def test_headers(self):
        message = build_message(sample_comment(), SETTINGS, "https://blog.example.com/")

        assert message["Subject"] == "New Comment on /2024/05/hello-world"
        assert message["From"] == "Meh <owner@example.com>"
        assert message["To"] == "owner@example.com"

    def test_body(self):
        message = build_message(sample_comment(), SETTINGS, "https://blog.example.com/")

        body = message.get_content()
        assert body.startswith("A new comment was posted on your blog:\n\n")
        assert "https://blog.example.com/2024/05/hello-world\n" in body
        assert "Status: pending\n" in body
        assert "Author: Alice\n" in body
        assert "E-Mail: alice@example.com\n" in body
        assert "Website: https://alice.example.com\n" in body
        assert "Great *post*" in body


class TestSmtpNotifier:
    @pytest.fixture(autouse=True)
    def fake_smtp(self, monkeypatch):
        FakeSMTP.instances = []
        monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
        monkeypatch.setattr(smtplib, "SMTP_SSL", FakeSMTP)

    @pytest.mark.asyncio
    async def test_send_with_starttls_and_login(self):
        notifier = SmtpNotifier(SETTINGS, "https://blog.example.com")

        await notifier.send(sample_comment())

        [client] = FakeSMTP.instances
        assert (client.host, client.port) == ("smtp.example.com", 587)
        assert client.calls == ["starttls", "login:owner", "send", "quit"]
        assert client.messages[0]["To"] == "owner@example.com"

    @pytest.mark.asyncio
    async def test_plain_without_login(self):
        settings = SETTINGS.model_copy(
            update={"smtp_encryption": "", "smtp_user": ""}
        )
        notifier = SmtpNotifier(settings, "https://blog.example.com")

        await notifier.send(sample_comment())

        [client] = FakeSMTP.instances
        assert client.calls == ["send", "quit"]

    @pytest.mark.asyncio
    async def test_failure_is_wrapped(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise ConnectionRefusedError("connection refused")

        monkeypatch.setattr(smtplib, "SMTP", refuse)
        notifier = SmtpNotifier(SETTINGS, "https://blog.example.com")

        with pytest.raises(NotificationError):
            await notifier.send(sample_comment())


@pytest.mark.asyncio
async def test_null_notifier_does_nothing():
    await NullNotifier().send(sample_comment())
