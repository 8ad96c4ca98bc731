"""SMTP e-mail notifications."""

from .notifier import NullNotifier, SmtpNotifier, build_message

__all__ = ["NullNotifier", "SmtpNotifier", "build_message"]
