"""Adapter errors.

Raised by outbound integrations and never allowed to reach the domain as
anything but a logged failure.
"""


class AdapterError(Exception):
    """Base error of an outbound integration."""


class NotificationError(AdapterError):
    """A notification mail could not be handed to the mail server."""
