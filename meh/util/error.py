"""Errors about the service's own setup."""


class ConfigurationError(Exception):
    """A required setting is missing or malformed.

    The message names the setting, it never carries a secret and may be
    shown to API clients.
    """
