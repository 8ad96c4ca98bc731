"""Avatar URL derivation."""

import hashlib
from urllib.parse import quote_plus

from meh.config import AvatarSettings

from .base import Service

GRAVATAR_URL = "https://www.gravatar.com/avatar/"


class AvatarService(Service):
    """Derives Gravatar URLs for comment authors."""

    def __init__(self, avatar_settings: AvatarSettings) -> None:
        self.settings = avatar_settings

    def avatar_url(self, author: str, email: str = "") -> str:
        """Build the Gravatar URL for a comment author.

        The hash is taken from the e-mail address, or from the author name
        when no address was given, so every commenter gets a stable picture.

        Args:
            author: Display name of the author
            email: E-mail address of the author (optional)

        Returns:
            Gravatar image URL
        """
        ident = (email or author).strip().lower()
        digest = hashlib.md5(ident.encode()).hexdigest()

        url = f"{GRAVATAR_URL}{digest}?s=256"
        url += f"&d={quote_plus(self.settings.gravatar_fallback)}"
        url += f"&r={self.settings.gravatar_rating}"
        if self.settings.gravatar_fallback == "initials":
            url += f"&name={quote_plus(author)}"
        return url
