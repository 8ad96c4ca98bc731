"""Domain value objects for the comment service.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from meh.domain.value.common import ValueObject
from meh.domain.value.identifiers import SubjectId


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    SPAM = "spam"
    DELETED = "deleted"

    @classmethod
    def values(cls) -> list[str]:
        """All valid status strings in declaration order."""
        return [status.value for status in cls]


class Scope(str, Enum):
    """Privilege levels carried in identity tokens."""

    USER = "user"
    ADMIN = "admin"


class IdentityToken(ValueObject):
    """Decoded identity token.

    Stateless bearer credential. The subject is stable across refreshes of
    one browser session but is not linked to a real identity.
    """

    scopes: frozenset[str] | None = None  # None when the claim is absent
    iat: int  # Issuance time, seconds since epoch
    sub: SubjectId | None = None

    def has_scopes(self, *required: Scope | str) -> bool:
        """Check that every required scope is present."""
        granted = self.scopes or frozenset()
        return all(Scope(scope).value in granted for scope in required)

    @property
    def is_admin(self) -> bool:
        """Whether the token carries the admin scope."""
        return self.has_scopes(Scope.ADMIN)
