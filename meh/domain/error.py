"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or invalid input."""

    pass


class AuthenticationError(DomainError):
    """Missing or invalid identity token."""

    pass


class AuthorizationError(DomainError):
    """Token lacks a scope required by the operation."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str):
        super().__init__(message)


class RateLimitError(DomainError):
    """A new comment was rejected by one of the anti-abuse gates.

    The tag is embedded in backticks at the start of the message so clients
    can tell the gates apart without parsing prose.
    """

    TOO_SOON = "toosoon"
    TOO_LATE = "toolate"
    PENDING = "pending"

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(f"`{tag}` {message}")


class PendingCommentConflict(DomainError):
    """Raised by the store when a conditional insert finds a pending comment."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"A pending comment already exists for {key}")


class StoreError(DomainError):
    """Persistence failure."""

    pass
