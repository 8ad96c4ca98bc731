"""Request-level helpers shared by the routes."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# auto_error is off: a missing token is decided on per operation
_bearer = HTTPBearer(auto_error=False)


def bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    """Extract the token from an `Authorization: Bearer <jwt>` header."""
    return credentials.credentials if credentials else None


def client_ip(request: Request) -> str:
    """Submitter address as seen by the reverse proxy, else the socket peer."""
    forwarded = request.headers.get("x-real-ip", "").strip()
    if forwarded:
        return forwarded
    return request.client.host if request.client else ""
