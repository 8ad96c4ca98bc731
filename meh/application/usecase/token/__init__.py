"""Token use cases."""

from .issue_admin_token import (
    IssueAdminTokenRequest,
    IssueAdminTokenUseCase,
    TokenResponse,
)
from .refresh_token import RefreshTokenRequest, RefreshTokenUseCase

__all__ = [
    "IssueAdminTokenRequest",
    "IssueAdminTokenUseCase",
    "RefreshTokenRequest",
    "RefreshTokenUseCase",
    "TokenResponse",
]
