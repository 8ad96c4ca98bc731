"""Refresh token use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import TokenService

from .issue_admin_token import TokenResponse


class RefreshTokenRequest(BaseModel):
    """Refresh token request."""

    auth_token: str | None = None  # Current token, if the client has one


class RefreshTokenUseCase(BaseUseCase[RefreshTokenRequest, TokenResponse]):
    """Use case for renewing a token or minting a first visitor token.

    Comment forms call this when they load. A valid current token keeps
    its scopes and subject, so a visitor's history follows them across
    refreshes. Anything else yields a new user token.
    """

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, request: RefreshTokenRequest) -> TokenResponse:
        current = self.token_service.decode_optional(request.auth_token)
        token, scopes = self.token_service.refresh_token(current)
        return TokenResponse(token=token, scopes=scopes)
