"""Issue admin token use case."""

import logfire
from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import TokenService


class IssueAdminTokenRequest(BaseModel):
    """Admin login request."""

    password: str | None = None


class TokenResponse(BaseModel):
    """Issued token and the scopes it grants."""

    token: str
    scopes: list[str]


class IssueAdminTokenUseCase(BaseUseCase[IssueAdminTokenRequest, TokenResponse]):
    """Use case for exchanging the admin password for an admin token."""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, request: IssueAdminTokenRequest) -> TokenResponse:
        """Execute admin login.

        Raises:
            ValidationError: If no password was given
            ConfigurationError: If no admin password is configured
            AuthenticationError: If the password is wrong
        """
        token, scopes = self.token_service.issue_admin_token(request.password)
        logfire.info("Admin token issued")
        return TokenResponse(token=token, scopes=scopes)
