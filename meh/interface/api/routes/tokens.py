"""Token routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from meh.application.usecase.token import (
    IssueAdminTokenRequest,
    IssueAdminTokenUseCase,
    RefreshTokenRequest,
    RefreshTokenUseCase,
    TokenResponse,
)
from meh.interface.api.dependencies import bearer_token
from meh.interface.api.routes.common import Envelope

router = APIRouter(prefix="/token", tags=["tokens"], route_class=DishkaRoute)


@router.post("/admin", response_model=Envelope[TokenResponse])
async def issue_admin_token(
    issue_admin_token_use_case: FromDishka[IssueAdminTokenUseCase],
    request: IssueAdminTokenRequest | None = None,
) -> Envelope[TokenResponse]:
    """Exchange the admin password for a token with admin and user scope."""
    result = await issue_admin_token_use_case.execute(
        request or IssueAdminTokenRequest()
    )
    return Envelope(response=result)


@router.post("/refresh", response_model=Envelope[TokenResponse])
async def refresh_token(
    refresh_token_use_case: FromDishka[RefreshTokenUseCase],
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[TokenResponse]:
    """Renew the current token, or issue a first user token.

    A valid token in the Authorization header keeps its scopes and subject.
    """
    result = await refresh_token_use_case.execute(
        RefreshTokenRequest(auth_token=auth_token)
    )
    return Envelope(response=result)
