"""Pseudo-identity routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response

from civic.application.usecase.identity import (
    GetIdentityRequest,
    GetIdentityResponse,
    GetIdentityUseCase,
)
from civic.config import Settings
from civic.interface.api.cookies import set_user_token_cookie

router = APIRouter(tags=["identity"], route_class=DishkaRoute)


@router.get("/identity", response_model=GetIdentityResponse)
async def get_identity(
    response: Response,
    get_identity_use_case: FromDishka[GetIdentityUseCase],
    settings: FromDishka[Settings],
    user_id: str | None = Cookie(default=None),
) -> GetIdentityResponse:
    """Return the caller's user token, minting one if absent or malformed.

    The token keys one-vote-per-user only; it is not a credential.
    """
    result = await get_identity_use_case.execute(GetIdentityRequest(user_token=user_id))
    if result.minted:
        set_user_token_cookie(response, result.user_token, settings)
    return result
