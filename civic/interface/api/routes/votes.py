"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from civic.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    ClearVoteRequest,
    ClearVoteUseCase,
    VoteResponse,
)
from civic.config import Settings
from civic.domain.error import NotFoundError, PersistenceError
from civic.domain.service import IdentityService
from civic.domain.value import VoteChoice
from civic.interface.api.cookies import set_user_token_cookie

router = APIRouter(prefix="/topics", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for clicking a vote button."""

    choice: VoteChoice


@router.post("/{topic_id}/vote", response_model=VoteResponse)
async def cast_vote(
    topic_id: UUID,
    request: CastVoteAPIRequest,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    identity_service: FromDishka[IdentityService],
    settings: FromDishka[Settings],
    user_id: str | None = Cookie(default=None),
) -> VoteResponse:
    """Click up or down on a topic.

    Clicking the choice already held removes the vote; clicking the other
    choice switches it. A user token is minted if the caller has none.

    Args:
        topic_id: Topic UUID
        request: Clicked choice
        response: Outgoing response (for the token cookie)
        cast_vote_use_case: Cast vote use case from DI
        identity_service: User token service (injected)
        settings: Application settings (injected)
        user_id: Anonymous user token from cookie

    Returns:
        New tally and the caller's resulting vote

    Raises:
        HTTPException: If topic not found or the vote could not be stored
    """
    user_token, minted = identity_service.resolve_user_token(user_id)
    if minted:
        set_user_token_cookie(response, user_token.root, settings)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                topic_id=topic_id,
                user_token=user_token.root,
                choice=request.choice,
            )
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{e}, please try again",
        )


@router.delete("/{topic_id}/vote", response_model=VoteResponse)
async def clear_vote(
    topic_id: UUID,
    clear_vote_use_case: FromDishka[ClearVoteUseCase],
    identity_service: FromDishka[IdentityService],
    user_id: str | None = Cookie(default=None),
) -> VoteResponse:
    """Remove the caller's vote on a topic, whatever it is.

    Raises:
        HTTPException: If topic not found or the change could not be stored
    """
    user_token = identity_service.parse_user_token(user_id)
    if user_token is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No user token presented",
        )

    try:
        return await clear_vote_use_case.execute(
            ClearVoteRequest(topic_id=topic_id, user_token=user_token.root)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except PersistenceError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{e}, please try again",
        )
