"""Topic routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from civic.application.usecase.topic import (
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
    TopicItem,
)
from civic.domain.error import NotFoundError

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


@router.get("", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    limit: int = Query(default=100, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    user_id: str | None = Cookie(default=None),
) -> ListTopicsResponse:
    """List topics newest first.

    Each item carries its tally and, when the caller presents a user token,
    the caller's current vote.

    Args:
        list_topics_use_case: List topics use case from DI
        limit: Maximum number of topics to return
        offset: Number of topics to skip
        user_id: Anonymous user token from cookie

    Returns:
        Page of topics
    """
    return await list_topics_use_case.execute(
        ListTopicsRequest(limit=limit, offset=offset, user_token=user_id)
    )


@router.get("/{topic_id}", response_model=TopicItem)
async def get_topic(
    topic_id: UUID,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    user_id: str | None = Cookie(default=None),
) -> TopicItem:
    """Get a single topic.

    Raises:
        HTTPException: If topic not found
    """
    try:
        return await get_topic_use_case.execute(
            GetTopicRequest(topic_id=topic_id, user_token=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
