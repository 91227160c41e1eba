"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from civic.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from civic.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/topics", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    text: str = Field(max_length=10000)


@router.get("/{topic_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    topic_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a topic's comments, newest first.

    Raises:
        HTTPException: If topic not found
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(topic_id=topic_id)
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.post(
    "/{topic_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    topic_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Add an anonymous comment to a topic.

    Args:
        topic_id: Topic UUID
        request: Comment text
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment

    Raises:
        HTTPException: If text is blank or too long, or topic not found
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(topic_id=topic_id, text=request.text)
        )
    except ValidationError as e:
        logfire.warn("Comment validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
