"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from civic.domain.service import CommentService
from civic.domain.value import TopicId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    topic_id: UUID


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]
    total: int


class GetCommentsUseCase:
    """Use case for listing a topic's comments newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("get_comments.execute", topic_id=str(request.topic_id)):
            comments = await self.comment_service.get_comments_for_topic(
                TopicId(request.topic_id)
            )
            items = [CommentItem.from_comment(comment) for comment in comments]
            return GetCommentsResponse(comments=items, total=len(items))
