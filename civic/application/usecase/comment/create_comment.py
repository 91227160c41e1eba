"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from civic.domain.model.comment import Comment
from civic.domain.service import CommentService
from civic.domain.value import TopicId


class CommentItem(BaseModel):
    """Comment as shown to users."""

    comment_id: str
    topic_id: str
    author_display_name: str
    text: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a domain comment."""
        return cls(
            comment_id=str(comment.id),
            topic_id=str(comment.topic_id),
            author_display_name=comment.author_display_name,
            text=comment.text,
            created_at=comment.created_at,
        )


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    topic_id: UUID
    text: str


class CreateCommentUseCase:
    """Use case for adding an anonymous comment to a topic."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValidationError: If text is blank or too long
            NotFoundError: If topic not found
        """
        comment = await self.comment_service.add_comment(
            TopicId(request.topic_id), request.text
        )
        return CommentItem.from_comment(comment)
