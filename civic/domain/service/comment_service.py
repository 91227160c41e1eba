"""Comment domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from civic.domain.error import NotFoundError, ValidationError
from civic.domain.model.comment import ANONYMOUS_AUTHOR, Comment
from civic.domain.repository import CommentRepository
from civic.domain.value import CommentId, TopicId

from .base import Service
from .topic_service import TopicService

MAX_COMMENT_LENGTH = 2000


class CommentService(Service):
    """Domain service for comment log operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        topic_service: TopicService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            topic_service: Topic domain service
        """
        self.comment_repository = comment_repository
        self.topic_service = topic_service

    async def add_comment(self, topic_id: TopicId, text: str) -> Comment:
        """Add an anonymous comment to a topic.

        Args:
            topic_id: Topic ID
            text: Comment text (surrounding whitespace is stripped)

        Returns:
            Created comment

        Raises:
            ValidationError: If text is blank or too long
            NotFoundError: If topic not found
        """
        text = text.strip()
        if not text:
            logfire.warn("Comment rejected: empty text", topic_id=str(topic_id))
            raise ValidationError("Comment text cannot be empty")
        if len(text) > MAX_COMMENT_LENGTH:
            logfire.warn(
                "Comment rejected: too long",
                topic_id=str(topic_id),
                text_length=len(text),
            )
            raise ValidationError(
                f"Comment text cannot exceed {MAX_COMMENT_LENGTH} characters"
            )

        with logfire.span("comment_service.add_comment", topic_id=str(topic_id)):
            await self.topic_service.require_topic(topic_id)

            comment = Comment(
                id=CommentId(uuid4()),
                topic_id=topic_id,
                author_display_name=ANONYMOUS_AUTHOR,
                text=text,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                topic_id=str(topic_id),
                text_length=len(text),
            )
            return saved

    async def get_comments_for_topic(self, topic_id: TopicId) -> list[Comment]:
        """Get all comments for a topic, newest first.

        Args:
            topic_id: Topic ID

        Returns:
            List of comments

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span(
            "comment_service.get_comments_for_topic", topic_id=str(topic_id)
        ):
            await self.topic_service.require_topic(topic_id)
            comments = await self.comment_repository.find_by_topic(topic_id)
            logfire.info(
                "Comments retrieved for topic",
                topic_id=str(topic_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> Comment:
        """Permanently delete a comment.

        Args:
            comment_id: Comment ID

        Returns:
            The removed comment, for the audit record

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or not await self.comment_repository.delete(comment_id):
                logfire.warn(
                    "Delete of non-existent comment", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                topic_id=str(comment.topic_id),
            )
            return comment

    async def delete_comments_for_topic(self, topic_id: TopicId) -> int:
        """Remove every comment on a topic (topic deletion cascade)."""
        deleted = await self.comment_repository.delete_by_topic(topic_id)
        logfire.info("Comments deleted", topic_id=str(topic_id), count=deleted)
        return deleted
