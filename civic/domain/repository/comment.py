"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from civic.domain.model.comment import Comment
from civic.domain.value import CommentId, TopicId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Find all comments on a topic, newest first.

        Args:
            topic_id: The topic ID

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every comment on a topic.

        Args:
            topic_id: The topic ID

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count comments on a topic."""
        pass
