"""In-memory comment repository for testing."""

from typing import Optional

from civic.domain.model.comment import Comment
from civic.domain.repository.comment import CommentRepository
from civic.domain.value import CommentId, TopicId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_topic(self, topic_id: TopicId) -> list[Comment]:
        """Find comments on a topic, newest first."""
        comments = [c for c in self._comments.values() if c.topic_id == topic_id]
        return sorted(reversed(comments), key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every comment on a topic."""
        ids = [c.id for c in self._comments.values() if c.topic_id == topic_id]
        for comment_id in ids:
            del self._comments[comment_id]
        return len(ids)

    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count comments on a topic."""
        return sum(1 for c in self._comments.values() if c.topic_id == topic_id)
