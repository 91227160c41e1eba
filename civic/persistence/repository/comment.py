"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Comment
from civic.domain.repository import CommentRepository
from civic.domain.value import CommentId, TopicId
from civic.persistence.mappers import comment_to_dict, row_to_comment
from civic.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Comment]:
        """Find comments on a topic, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.topic_id == topic_id)
            .order_by(comments_table.c.created_at.desc(), comments_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Hard delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every comment on a topic."""
        stmt = delete(comments_table).where(comments_table.c.topic_id == topic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_topic(self, topic_id: TopicId) -> int:
        """Count comments on a topic."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.topic_id == topic_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
