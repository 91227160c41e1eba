"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Topic
from civic.domain.repository import TopicRepository
from civic.domain.value import TopicId, VoteTally
from civic.persistence.mappers import row_to_topic, topic_to_dict
from civic.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID, optionally locking the row."""
        stmt = select(topics_table).where(topics_table.c.id == topic_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_topic(row._asdict()) if row else None

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Topic]:
        """Find topics newest first."""
        stmt = (
            select(topics_table)
            .order_by(topics_table.c.created_at.desc(), topics_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_topic(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all topics."""
        stmt = select(func.count()).select_from(topics_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic."""
        stmt = insert(topics_table).values(**topic_to_dict(topic))
        await self.session.execute(stmt)
        await self.session.flush()
        return topic

    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic (FK cascade also removes votes and comments)."""
        stmt = delete(topics_table).where(topics_table.c.id == topic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def adjust_tally(
        self, topic_id: TopicId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[VoteTally]:
        """Atomically apply counter deltas in SQL."""
        stmt = (
            update(topics_table)
            .where(topics_table.c.id == topic_id)
            .values(
                upvotes=topics_table.c.upvotes + upvotes_delta,
                downvotes=topics_table.c.downvotes + downvotes_delta,
            )
            .returning(topics_table.c.upvotes, topics_table.c.downvotes)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return VoteTally(upvotes=row.upvotes, downvotes=row.downvotes) if row else None

    async def set_tally(
        self, topic_id: TopicId, tally: VoteTally
    ) -> Optional[VoteTally]:
        """Overwrite counters."""
        stmt = (
            update(topics_table)
            .where(topics_table.c.id == topic_id)
            .values(upvotes=tally.upvotes, downvotes=tally.downvotes)
            .returning(topics_table.c.upvotes, topics_table.c.downvotes)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return VoteTally(upvotes=row.upvotes, downvotes=row.downvotes) if row else None
