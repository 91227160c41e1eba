"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from civic.domain.model import Vote
from civic.domain.repository import VoteRepository
from civic.domain.value import TopicId, UserToken, VoteChoice, VoteTally
from civic.persistence.mappers import row_to_vote, vote_to_dict
from civic.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_topic_and_user(
        self,
        topic_id: TopicId,
        user_token: UserToken,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a topic, optionally locking the row."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.topic_id == topic_id,
                votes_table.c.user_token == user_token.root,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_topics(
        self, user_token: UserToken, topic_ids: Sequence[TopicId]
    ) -> List[Vote]:
        """Find a user's votes on multiple topics (batch query)."""
        if not topic_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_token == user_token.root,
                votes_table.c.topic_id.in_(topic_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or switch the choice of the existing one."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        stmt = stmt.on_conflict_do_update(
            constraint="unique_topic_vote",
            set_={"choice": stmt.excluded.choice, "created_at": stmt.excluded.created_at},
        ).returning(*votes_table.c)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else vote

    async def delete_by_topic_and_user(
        self, topic_id: TopicId, user_token: UserToken
    ) -> bool:
        """Delete a user's vote on a topic."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.topic_id == topic_id,
                votes_table.c.user_token == user_token.root,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every vote on a topic."""
        stmt = delete(votes_table).where(votes_table.c.topic_id == topic_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_topic(self, topic_id: TopicId) -> VoteTally:
        """Count votes on a topic by choice."""
        stmt = (
            select(votes_table.c.choice, func.count())
            .where(votes_table.c.topic_id == topic_id)
            .group_by(votes_table.c.choice)
        )
        result = await self.session.execute(stmt)
        counts = {VoteChoice(choice): n for choice, n in result.fetchall()}
        return VoteTally(
            upvotes=counts.get(VoteChoice.UP, 0),
            downvotes=counts.get(VoteChoice.DOWN, 0),
        )
