"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from civic.domain.model.vote import Vote
from civic.domain.repository.vote import VoteRepository
from civic.domain.value import TopicId, UserToken, VoteChoice, VoteTally


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Keyed by (topic_id, user_token), mirroring the unique constraint.
    """

    def __init__(self) -> None:
        self._votes: dict[tuple[TopicId, str], Vote] = {}

    async def find_by_topic_and_user(
        self,
        topic_id: TopicId,
        user_token: UserToken,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a topic (no locking in memory)."""
        return self._votes.get((topic_id, user_token.root))

    async def find_by_user_and_topics(
        self, user_token: UserToken, topic_ids: Sequence[TopicId]
    ) -> list[Vote]:
        """Find a user's votes on multiple topics."""
        wanted = set(topic_ids)
        return [
            v
            for v in self._votes.values()
            if v.user_token == user_token and v.topic_id in wanted
        ]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or switch the choice of the existing one."""
        key = (vote.topic_id, vote.user_token.root)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={"choice": vote.choice, "created_at": vote.created_at}
            )
        self._votes[key] = vote
        return vote

    async def delete_by_topic_and_user(
        self, topic_id: TopicId, user_token: UserToken
    ) -> bool:
        """Delete a user's vote on a topic."""
        return self._votes.pop((topic_id, user_token.root), None) is not None

    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every vote on a topic."""
        keys = [key for key in self._votes if key[0] == topic_id]
        for key in keys:
            del self._votes[key]
        return len(keys)

    async def count_by_topic(self, topic_id: TopicId) -> VoteTally:
        """Count votes on a topic by choice."""
        choices = [v.choice for v in self._votes.values() if v.topic_id == topic_id]
        return VoteTally(
            upvotes=choices.count(VoteChoice.UP),
            downvotes=choices.count(VoteChoice.DOWN),
        )
