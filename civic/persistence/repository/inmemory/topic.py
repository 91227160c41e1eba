"""In-memory topic repository for testing."""

from typing import Optional

from civic.domain.model.topic import Topic
from civic.domain.repository.topic import TopicRepository
from civic.domain.value import TopicId, VoteTally


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}

    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID (no locking in memory)."""
        return self._topics.get(topic_id)

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Topic]:
        """Find topics newest first (later inserts win timestamp ties)."""
        topics = sorted(
            reversed(list(self._topics.values())),
            key=lambda t: t.created_at,
            reverse=True,
        )
        return topics[offset : offset + limit]

    async def count(self) -> int:
        """Count all topics."""
        return len(self._topics)

    async def save(self, topic: Topic) -> Topic:
        """Insert a topic."""
        self._topics[topic.id] = topic
        return topic

    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic."""
        return self._topics.pop(topic_id, None) is not None

    async def adjust_tally(
        self, topic_id: TopicId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[VoteTally]:
        """Apply counter deltas."""
        topic = self._topics.get(topic_id)
        if not topic:
            return None
        return await self.set_tally(
            topic_id,
            VoteTally(
                upvotes=topic.upvotes + upvotes_delta,
                downvotes=topic.downvotes + downvotes_delta,
            ),
        )

    async def set_tally(
        self, topic_id: TopicId, tally: VoteTally
    ) -> Optional[VoteTally]:
        """Overwrite counters."""
        topic = self._topics.get(topic_id)
        if not topic:
            return None
        self._topics[topic_id] = topic.model_copy(
            update={"upvotes": tally.upvotes, "downvotes": tally.downvotes}
        )
        return tally
