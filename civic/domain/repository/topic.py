"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from civic.domain.model.topic import Topic
from civic.domain.value import TopicId, VoteTally


class TopicRepository(ABC):
    """Repository for Topic aggregate.

    Defines the contract for topic persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier
            for_update: Lock the row until the transaction ends

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Topic]:
        """Find topics newest-first.

        Args:
            limit: Maximum number of topics to return
            offset: Number of topics to skip

        Returns:
            Topics ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all topics."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic.

        Args:
            topic: The topic to save

        Returns:
            The saved topic
        """
        pass

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> bool:
        """Delete a topic (hard delete).

        Args:
            topic_id: The topic ID to delete

        Returns:
            True if a topic was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def adjust_tally(
        self, topic_id: TopicId, upvotes_delta: int, downvotes_delta: int
    ) -> Optional[VoteTally]:
        """Atomically add deltas to the vote counters.

        Uses SQL-level arithmetic to avoid lost updates.

        Args:
            topic_id: The topic ID
            upvotes_delta: Change to apply to upvotes
            downvotes_delta: Change to apply to downvotes

        Returns:
            The tally after the change, None if the topic does not exist
        """
        pass

    @abstractmethod
    async def set_tally(self, topic_id: TopicId, tally: VoteTally) -> Optional[VoteTally]:
        """Overwrite the vote counters.

        Args:
            topic_id: The topic ID
            tally: New counter values

        Returns:
            The stored tally, None if the topic does not exist
        """
        pass
