"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from civic.domain.model.vote import Vote
from civic.domain.value import TopicId, UserToken, VoteTally


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_topic_and_user(
        self,
        topic_id: TopicId,
        user_token: UserToken,
        for_update: bool = False,
    ) -> Optional[Vote]:
        """Find a user's vote on a topic.

        Args:
            topic_id: The topic ID
            user_token: The voter's token
            for_update: Lock the row until the transaction ends

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_topics(
        self,
        user_token: UserToken,
        topic_ids: Sequence[TopicId],
    ) -> List[Vote]:
        """Find a user's votes on multiple topics (batch query).

        Args:
            user_token: The voter's token
            topic_ids: Topics to check

        Returns:
            Votes by the user on the given topics
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or replace the choice of the existing one.

        Keyed by (topic_id, user_token), so a user never holds two rows
        for the same topic.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass

    @abstractmethod
    async def delete_by_topic_and_user(
        self,
        topic_id: TopicId,
        user_token: UserToken,
    ) -> bool:
        """Delete a user's vote on a topic.

        Args:
            topic_id: The topic ID
            user_token: The voter's token

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def delete_by_topic(self, topic_id: TopicId) -> int:
        """Delete every vote on a topic.

        Args:
            topic_id: The topic ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_by_topic(self, topic_id: TopicId) -> VoteTally:
        """Count vote rows on a topic, grouped by choice.

        Args:
            topic_id: The topic ID

        Returns:
            Tally computed from the rows
        """
        pass
