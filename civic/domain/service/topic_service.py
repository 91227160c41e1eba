"""Topic domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from civic.domain.error import NotFoundError, ValidationError
from civic.domain.model.topic import Topic
from civic.domain.repository import TopicRepository
from civic.domain.value import TopicId, VoteTally

from .base import Service


class TopicService(Service):
    """Domain service for topic registry operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def create_topic(
        self,
        title: str,
        description: str,
        external_link: str | None = None,
    ) -> Topic:
        """Create a topic.

        Title and description are required; a blank external link is
        stored as absent.

        Args:
            title: Topic title
            description: Topic description
            external_link: Optional link to external media

        Returns:
            Created topic

        Raises:
            ValidationError: If title or description is blank
        """
        title = title.strip()
        description = description.strip()
        link = external_link.strip() if external_link else ""

        if not title or not description:
            logfire.warn(
                "Topic rejected: missing required fields",
                has_title=bool(title),
                has_description=bool(description),
            )
            raise ValidationError("Title and description are required")

        with logfire.span("topic_service.create_topic", title=title):
            topic = Topic(
                id=TopicId(uuid4()),
                title=title,
                description=description,
                external_link=link or None,
                upvotes=0,
                downvotes=0,
                created_at=datetime.now(),
            )
            saved = await self.topic_repository.save(topic)
            logfire.info("Topic created", topic_id=str(saved.id), title=saved.title)
            return saved

    async def get_topic_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Topic | None:
        """Get a topic by ID.

        Args:
            topic_id: Topic ID
            for_update: Lock the topic row for the rest of the transaction

        Returns:
            Topic if found, None otherwise
        """
        with logfire.span("topic_service.get_topic_by_id", topic_id=str(topic_id)):
            topic = await self.topic_repository.find_by_id(
                topic_id, for_update=for_update
            )
            if topic:
                logfire.info("Topic found", topic_id=str(topic_id))
            else:
                logfire.warn("Topic not found", topic_id=str(topic_id))
            return topic

    async def require_topic(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Topic:
        """Get a topic by ID or fail.

        Raises:
            NotFoundError: If the topic does not exist
        """
        topic = await self.get_topic_by_id(topic_id, for_update=for_update)
        if not topic:
            raise NotFoundError("Topic", str(topic_id))
        return topic

    async def list_topics(self, limit: int = 100, offset: int = 0) -> list[Topic]:
        """List topics newest-first."""
        with logfire.span("topic_service.list_topics", limit=limit, offset=offset):
            topics = await self.topic_repository.find_all(limit=limit, offset=offset)
            logfire.info("Topics listed", count=len(topics))
            return topics

    async def count_topics(self) -> int:
        """Count all topics."""
        return await self.topic_repository.count()

    async def delete_topic(self, topic_id: TopicId) -> None:
        """Delete a topic.

        Votes and comments must be removed by their own services first.

        Raises:
            NotFoundError: If the topic does not exist
        """
        with logfire.span("topic_service.delete_topic", topic_id=str(topic_id)):
            deleted = await self.topic_repository.delete(topic_id)
            if not deleted:
                logfire.warn("Delete of non-existent topic", topic_id=str(topic_id))
                raise NotFoundError("Topic", str(topic_id))
            logfire.info("Topic deleted", topic_id=str(topic_id))

    async def adjust_tally(
        self, topic_id: TopicId, upvotes_delta: int, downvotes_delta: int
    ) -> VoteTally:
        """Atomically apply counter deltas.

        Raises:
            NotFoundError: If the topic disappeared
        """
        with logfire.span(
            "topic_service.adjust_tally",
            topic_id=str(topic_id),
            upvotes_delta=upvotes_delta,
            downvotes_delta=downvotes_delta,
        ):
            tally = await self.topic_repository.adjust_tally(
                topic_id, upvotes_delta, downvotes_delta
            )
            if tally is None:
                raise NotFoundError("Topic", str(topic_id))
            return tally

    async def set_tally(self, topic_id: TopicId, tally: VoteTally) -> VoteTally:
        """Overwrite counters.

        Raises:
            NotFoundError: If the topic does not exist
        """
        with logfire.span("topic_service.set_tally", topic_id=str(topic_id)):
            stored = await self.topic_repository.set_tally(topic_id, tally)
            if stored is None:
                raise NotFoundError("Topic", str(topic_id))
            return stored
