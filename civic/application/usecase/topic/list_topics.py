"""List topics use case."""

import logfire
from datetime import datetime

from pydantic import BaseModel, Field

from civic.domain.model.topic import Topic
from civic.domain.service import IdentityService, TopicService, VoteService
from civic.domain.value import VoteChoice

from civic.application.usecase.base import BaseUseCase


class TopicItem(BaseModel):
    """Topic with its tally and the caller's vote."""

    topic_id: str
    title: str
    description: str
    external_link: str | None
    upvotes: int
    downvotes: int
    created_at: datetime
    user_vote: VoteChoice | None = None

    @classmethod
    def from_topic(
        cls, topic: Topic, user_vote: VoteChoice | None = None
    ) -> "TopicItem":
        """Build a list item from a domain topic."""
        return cls(
            topic_id=str(topic.id),
            title=topic.title,
            description=topic.description,
            external_link=topic.external_link,
            upvotes=topic.upvotes,
            downvotes=topic.downvotes,
            created_at=topic.created_at,
            user_vote=user_vote,
        )


class ListTopicsRequest(BaseModel):
    """List topics request."""

    limit: int = Field(default=100, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_token: str | None = None  # Caller's token (if presented)


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicItem]
    total: int
    limit: int
    offset: int


class ListTopicsUseCase(BaseUseCase):
    """Use case for listing topics newest first."""

    def __init__(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
            vote_service: Vote domain service
            identity_service: User token service
        """
        self.topic_service = topic_service
        self.vote_service = vote_service
        self.identity_service = identity_service

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        """Execute list topics flow.

        Args:
            request: Pagination and optional caller token

        Returns:
            Topics with tallies and the caller's vote state
        """
        with logfire.span(
            "list_topics.execute", limit=request.limit, offset=request.offset
        ):
            total = await self.topic_service.count_topics()
            topics = await self.topic_service.list_topics(
                limit=request.limit, offset=request.offset
            )

            # One batch query for the caller's votes on this page
            choices = {}
            user_token = self.identity_service.parse_user_token(request.user_token)
            if user_token and topics:
                choices = await self.vote_service.get_user_choices(
                    user_token, [topic.id for topic in topics]
                )

            items = [
                TopicItem.from_topic(topic, choices.get(topic.id)) for topic in topics
            ]
            return ListTopicsResponse(
                topics=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
