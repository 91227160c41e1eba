"""Get topic use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import IdentityService, TopicService, VoteService
from civic.domain.value import TopicId

from civic.application.usecase.base import BaseUseCase
from .list_topics import TopicItem


class GetTopicRequest(BaseModel):
    """Get topic request."""

    topic_id: UUID
    user_token: str | None = None


class GetTopicUseCase(BaseUseCase):
    """Use case for fetching one topic."""

    def __init__(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        identity_service: IdentityService,
    ) -> None:
        self.topic_service = topic_service
        self.vote_service = vote_service
        self.identity_service = identity_service

    async def execute(self, request: GetTopicRequest) -> TopicItem:
        """Execute get topic flow.

        Raises:
            NotFoundError: If topic not found
        """
        topic_id = TopicId(request.topic_id)
        topic = await self.topic_service.require_topic(topic_id)

        user_vote = None
        user_token = self.identity_service.parse_user_token(request.user_token)
        if user_token:
            choices = await self.vote_service.get_user_choices(user_token, [topic_id])
            user_vote = choices.get(topic_id)

        return TopicItem.from_topic(topic, user_vote)
