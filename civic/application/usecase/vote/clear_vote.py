"""Clear vote use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import VoteService
from civic.domain.value import TopicId, UserToken

from civic.application.usecase.base import BaseUseCase
from .cast_vote import VoteResponse


class ClearVoteRequest(BaseModel):
    """Clear vote request."""

    topic_id: UUID
    user_token: str


class ClearVoteUseCase(BaseUseCase):
    """Use case for removing the caller's vote on a topic."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: ClearVoteRequest) -> VoteResponse:
        """Execute clear vote flow.

        Raises:
            NotFoundError: If topic not found
            PersistenceError: If the change could not be stored
        """
        outcome = await self.vote_service.clear_vote(
            TopicId(request.topic_id), UserToken(request.user_token)
        )
        return VoteResponse(
            topic_id=str(request.topic_id),
            upvotes=outcome.tally.upvotes,
            downvotes=outcome.tally.downvotes,
            user_vote=outcome.user_choice,
        )
