"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import VoteService
from civic.domain.value import TopicId, UserToken, VoteChoice

from civic.application.usecase.base import BaseUseCase


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    topic_id: UUID
    user_token: str  # Caller's token from cookie
    choice: VoteChoice


class VoteResponse(BaseModel):
    """Tally and caller state after a vote change."""

    topic_id: str
    upvotes: int
    downvotes: int
    user_vote: VoteChoice | None


class CastVoteUseCase(BaseUseCase):
    """Use case for clicking up or down on a topic.

    Clicking the choice already held clears it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> VoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            New tally and the caller's resulting choice

        Raises:
            NotFoundError: If topic not found
            PersistenceError: If the vote could not be stored
        """
        outcome = await self.vote_service.cast_vote(
            TopicId(request.topic_id),
            UserToken(request.user_token),
            request.choice,
        )
        return VoteResponse(
            topic_id=str(request.topic_id),
            upvotes=outcome.tally.upvotes,
            downvotes=outcome.tally.downvotes,
            user_vote=outcome.user_choice,
        )
