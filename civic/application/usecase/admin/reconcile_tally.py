"""Reconcile tally use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import VoteService
from civic.domain.value import TopicId

from civic.application.usecase.base import BaseUseCase


class ReconcileTallyRequest(BaseModel):
    """Reconcile tally request."""

    topic_id: UUID


class ReconcileTallyResponse(BaseModel):
    """Counters after recomputation."""

    topic_id: str
    upvotes: int
    downvotes: int


class ReconcileTallyUseCase(BaseUseCase):
    """Use case for recomputing a topic's counters from its vote rows."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: ReconcileTallyRequest) -> ReconcileTallyResponse:
        """Execute reconcile flow.

        Raises:
            NotFoundError: If topic not found
        """
        tally = await self.vote_service.reconcile_tally(TopicId(request.topic_id))
        return ReconcileTallyResponse(
            topic_id=str(request.topic_id),
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
        )
