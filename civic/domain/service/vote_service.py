"""Vote domain service.

The ledger keeps, per (topic, user token), one of three states: no vote,
voted up, voted down. Clicking a choice moves between them:

    current   click   next      upvotes  downvotes
    none      up      up        +1       0
    none      down    down      0        +1
    up        up      none      -1       0
    down      down    none      0        -1
    up        down    down      -1       +1
    down      up      up        +1       -1
"""

from datetime import datetime
from typing import NamedTuple
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from civic.domain.error import PersistenceError
from civic.domain.model.vote import Vote
from civic.domain.repository import VoteRepository
from civic.domain.value import TopicId, UserToken, VoteChoice, VoteId, VoteTally

from .base import Service
from .topic_service import TopicService


class VoteTransition(NamedTuple):
    """Outcome of applying a click to the current vote state."""

    next_choice: VoteChoice | None
    upvotes_delta: int
    downvotes_delta: int


class VoteOutcome(NamedTuple):
    """Tally and caller state after a vote change."""

    tally: VoteTally
    user_choice: VoteChoice | None


def _delta(choice: VoteChoice | None, sign: int) -> tuple[int, int]:
    if choice is VoteChoice.UP:
        return sign, 0
    if choice is VoteChoice.DOWN:
        return 0, sign
    return 0, 0


def plan_transition(
    current: VoteChoice | None, target: VoteChoice | None
) -> VoteTransition:
    """Compute the counter deltas for moving from one state to another.

    Args:
        current: Existing choice (None for no vote)
        target: Desired choice (None to clear)

    Returns:
        Transition with the resulting choice and counter deltas
    """
    if current == target:
        return VoteTransition(current, 0, 0)

    old_up, old_down = _delta(current, -1)
    new_up, new_down = _delta(target, +1)
    return VoteTransition(target, old_up + new_up, old_down + new_down)


def plan_click(current: VoteChoice | None, clicked: VoteChoice) -> VoteTransition:
    """Apply toggle semantics: clicking the held choice clears it."""
    target = None if current == clicked else clicked
    return plan_transition(current, target)


class VoteService(Service):
    """Domain service for vote ledger operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        topic_service: TopicService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            topic_service: Topic domain service (owns the counters)
        """
        self.vote_repository = vote_repository
        self.topic_service = topic_service

    async def cast_vote(
        self, topic_id: TopicId, user_token: UserToken, choice: VoteChoice
    ) -> VoteOutcome:
        """Register a click on the up or down button.

        Args:
            topic_id: Topic ID
            user_token: Voter's token
            choice: Clicked choice

        Returns:
            New tally and the caller's resulting choice

        Raises:
            NotFoundError: If topic not found
            PersistenceError: If the store fails; nothing is committed
        """
        with logfire.span(
            "vote_service.cast_vote", topic_id=str(topic_id), choice=choice.value
        ):
            # Topic row lock serialises clicks on this topic, first votes included
            await self.topic_service.require_topic(topic_id, for_update=True)
            current = await self._current_choice(topic_id, user_token)
            transition = plan_click(current, choice)
            return await self._apply(topic_id, user_token, current, transition)

    async def clear_vote(
        self, topic_id: TopicId, user_token: UserToken
    ) -> VoteOutcome:
        """Remove the caller's vote, whatever it is.

        Raises:
            NotFoundError: If topic not found
            PersistenceError: If the store fails; nothing is committed
        """
        with logfire.span("vote_service.clear_vote", topic_id=str(topic_id)):
            topic = await self.topic_service.require_topic(topic_id, for_update=True)
            current = await self._current_choice(topic_id, user_token)
            if current is None:
                logfire.info("No vote to clear", topic_id=str(topic_id))
                return VoteOutcome(topic.tally, None)
            transition = plan_transition(current, None)
            return await self._apply(topic_id, user_token, current, transition)

    async def get_user_choices(
        self, user_token: UserToken, topic_ids: list[TopicId]
    ) -> dict[TopicId, VoteChoice]:
        """Look up the caller's choices on a page of topics.

        Args:
            user_token: Voter's token
            topic_ids: Topics to check

        Returns:
            Mapping of topic ID to choice, for topics the user voted on
        """
        if not topic_ids:
            return {}

        votes = await self.vote_repository.find_by_user_and_topics(
            user_token=user_token,
            topic_ids=topic_ids,
        )
        return {vote.topic_id: vote.choice for vote in votes}

    async def reconcile_tally(self, topic_id: TopicId) -> VoteTally:
        """Recompute a topic's counters from its vote rows.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("vote_service.reconcile_tally", topic_id=str(topic_id)):
            topic = await self.topic_service.require_topic(topic_id)
            counted = await self.vote_repository.count_by_topic(topic_id)
            if counted != topic.tally:
                logfire.warn(
                    "Tally drift corrected",
                    topic_id=str(topic_id),
                    stored_up=topic.upvotes,
                    stored_down=topic.downvotes,
                    counted_up=counted.upvotes,
                    counted_down=counted.downvotes,
                )
            return await self.topic_service.set_tally(topic_id, counted)

    async def delete_votes_for_topic(self, topic_id: TopicId) -> int:
        """Remove every vote on a topic (topic deletion cascade)."""
        with logfire.span(
            "vote_service.delete_votes_for_topic", topic_id=str(topic_id)
        ):
            deleted = await self.vote_repository.delete_by_topic(topic_id)
            logfire.info("Votes deleted", topic_id=str(topic_id), count=deleted)
            return deleted

    async def _current_choice(
        self, topic_id: TopicId, user_token: UserToken
    ) -> VoteChoice | None:
        existing = await self.vote_repository.find_by_topic_and_user(
            topic_id, user_token, for_update=True
        )
        return existing.choice if existing else None

    async def _apply(
        self,
        topic_id: TopicId,
        user_token: UserToken,
        current: VoteChoice | None,
        transition: VoteTransition,
    ) -> VoteOutcome:
        try:
            if transition.next_choice is None:
                await self.vote_repository.delete_by_topic_and_user(
                    topic_id, user_token
                )
            else:
                await self.vote_repository.upsert(
                    Vote(
                        id=VoteId(uuid4()),
                        topic_id=topic_id,
                        user_token=user_token,
                        choice=transition.next_choice,
                        created_at=datetime.now(),
                    )
                )

            tally = await self.topic_service.adjust_tally(
                topic_id, transition.upvotes_delta, transition.downvotes_delta
            )
        except SQLAlchemyError as e:
            logfire.error(
                "Vote change failed",
                topic_id=str(topic_id),
                current=current.value if current else None,
                error=str(e),
            )
            raise PersistenceError("Could not record vote") from e

        logfire.info(
            "Vote changed",
            topic_id=str(topic_id),
            previous=current.value if current else None,
            current=(
                transition.next_choice.value if transition.next_choice else None
            ),
            upvotes=tally.upvotes,
            downvotes=tally.downvotes,
        )
        return VoteOutcome(tally, transition.next_choice)
