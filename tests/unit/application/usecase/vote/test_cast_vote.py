"""Unit tests for CastVoteUseCase and ClearVoteUseCase."""

import pytest

from civic.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    ClearVoteRequest,
    ClearVoteUseCase,
)
from civic.domain.repository import TopicRepository
from civic.domain.value import VoteChoice
from tests.conftest import make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

TOKEN = "voter-token-0001"


class TestCastVoteUseCase:
    """Tests for CastVoteUseCase."""

    @pytest.mark.asyncio
    async def test_response_reflects_toggle(self, unit_env):
        """Casting then repeating the same choice should report no vote."""
        use_case = await unit_env.get(CastVoteUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await topic_repo.save(make_topic())

        first = await use_case.execute(
            CastVoteRequest(topic_id=topic.id, user_token=TOKEN, choice=VoteChoice.UP)
        )
        second = await use_case.execute(
            CastVoteRequest(topic_id=topic.id, user_token=TOKEN, choice=VoteChoice.UP)
        )

        assert first.topic_id == str(topic.id)
        assert (first.upvotes, first.downvotes, first.user_vote) == (
            1,
            0,
            VoteChoice.UP,
        )
        assert (second.upvotes, second.downvotes, second.user_vote) == (0, 0, None)


class TestClearVoteUseCase:
    """Tests for ClearVoteUseCase."""

    @pytest.mark.asyncio
    async def test_clear_after_vote(self, unit_env):
        cast = await unit_env.get(CastVoteUseCase)
        clear = await unit_env.get(ClearVoteUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await topic_repo.save(make_topic())
        await cast.execute(
            CastVoteRequest(
                topic_id=topic.id, user_token=TOKEN, choice=VoteChoice.DOWN
            )
        )

        result = await clear.execute(
            ClearVoteRequest(topic_id=topic.id, user_token=TOKEN)
        )

        assert (result.upvotes, result.downvotes, result.user_vote) == (0, 0, None)
