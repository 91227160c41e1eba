"""Unit tests for ListTopicsUseCase and GetTopicUseCase."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from civic.application.usecase.topic import (
    GetTopicRequest,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsUseCase,
)
from civic.domain.error import NotFoundError
from civic.domain.repository import TopicRepository
from civic.domain.service import VoteService
from civic.domain.value import UserToken, VoteChoice
from tests.conftest import make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListTopicsUseCase:
    """Tests for ListTopicsUseCase."""

    @pytest.mark.asyncio
    async def test_items_carry_tally_and_caller_vote(self, unit_env):
        """Each item should show counters and the caller's own choice."""
        use_case = await unit_env.get(ListTopicsUseCase)
        vote_service = await unit_env.get(VoteService)
        topic_repo = await unit_env.get(TopicRepository)
        now = datetime.now()
        older = await topic_repo.save(make_topic(title="Older", created_at=now))
        newer = await topic_repo.save(
            make_topic(title="Newer", created_at=now + timedelta(seconds=1))
        )
        caller = UserToken("caller-token-01")
        await vote_service.cast_vote(older.id, caller, VoteChoice.DOWN)
        await vote_service.cast_vote(older.id, UserToken("other-token-01"), VoteChoice.UP)

        response = await use_case.execute(ListTopicsRequest(user_token=caller.root))

        assert response.total == 2
        assert [t.title for t in response.topics] == ["Newer", "Older"]
        newer_item, older_item = response.topics
        assert newer_item.topic_id == str(newer.id)
        assert newer_item.user_vote is None
        assert older_item.user_vote == VoteChoice.DOWN
        assert (older_item.upvotes, older_item.downvotes) == (1, 1)

    @pytest.mark.asyncio
    async def test_malformed_token_is_ignored(self, unit_env):
        """A malformed token should list topics without vote state."""
        use_case = await unit_env.get(ListTopicsUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        await topic_repo.save(make_topic())

        response = await use_case.execute(ListTopicsRequest(user_token="bad token!"))

        assert response.topics[0].user_vote is None


class TestGetTopicUseCase:
    """Tests for GetTopicUseCase."""

    @pytest.mark.asyncio
    async def test_get_missing_topic_raises(self, unit_env):
        use_case = await unit_env.get(GetTopicUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopicRequest(topic_id=uuid4()))
