"""Unit tests for DeleteTopicUseCase."""

from uuid import uuid4

import pytest

from civic.application.usecase.admin import DeleteTopicRequest, DeleteTopicUseCase
from civic.domain.error import NotFoundError
from civic.domain.repository import (
    AdminActionRepository,
    CommentRepository,
    TopicRepository,
    VoteRepository,
)
from civic.domain.service import CommentService, VoteService
from civic.domain.value import AdminActionType, EntityType, UserToken, VoteChoice
from tests.conftest import make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteTopicUseCase:
    """Tests for DeleteTopicUseCase."""

    @pytest.mark.asyncio
    async def test_delete_topic_cascades_and_audits(self, unit_env):
        """Deleting a topic should remove its votes and comments too."""
        # Arrange
        use_case = await unit_env.get(DeleteTopicUseCase)
        vote_service = await unit_env.get(VoteService)
        comment_service = await unit_env.get(CommentService)
        topic_repo = await unit_env.get(TopicRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        audit_repo = await unit_env.get(AdminActionRepository)

        topic = await topic_repo.save(make_topic())
        survivor = await topic_repo.save(make_topic(title="Survivor"))
        alice = UserToken("alice-token-0001")
        bob = UserToken("bob-token-0002")
        await vote_service.cast_vote(topic.id, alice, VoteChoice.UP)
        await vote_service.cast_vote(topic.id, bob, VoteChoice.DOWN)
        await vote_service.cast_vote(survivor.id, alice, VoteChoice.UP)
        await comment_service.add_comment(topic.id, "Boa notícia")
        await comment_service.add_comment(survivor.id, "Fica")

        # Act
        result = await use_case.execute(DeleteTopicRequest(topic_id=topic.id))

        # Assert
        assert result.deleted_votes == 2
        assert result.deleted_comments == 1
        assert await topic_repo.find_by_id(topic.id) is None
        assert await comment_repo.find_by_topic(topic.id) == []
        assert await vote_repo.find_by_topic_and_user(topic.id, alice) is None
        assert await vote_repo.find_by_topic_and_user(topic.id, bob) is None

        # Other topics are untouched
        assert await vote_repo.find_by_topic_and_user(survivor.id, alice) is not None
        assert len(await comment_repo.find_by_topic(survivor.id)) == 1

        actions = audit_repo.all()
        assert len(actions) == 1
        assert actions[0].action == AdminActionType.DELETE
        assert actions[0].entity_type == EntityType.TOPIC
        assert actions[0].entity_id == topic.id
        assert actions[0].details["title"] == topic.title
        assert actions[0].details["deleted_votes"] == 2

    @pytest.mark.asyncio
    async def test_delete_missing_topic_raises_and_records_nothing(self, unit_env):
        use_case = await unit_env.get(DeleteTopicUseCase)
        audit_repo = await unit_env.get(AdminActionRepository)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteTopicRequest(topic_id=uuid4()))

        assert audit_repo.all() == []
