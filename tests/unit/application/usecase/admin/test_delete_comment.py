"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from civic.application.usecase.admin import DeleteCommentRequest, DeleteCommentUseCase
from civic.domain.error import NotFoundError
from civic.domain.repository import AdminActionRepository, TopicRepository
from civic.domain.service import CommentService
from civic.domain.value import AdminActionType, EntityType
from tests.conftest import make_topic
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_comment_removes_and_audits(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        topic_repo = await unit_env.get(TopicRepository)
        audit_repo = await unit_env.get(AdminActionRepository)
        topic = await topic_repo.save(make_topic())
        comment = await comment_service.add_comment(topic.id, "Spam spam spam")

        result = await use_case.execute(DeleteCommentRequest(comment_id=comment.id))

        assert result.comment_id == str(comment.id)
        assert result.topic_id == str(topic.id)
        assert await comment_service.get_comments_for_topic(topic.id) == []

        actions = audit_repo.all()
        assert len(actions) == 1
        assert actions[0].action == AdminActionType.DELETE
        assert actions[0].entity_type == EntityType.COMMENT
        assert actions[0].details["text"] == "Spam spam spam"

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteCommentRequest(comment_id=uuid4()))
