"""Unit tests for CreateTopicUseCase."""

import pytest

from civic.application.usecase.admin import CreateTopicRequest, CreateTopicUseCase
from civic.domain.error import ValidationError
from civic.domain.repository import AdminActionRepository, TopicRepository
from civic.domain.value import AdminActionType, EntityType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateTopicUseCase:
    """Tests for CreateTopicUseCase."""

    @pytest.mark.asyncio
    async def test_create_topic_records_audit_entry(self, unit_env):
        """Creating a topic should store it and append a create action."""
        use_case = await unit_env.get(CreateTopicUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        audit_repo = await unit_env.get(AdminActionRepository)

        item = await use_case.execute(
            CreateTopicRequest(
                title="Reforma do Parque Campolim",
                description="Novos brinquedos e iluminação.",
                external_link="",
            )
        )

        assert item.upvotes == 0
        assert item.downvotes == 0
        assert item.external_link is None
        assert await topic_repo.count() == 1

        actions = audit_repo.all()
        assert len(actions) == 1
        assert actions[0].action == AdminActionType.CREATE
        assert actions[0].entity_type == EntityType.TOPIC
        assert str(actions[0].entity_id) == item.topic_id
        assert actions[0].details["title"] == "Reforma do Parque Campolim"

    @pytest.mark.asyncio
    async def test_invalid_topic_records_nothing(self, unit_env):
        """A rejected topic should leave both the registry and audit log empty."""
        use_case = await unit_env.get(CreateTopicUseCase)
        topic_repo = await unit_env.get(TopicRepository)
        audit_repo = await unit_env.get(AdminActionRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateTopicRequest(title=" ", description="x"))

        assert await topic_repo.count() == 0
        assert audit_repo.all() == []
