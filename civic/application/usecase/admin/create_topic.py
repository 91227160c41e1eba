"""Create topic use case (admin)."""

from pydantic import BaseModel

from civic.domain.service import AuditService, TopicService
from civic.domain.value import AdminActionType, EntityType

from civic.application.usecase.base import BaseUseCase
from civic.application.usecase.topic.list_topics import TopicItem


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    title: str
    description: str
    external_link: str | None = None


class CreateTopicUseCase(BaseUseCase):
    """Use case for creating a topic and recording it in the audit log."""

    def __init__(self, topic_service: TopicService, audit_service: AuditService) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
            audit_service: Audit log domain service
        """
        self.topic_service = topic_service
        self.audit_service = audit_service

    async def execute(self, request: CreateTopicRequest) -> TopicItem:
        """Execute create topic flow.

        Steps:
        1. Validate and store the topic
        2. Append AdminAction(create, topic) with the topic snapshot

        Args:
            request: Create topic request

        Returns:
            Created topic

        Raises:
            ValidationError: If title or description is blank
        """
        topic = await self.topic_service.create_topic(
            title=request.title,
            description=request.description,
            external_link=request.external_link,
        )

        await self.audit_service.record(
            AdminActionType.CREATE,
            EntityType.TOPIC,
            topic.id,
            details=topic.model_dump(mode="json"),
        )

        return TopicItem.from_topic(topic)
