"""Delete topic use case (admin)."""

import logfire
from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import (
    AuditService,
    CommentService,
    TopicService,
    VoteService,
)
from civic.domain.value import AdminActionType, EntityType, TopicId

from civic.application.usecase.base import BaseUseCase


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    topic_id: UUID


class DeleteTopicResponse(BaseModel):
    """Delete topic response."""

    topic_id: str
    deleted_votes: int
    deleted_comments: int


class DeleteTopicUseCase(BaseUseCase):
    """Use case for deleting a topic along with its votes and comments."""

    def __init__(
        self,
        topic_service: TopicService,
        vote_service: VoteService,
        comment_service: CommentService,
        audit_service: AuditService,
    ) -> None:
        """Initialize delete topic use case.

        Args:
            topic_service: Topic domain service
            vote_service: Vote domain service
            comment_service: Comment domain service
            audit_service: Audit log domain service
        """
        self.topic_service = topic_service
        self.vote_service = vote_service
        self.comment_service = comment_service
        self.audit_service = audit_service

    async def execute(self, request: DeleteTopicRequest) -> DeleteTopicResponse:
        """Execute delete topic flow.

        Steps:
        1. Snapshot the topic (404 if missing)
        2. Delete its votes and comments
        3. Delete the topic
        4. Append AdminAction(delete, topic) with snapshot and cascade counts

        All steps share the request transaction.

        Raises:
            NotFoundError: If topic not found
        """
        topic_id = TopicId(request.topic_id)

        with logfire.span("delete_topic.execute", topic_id=str(topic_id)):
            topic = await self.topic_service.require_topic(topic_id)

            deleted_votes = await self.vote_service.delete_votes_for_topic(topic_id)
            deleted_comments = await self.comment_service.delete_comments_for_topic(
                topic_id
            )
            await self.topic_service.delete_topic(topic_id)

            details = topic.model_dump(mode="json")
            details["deleted_votes"] = deleted_votes
            details["deleted_comments"] = deleted_comments
            await self.audit_service.record(
                AdminActionType.DELETE, EntityType.TOPIC, topic_id, details=details
            )

            return DeleteTopicResponse(
                topic_id=str(topic_id),
                deleted_votes=deleted_votes,
                deleted_comments=deleted_comments,
            )
