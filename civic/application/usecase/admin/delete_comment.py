"""Delete comment use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from civic.domain.service import AuditService, CommentService
from civic.domain.value import AdminActionType, CommentId, EntityType

from civic.application.usecase.base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: UUID


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    topic_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for permanently removing a comment."""

    def __init__(
        self, comment_service: CommentService, audit_service: AuditService
    ) -> None:
        self.comment_service = comment_service
        self.audit_service = audit_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_service.delete_comment(
            CommentId(request.comment_id)
        )
        await self.audit_service.record(
            AdminActionType.DELETE,
            EntityType.COMMENT,
            comment.id,
            details=comment.model_dump(mode="json"),
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id), topic_id=str(comment.topic_id)
        )
