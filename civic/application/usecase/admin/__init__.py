"""Admin use cases."""

from .admin_login import AdminLoginRequest, AdminLoginResponse, AdminLoginUseCase
from .create_topic import CreateTopicRequest, CreateTopicUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .delete_topic import DeleteTopicRequest, DeleteTopicResponse, DeleteTopicUseCase
from .reconcile_tally import (
    ReconcileTallyRequest,
    ReconcileTallyResponse,
    ReconcileTallyUseCase,
)

__all__ = [
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminLoginUseCase",
    "CreateTopicRequest",
    "CreateTopicUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "DeleteTopicRequest",
    "DeleteTopicResponse",
    "DeleteTopicUseCase",
    "ReconcileTallyRequest",
    "ReconcileTallyResponse",
    "ReconcileTallyUseCase",
]
