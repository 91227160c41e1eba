"""PostgreSQL repository implementations."""

from civic.persistence.repository.admin_action import PostgresAdminActionRepository
from civic.persistence.repository.comment import PostgresCommentRepository
from civic.persistence.repository.topic import PostgresTopicRepository
from civic.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresTopicRepository",
    "PostgresVoteRepository",
    "PostgresCommentRepository",
    "PostgresAdminActionRepository",
]
