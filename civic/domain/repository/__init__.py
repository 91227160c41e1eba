"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from civic.domain.repository.admin_action import AdminActionRepository
from civic.domain.repository.comment import CommentRepository
from civic.domain.repository.topic import TopicRepository
from civic.domain.repository.vote import VoteRepository

__all__ = [
    "TopicRepository",
    "VoteRepository",
    "CommentRepository",
    "AdminActionRepository",
]
