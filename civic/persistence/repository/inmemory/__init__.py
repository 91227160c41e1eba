"""In-memory repository implementations for testing."""

from .admin_action import InMemoryAdminActionRepository
from .comment import InMemoryCommentRepository
from .topic import InMemoryTopicRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAdminActionRepository",
    "InMemoryCommentRepository",
    "InMemoryTopicRepository",
    "InMemoryVoteRepository",
]
