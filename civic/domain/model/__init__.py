"""Domain model entities."""

from civic.domain.model.admin_action import AdminAction
from civic.domain.model.comment import Comment
from civic.domain.model.topic import Topic
from civic.domain.model.vote import Vote

__all__ = [
    "Topic",
    "Vote",
    "Comment",
    "AdminAction",
]
