"""Domain value objects."""

from civic.domain.value.identifiers import (
    AdminActionId,
    CommentId,
    TopicId,
    VoteId,
)
from civic.domain.value.types import (
    AdminActionType,
    Coordinates,
    EntityType,
    GeoFenceStatus,
    UserToken,
    VoteChoice,
    VoteTally,
)

__all__ = [
    # Identifiers
    "TopicId",
    "VoteId",
    "CommentId",
    "AdminActionId",
    # Types
    "VoteChoice",
    "AdminActionType",
    "EntityType",
    "GeoFenceStatus",
    "UserToken",
    "Coordinates",
    "VoteTally",
]
