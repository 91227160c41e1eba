"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from civic.domain.value.common import RootValueObject, ValueObject


class VoteChoice(str, Enum):
    """Direction of a vote on a topic."""

    UP = "up"
    DOWN = "down"


class AdminActionType(str, Enum):
    """Kind of admin mutation recorded in the audit log."""

    CREATE = "create"
    DELETE = "delete"


class EntityType(str, Enum):
    """Entity touched by an admin action."""

    TOPIC = "topic"
    COMMENT = "comment"


class GeoFenceStatus(str, Enum):
    """Result of a geo-fence check.

    UNRESOLVED means no position could be obtained; it never blocks use.
    """

    INSIDE = "inside"
    OUTSIDE = "outside"
    UNRESOLVED = "unresolved"


class UserToken(RootValueObject[str]):
    """Anonymous per-browser identifier.

    Keys the one-vote-per-user rule only. It is client-held and trivially
    spoofable, so it is never treated as a credential.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is URL-safe and 8-128 characters."""
        if not re.fullmatch(r"[A-Za-z0-9_-]{8,128}", v):
            raise ValueError("User token must be 8-128 URL-safe characters")
        return v


class Coordinates(ValueObject):
    """A latitude/longitude pair in decimal degrees."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class VoteTally(ValueObject):
    """Aggregate vote counters for a topic."""

    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
