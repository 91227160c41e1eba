"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from civic.domain.model import AdminAction, Comment, Topic, Vote
from civic.domain.value import (
    AdminActionId,
    AdminActionType,
    CommentId,
    EntityType,
    TopicId,
    UserToken,
    VoteChoice,
    VoteId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Database row as dict

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(_as_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        external_link=row.get("external_link"),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    Args:
        topic: Topic domain model

    Returns:
        Dict suitable for database insertion
    """
    return topic.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_as_uuid(row["id"])),
        topic_id=TopicId(_as_uuid(row["topic_id"])),
        user_token=UserToken(row["user_token"]),
        choice=VoteChoice(row["choice"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return {
        "id": vote.id,
        "topic_id": vote.topic_id,
        "user_token": vote.user_token.root,
        "choice": vote.choice.value,
        "created_at": vote.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        topic_id=TopicId(_as_uuid(row["topic_id"])),
        author_display_name=row["author_display_name"],
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_admin_action(row: Dict[str, Any]) -> AdminAction:
    """Convert database row to AdminAction domain model."""
    return AdminAction(
        id=AdminActionId(_as_uuid(row["id"])),
        action=AdminActionType(row["action"]),
        entity_type=EntityType(row["entity_type"]),
        entity_id=_as_uuid(row["entity_id"]),
        details=row.get("details") or {},
        created_at=row["created_at"],
    )


def admin_action_to_dict(action: AdminAction) -> Dict[str, Any]:
    """Convert AdminAction domain model to database dict.

    Enum columns take their string values; details must be JSON-ready.
    """
    return {
        "id": action.id,
        "action": action.action.value,
        "entity_type": action.entity_type.value,
        "entity_id": action.entity_id,
        "details": action.details,
        "created_at": action.created_at,
    }
