"""Strongly typed identifiers for domain entities."""

from typing import NewType
from uuid import UUID

TopicId = NewType("TopicId", UUID)
VoteId = NewType("VoteId", UUID)
CommentId = NewType("CommentId", UUID)
AdminActionId = NewType("AdminActionId", UUID)
