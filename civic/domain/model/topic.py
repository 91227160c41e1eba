"""Topic aggregate root.

A topic is a claimed municipal change that the public judges with
up/down votes and discusses in comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import TopicId, VoteTally


class Topic(DomainModel):
    """Topic aggregate root.

    Created and deleted by admins only; otherwise immutable except for the
    vote counters, which the vote ledger maintains.
    """

    id: TopicId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=5000)
    external_link: Optional[str] = Field(default=None, max_length=2000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def tally(self) -> VoteTally:
        """Current vote counters."""
        return VoteTally(upvotes=self.upvotes, downvotes=self.downvotes)
