"""Vote entity.

Each user token holds at most one live vote per topic.
"""

from datetime import datetime

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import TopicId, UserToken, VoteChoice, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (topic_id, user_token) (enforced by database unique constraint)
    - Switching choice replaces the row in place (upsert)
    - Never created or removed by admins
    """

    id: VoteId
    topic_id: TopicId
    user_token: UserToken
    choice: VoteChoice
    created_at: datetime = Field(default_factory=datetime.now)
