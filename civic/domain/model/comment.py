"""Comment entity."""

from datetime import datetime

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import CommentId, TopicId

ANONYMOUS_AUTHOR = "Anonymous"


class Comment(DomainModel):
    """Comment on a topic.

    Append-only from the user's side: there is no edit, and only admins
    delete.
    """

    id: CommentId
    topic_id: TopicId
    author_display_name: str = ANONYMOUS_AUTHOR
    text: str = Field(min_length=1, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
