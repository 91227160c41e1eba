"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from civic.domain.model.topic import Topic
from civic.domain.value import TopicId


def make_topic(
    title: str = "Nova ciclovia na Avenida Itavuvu",
    description: str = "A prefeitura anunciou uma ciclovia de 4 km.",
    external_link: str | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    created_at: datetime | None = None,
) -> Topic:
    """Helper function to build a topic entity for tests.

    Args:
        title: Topic title
        description: Topic description
        external_link: Optional media link
        upvotes: Stored up counter
        downvotes: Stored down counter
        created_at: Creation timestamp (now if omitted)

    Returns:
        Topic with a fresh ID
    """
    return Topic(
        id=TopicId(uuid4()),
        title=title,
        description=description,
        external_link=external_link,
        upvotes=upvotes,
        downvotes=downvotes,
        created_at=created_at or datetime.now(),
    )
