"""Topic use cases."""

from .get_topic import GetTopicRequest, GetTopicUseCase
from .list_topics import (
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
    TopicItem,
)

__all__ = [
    "GetTopicRequest",
    "GetTopicUseCase",
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "TopicItem",
]
