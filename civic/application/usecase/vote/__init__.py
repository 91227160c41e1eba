"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteResponse
from .clear_vote import ClearVoteRequest, ClearVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "ClearVoteRequest",
    "ClearVoteUseCase",
    "VoteResponse",
]
