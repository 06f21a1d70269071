"""Video and vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_daily_votes import (
    GetDailyVotesRequest,
    GetDailyVotesResponse,
    GetDailyVotesUseCase,
)
from .get_video import GetVideoRequest, GetVideoUseCase
from .list_videos import ListVideosUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetDailyVotesRequest",
    "GetDailyVotesResponse",
    "GetDailyVotesUseCase",
    "GetVideoRequest",
    "GetVideoUseCase",
    "ListVideosUseCase",
]
