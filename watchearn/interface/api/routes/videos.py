"""Video catalog and voting routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from watchearn.application.usecase.common import VideoInfo
from watchearn.application.usecase.video import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetDailyVotesRequest,
    GetDailyVotesResponse,
    GetDailyVotesUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    ListVideosUseCase,
)
from watchearn.interface.api.security import require_account_id

router = APIRouter(tags=["videos"], route_class=DishkaRoute)


class VoteBody(BaseModel):
    """Vote request body."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    vote_type: str = ""


@router.get("/videos", response_model=list[VideoInfo])
async def list_videos(
    list_videos_use_case: FromDishka[ListVideosUseCase],
) -> list[VideoInfo]:
    """List the catalog, newest first."""
    return await list_videos_use_case.execute()


@router.get("/videos/{video_id}", response_model=VideoInfo)
async def get_video(
    video_id: str,
    get_video_use_case: FromDishka[GetVideoUseCase],
) -> VideoInfo:
    """Show one catalog video."""
    return await get_video_use_case.execute(GetVideoRequest(video_id=video_id))


@router.post("/videos/{video_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    video_id: str,
    body: VoteBody,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    account_id: str = Depends(require_account_id),
) -> CastVoteResponse:
    """Vote on a video and collect its reward.

    Request:
        {"voteType": "like"}

    Errors:
        401 without a valid session, 400 for an invalid vote type or a used
        up voting window, 404 for an unknown video.
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(account_id=account_id, video_id=video_id, vote_type=body.vote_type)
    )


@router.get("/daily-votes", response_model=GetDailyVotesResponse)
async def get_daily_votes(
    get_daily_votes_use_case: FromDishka[GetDailyVotesUseCase],
    account_id: str = Depends(require_account_id),
) -> GetDailyVotesResponse:
    """Report votes used and left in the current voting window."""
    return await get_daily_votes_use_case.execute(
        GetDailyVotesRequest(account_id=account_id)
    )
