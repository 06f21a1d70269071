"""Get video use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import VideoInfo
from watchearn.domain.service import VideoService
from watchearn.domain.value import VideoId


class GetVideoRequest(BaseModel):
    """Get video request."""

    video_id: str


class GetVideoUseCase:
    """Use case for showing one catalog video."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: GetVideoRequest) -> VideoInfo:
        """Load a video.

        Raises:
            NotFoundError: If the video is not in the catalog
        """
        video = await self.video_service.get_video(VideoId(request.video_id))
        return VideoInfo.from_video(video)
