"""List videos use case."""

from watchearn.application.usecase.common import VideoInfo
from watchearn.domain.service import VideoService


class ListVideosUseCase:
    """Use case for browsing the video catalog."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self) -> list[VideoInfo]:
        """List every catalog video, newest first."""
        videos = await self.video_service.list_videos()
        return [VideoInfo.from_video(video) for video in videos]
