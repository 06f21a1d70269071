"""Video catalog domain service."""

import logfire

from watchearn.domain.error import NotFoundError
from watchearn.domain.model import Video
from watchearn.domain.repository import VideoRepository
from watchearn.domain.value import VideoId

from .base import Service


class VideoService(Service):
    """Read access to the video catalog."""

    def __init__(self, video_repository: VideoRepository) -> None:
        """Initialize video service.

        Args:
            video_repository: Video repository
        """
        self.video_repository = video_repository

    async def list_videos(self) -> list[Video]:
        """List the catalog, newest first."""
        with logfire.span("video_service.list_videos"):
            videos = await self.video_repository.find_all()
            logfire.info("Videos listed", count=len(videos))
            return videos

    async def get_video(self, video_id: VideoId) -> Video:
        """Get a catalog entry.

        Raises:
            NotFoundError: If the video is not in the catalog
        """
        with logfire.span("video_service.get_video", video_id=video_id):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Video not found", video_id=video_id)
                raise NotFoundError("Video", video_id)
            return video
