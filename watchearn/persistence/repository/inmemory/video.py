"""In-memory video repository for testing."""

from typing import Iterable, Optional

from watchearn.domain.model.video import Video
from watchearn.domain.repository.video import VideoRepository
from watchearn.domain.value import VideoId
from watchearn.persistence.catalog import default_videos


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing.

    Seeded with the default catalog unless explicit videos are given.
    """

    def __init__(self, videos: Iterable[Video] | None = None) -> None:
        seed = default_videos() if videos is None else videos
        self._videos: dict[VideoId, Video] = {video.id: video for video in seed}

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        return self._videos.get(video_id)

    async def find_all(self) -> list[Video]:
        """List the catalog, newest first."""
        return sorted(self._videos.values(), key=lambda v: v.created_at, reverse=True)

    async def save(self, video: Video) -> Video:
        """Add or replace a catalog entry."""
        self._videos[video.id] = video
        return video
