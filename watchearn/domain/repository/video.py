"""Video catalog repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from watchearn.domain.model.video import Video
from watchearn.domain.value import VideoId


class VideoRepository(ABC):
    """Repository for the video catalog."""

    @abstractmethod
    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID.

        Args:
            video_id: The video's catalog ID

        Returns:
            The video if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Video]:
        """List the catalog, newest first."""
        pass

    @abstractmethod
    async def save(self, video: Video) -> Video:
        """Add or replace a catalog entry.

        Args:
            video: The video to save

        Returns:
            The saved video
        """
        pass
