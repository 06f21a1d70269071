"""PostgreSQL implementation of Video repository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from watchearn.domain.model import Video
from watchearn.domain.repository import VideoRepository
from watchearn.domain.value import VideoId
from watchearn.persistence.mappers import row_to_video, video_to_dict
from watchearn.persistence.tables import videos_table


class PostgresVideoRepository(VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, video_id: VideoId) -> Optional[Video]:
        """Find a video by ID."""
        stmt = select(videos_table).where(videos_table.c.id == video_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_video(dict(row)) if row else None

    async def find_all(self) -> List[Video]:
        """List the catalog, newest first."""
        stmt = select(videos_table).order_by(
            videos_table.c.created_at.desc(), videos_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_video(dict(row)) for row in result.mappings().all()]

    async def save(self, video: Video) -> Video:
        """Add or replace a catalog entry."""
        video_dict = video_to_dict(video)
        stmt = insert(videos_table).values(**video_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[videos_table.c.id],
            set_={key: value for key, value in video_dict.items() if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return video
