"""seed_video_catalog

Revision ID: a7d41e05c3b2
Revises: 3f1c2a9d7b10
Create Date: 2026-10-19 09:40:51.902114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from watchearn.config import Settings
from watchearn.persistence.catalog import YOUTUBE_IDS, default_videos


# revision identifiers, used by Alembic.
revision: str = "a7d41e05c3b2"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Seed the default video catalog."""
    videos_table = sa.table(
        "videos",
        sa.column("id", sa.String),
        sa.column("title", sa.String),
        sa.column("description", sa.Text),
        sa.column("url", sa.Text),
        sa.column("thumbnail", sa.Text),
        sa.column("reward_min", sa.Numeric(12, 2)),
        sa.column("reward_max", sa.Numeric(12, 2)),
        sa.column("created_at", sa.TIMESTAMP(timezone=True)),
    )

    rewards = Settings().rewards
    videos = default_videos(rewards.default_reward_min, rewards.default_reward_max)
    op.bulk_insert(videos_table, [video.model_dump() for video in videos])


def downgrade() -> None:
    """Remove the seeded catalog."""
    videos = sa.table("videos", sa.column("id", sa.String))
    op.execute(videos.delete().where(videos.c.id.in_(YOUTUBE_IDS)))
