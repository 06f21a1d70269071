"""Test configuration and fixtures."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import logfire

from watchearn.domain.model import Account, Video
from watchearn.domain.value import AccountId, Email, VideoId

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def make_account(
    email: str = "viewer@example.com",
    balance: str = "213.19",
    **overrides,
) -> Account:
    """Build an account with sensible defaults for tests."""
    return Account(
        id=overrides.pop("id", AccountId(uuid4())),
        name=overrides.pop("name", "Test Viewer"),
        email=Email(email),
        balance=Decimal(balance),
        created_at=overrides.pop("created_at", T0),
        **overrides,
    )


def make_video(
    video_id: str = "test-video",
    reward: str | None = "1.50",
    title: str = "Test Video",
) -> Video:
    """Build a catalog video.

    With ``reward`` set both bounds are equal, so every vote pays exactly
    that amount. Pass ``reward=None`` for the default 0.30-2.00 range.
    """
    bounds = {}
    if reward is not None:
        bounds = {"reward_min": Decimal(reward), "reward_max": Decimal(reward)}
    return Video(
        id=VideoId(video_id),
        title=title,
        description="YouTube Video",
        url=f"https://www.youtube.com/embed/{video_id}",
        thumbnail=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
        created_at=T0,
        **bounds,
    )
