"""Default video catalog.

Every entry is a YouTube video. Entries are timestamped one second apart,
"Video 1" newest, so listing newest first keeps catalog order.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from watchearn.domain.model import Video
from watchearn.domain.value import VideoId

YOUTUBE_IDS = [
    "W5PRZuaQ3VM",
    "keOaQm6RpBg",
    "aP2up9N6H-g",
    "VGa1imApfdg",
    "C_BZQkU5Cds",
    "kQcq3rpne78",
    "gx-zPheFnHo",
    "0xzN6FM5x_E",
    "7oBZ8sBjdyQ",
    "UYaY2Kb_PKI",
    "s92UMJNjPIA",
    "qIVDxL2lgN4",
    "HXFkg0vwLpQ",
    "o-Ikkh5oxuo",
    "A92_B_mnO-I",
    "fvyBCesuxMM",
    "7QLzzSml07Y",
    "t8Zz1XGuPK8",
    "XMdrHHh2aJc",
    "ErwS24cBZPc",
    "OnQXRxW9VcQ",
    "MRV8mFWwtS4",
    "6vEEVNAOFFY",
    "A4WZF74dAg4",
    "taOdaf_nw3U",
    "imgPdo4TaT8",
    "wXcBGfXXL4w",
    "Kr8XAnR80XA",
    "qYbhqbOEaY8",
    "EbXSbP-wEFU",
    "50A9wjJ40Dk",
    "O6rHeD5x2tI",
    "vDGrfhJH1P4",
    "fLonJKaTQqM",
]

CATALOG_EPOCH = datetime(2025, 1, 1, tzinfo=timezone.utc)


def default_videos(
    reward_min: Decimal = Decimal("0.30"),
    reward_max: Decimal = Decimal("2.00"),
) -> list[Video]:
    """Build the default catalog."""
    return [
        Video(
            id=VideoId(youtube_id),
            title=f"Video {index}",
            description="YouTube Video",
            url=f"https://www.youtube.com/embed/{youtube_id}",
            thumbnail=f"https://img.youtube.com/vi/{youtube_id}/maxresdefault.jpg",
            reward_min=reward_min,
            reward_max=reward_max,
            created_at=CATALOG_EPOCH - timedelta(seconds=index),
        )
        for index, youtube_id in enumerate(YOUTUBE_IDS, start=1)
    ]
