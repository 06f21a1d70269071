"""Video catalog entry."""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, model_validator

from watchearn.domain.model.common import DomainModel, utcnow
from watchearn.domain.value import Money, RewardRange, VideoId


class Video(DomainModel):
    """Read-only catalog entry a viewer can vote on."""

    id: VideoId
    title: str
    description: str = ""
    url: str
    thumbnail: str
    reward_min: Money = Field(default=Decimal("0.30"), ge=0)
    reward_max: Money = Field(default=Decimal("2.00"), ge=0)
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_reward_bounds(self) -> "Video":
        """Reward bounds must not be inverted."""
        if self.reward_max < self.reward_min:
            raise ValueError("reward_max must be greater than or equal to reward_min")
        return self

    @property
    def reward_range(self) -> RewardRange:
        """Bounds a vote on this video is rewarded within."""
        return RewardRange(minimum=self.reward_min, maximum=self.reward_max)
