"""Vote entity.

A vote is a like or dislike cast on a catalog video. Every accepted vote
earns its caster a reward.
"""

from datetime import datetime

from pydantic import Field

from watchearn.domain.model.common import DomainModel, utcnow
from watchearn.domain.value import AccountId, Money, VideoId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Immutable once created. Votes are bounded by the per-window vote cap
    only; the same video may be voted on again in a later vote.
    """

    id: VoteId
    account_id: AccountId
    video_id: VideoId
    vote_type: VoteType
    reward_amount: Money
    created_at: datetime = Field(default_factory=utcnow)
