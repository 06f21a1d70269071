"""Domain model entities for WatchEarn."""

from watchearn.domain.model.account import Account
from watchearn.domain.model.transaction import Transaction
from watchearn.domain.model.video import Video
from watchearn.domain.model.vote import Vote
from watchearn.domain.model.withdrawal import Withdrawal

__all__ = [
    "Account",
    "Transaction",
    "Video",
    "Vote",
    "Withdrawal",
]
