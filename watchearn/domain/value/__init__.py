"""Domain value objects for WatchEarn."""

from watchearn.domain.value.identifiers import (
    AccountId,
    TransactionId,
    VideoId,
    VoteId,
    WithdrawalId,
)
from watchearn.domain.value.types import (
    CENT,
    Email,
    Money,
    RewardRange,
    TransactionStatus,
    TransactionType,
    VoteType,
    WithdrawalStatus,
    round_currency,
)

__all__ = [
    # Identifiers
    "AccountId",
    "TransactionId",
    "VideoId",
    "VoteId",
    "WithdrawalId",
    # Types
    "CENT",
    "Email",
    "Money",
    "RewardRange",
    "TransactionStatus",
    "TransactionType",
    "VoteType",
    "WithdrawalStatus",
    "round_currency",
]
