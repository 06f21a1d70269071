"""Repository interfaces for WatchEarn domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from watchearn.domain.repository.account import AccountRepository
from watchearn.domain.repository.transaction import TransactionRepository
from watchearn.domain.repository.video import VideoRepository
from watchearn.domain.repository.vote import VoteRepository
from watchearn.domain.repository.withdrawal import WithdrawalRepository

__all__ = [
    "AccountRepository",
    "TransactionRepository",
    "VideoRepository",
    "VoteRepository",
    "WithdrawalRepository",
]
