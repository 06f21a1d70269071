"""Domain services."""

from .account_service import AccountService
from .base import Service
from .jwt_service import JWTService
from .transaction_service import TransactionService
from .video_service import VideoService
from .vote_service import DailyVoteStatus, VoteResult, VoteService
from .withdrawal_service import BalanceInfo, WithdrawalEligibility, WithdrawalService

__all__ = [
    "AccountService",
    "BalanceInfo",
    "DailyVoteStatus",
    "JWTService",
    "Service",
    "TransactionService",
    "VideoService",
    "VoteResult",
    "VoteService",
    "WithdrawalEligibility",
    "WithdrawalService",
]
