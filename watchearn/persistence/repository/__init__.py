"""PostgreSQL repository implementations."""

from watchearn.persistence.repository.account import PostgresAccountRepository
from watchearn.persistence.repository.transaction import PostgresTransactionRepository
from watchearn.persistence.repository.video import PostgresVideoRepository
from watchearn.persistence.repository.vote import PostgresVoteRepository
from watchearn.persistence.repository.withdrawal import PostgresWithdrawalRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresTransactionRepository",
    "PostgresVideoRepository",
    "PostgresVoteRepository",
    "PostgresWithdrawalRepository",
]
