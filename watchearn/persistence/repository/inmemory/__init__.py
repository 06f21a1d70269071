"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .transaction import InMemoryTransactionRepository
from .video import InMemoryVideoRepository
from .vote import InMemoryVoteRepository
from .withdrawal import InMemoryWithdrawalRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryTransactionRepository",
    "InMemoryVideoRepository",
    "InMemoryVoteRepository",
    "InMemoryWithdrawalRepository",
]
