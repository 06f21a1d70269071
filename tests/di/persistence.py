"""Mock persistence providers for testing."""

from dishka import Scope, provide

from watchearn.config import RewardSettings
from watchearn.domain.repository import (
    AccountRepository,
    TransactionRepository,
    VideoRepository,
    VoteRepository,
    WithdrawalRepository,
)
from watchearn.persistence.catalog import default_videos
from watchearn.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
    InMemoryVideoRepository,
    InMemoryVoteRepository,
    InMemoryWithdrawalRepository,
)
from watchearn.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across HTTP requests
    within a container. Every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide
    def get_video_repository(self, reward_settings: RewardSettings) -> VideoRepository:
        """Provide in-memory video repository seeded with the catalog."""
        return InMemoryVideoRepository(
            default_videos(
                reward_settings.default_reward_min, reward_settings.default_reward_max
            )
        )

    @provide
    def get_vote_repository(self) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository()

    @provide
    def get_transaction_repository(self) -> TransactionRepository:
        """Provide in-memory transaction repository."""
        return InMemoryTransactionRepository()

    @provide
    def get_withdrawal_repository(self) -> WithdrawalRepository:
        """Provide in-memory withdrawal repository."""
        return InMemoryWithdrawalRepository()
