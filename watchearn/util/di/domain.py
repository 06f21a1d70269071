"""Domain layer DI providers."""

from dishka import Scope, provide

from watchearn.config import AuthSettings, RewardSettings
from watchearn.domain.repository import (
    AccountRepository,
    TransactionRepository,
    VideoRepository,
    VoteRepository,
    WithdrawalRepository,
)
from watchearn.domain.service import (
    AccountService,
    JWTService,
    TransactionService,
    VideoService,
    VoteService,
    WithdrawalService,
)
from watchearn.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories
    and, in production, its database session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository, reward_settings: RewardSettings
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository, reward_settings=reward_settings
        )

    @provide
    def get_video_service(self, video_repository: VideoRepository) -> VideoService:
        """Provide video domain service."""
        return VideoService(video_repository=video_repository)

    @provide
    def get_transaction_service(
        self, transaction_repository: TransactionRepository
    ) -> TransactionService:
        """Provide transaction domain service."""
        return TransactionService(transaction_repository=transaction_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        account_service: AccountService,
        video_service: VideoService,
        transaction_service: TransactionService,
        reward_settings: RewardSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            account_service=account_service,
            video_service=video_service,
            transaction_service=transaction_service,
            reward_settings=reward_settings,
        )

    @provide
    def get_withdrawal_service(
        self,
        withdrawal_repository: WithdrawalRepository,
        account_service: AccountService,
        transaction_service: TransactionService,
        reward_settings: RewardSettings,
    ) -> WithdrawalService:
        """Provide withdrawal domain service."""
        return WithdrawalService(
            withdrawal_repository=withdrawal_repository,
            account_service=account_service,
            transaction_service=transaction_service,
            reward_settings=reward_settings,
        )
