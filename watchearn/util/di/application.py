"""Application layer DI providers."""

from dishka import Scope, provide

from watchearn.application.usecase.auth import (
    GetCurrentAccountUseCase,
    LoginUseCase,
    SignupUseCase,
)
from watchearn.application.usecase.balance import (
    GetBalanceUseCase,
    ListTransactionsUseCase,
)
from watchearn.application.usecase.video import (
    CastVoteUseCase,
    GetDailyVotesUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
)
from watchearn.application.usecase.withdrawal import (
    ListWithdrawalsUseCase,
    RequestWithdrawalUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide
    def get_current_account_use_case(
        self, account_service: AccountService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(account_service=account_service)

    # Video use cases
    @provide
    def get_list_videos_use_case(self, video_service: VideoService) -> ListVideosUseCase:
        """Provide list videos use case."""
        return ListVideosUseCase(video_service=video_service)

    @provide
    def get_get_video_use_case(self, video_service: VideoService) -> GetVideoUseCase:
        """Provide get video use case."""
        return GetVideoUseCase(video_service=video_service)

    @provide
    def get_cast_vote_use_case(
        self, vote_service: VoteService, account_service: AccountService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, account_service=account_service)

    @provide
    def get_daily_votes_use_case(
        self, vote_service: VoteService, account_service: AccountService
    ) -> GetDailyVotesUseCase:
        """Provide daily votes use case."""
        return GetDailyVotesUseCase(
            vote_service=vote_service, account_service=account_service
        )

    # Balance use cases
    @provide
    def get_balance_use_case(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> GetBalanceUseCase:
        """Provide get balance use case."""
        return GetBalanceUseCase(
            withdrawal_service=withdrawal_service, account_service=account_service
        )

    @provide
    def get_list_transactions_use_case(
        self, transaction_service: TransactionService, account_service: AccountService
    ) -> ListTransactionsUseCase:
        """Provide list transactions use case."""
        return ListTransactionsUseCase(
            transaction_service=transaction_service, account_service=account_service
        )

    # Withdrawal use cases
    @provide
    def get_request_withdrawal_use_case(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> RequestWithdrawalUseCase:
        """Provide request withdrawal use case."""
        return RequestWithdrawalUseCase(
            withdrawal_service=withdrawal_service, account_service=account_service
        )

    @provide
    def get_list_withdrawals_use_case(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> ListWithdrawalsUseCase:
        """Provide list withdrawals use case."""
        return ListWithdrawalsUseCase(
            withdrawal_service=withdrawal_service, account_service=account_service
        )
