"""Get balance use case."""

from typing import Optional

from pydantic import BaseModel

from watchearn.application.usecase.common import AccountInfo, CamelModel, WithdrawalInfo
from watchearn.domain.service import AccountService, WithdrawalService


class GetBalanceRequest(BaseModel):
    """Get balance request."""

    account_id: str


class GetBalanceResponse(CamelModel):
    """Balance overview with withdrawal eligibility."""

    user: AccountInfo
    days_until_withdrawal: int
    withdrawal_eligible: bool
    pending_withdrawal: Optional[WithdrawalInfo]


class GetBalanceUseCase:
    """Use case for the balance overview."""

    def __init__(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> None:
        """Initialize get balance use case.

        Args:
            withdrawal_service: Withdrawal domain service
            account_service: Account domain service
        """
        self.withdrawal_service = withdrawal_service
        self.account_service = account_service

    async def execute(self, request: GetBalanceRequest) -> GetBalanceResponse:
        """Build the balance overview.

        Raises:
            NotFoundError: If the account does not exist
        """
        account_id = self.account_service.parse_account_id(request.account_id)
        info = await self.withdrawal_service.get_balance_info(account_id)
        pending = info.pending_withdrawal
        return GetBalanceResponse(
            user=AccountInfo.from_account(info.account),
            days_until_withdrawal=info.days_until_withdrawal,
            withdrawal_eligible=info.withdrawal_eligible,
            pending_withdrawal=WithdrawalInfo.from_withdrawal(pending) if pending else None,
        )
