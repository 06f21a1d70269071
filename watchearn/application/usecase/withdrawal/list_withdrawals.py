"""List withdrawals use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import WithdrawalInfo
from watchearn.domain.service import AccountService, WithdrawalService


class ListWithdrawalsRequest(BaseModel):
    """List withdrawals request."""

    account_id: str


class ListWithdrawalsUseCase:
    """Use case for the account's withdrawal history."""

    def __init__(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> None:
        self.withdrawal_service = withdrawal_service
        self.account_service = account_service

    async def execute(self, request: ListWithdrawalsRequest) -> list[WithdrawalInfo]:
        account_id = self.account_service.parse_account_id(request.account_id)
        withdrawals = await self.withdrawal_service.list_withdrawals(account_id)
        return [WithdrawalInfo.from_withdrawal(w) for w in withdrawals]
