"""Request withdrawal use case."""

from typing import Union

from pydantic import BaseModel

from watchearn.application.usecase.base import BaseUseCase
from watchearn.application.usecase.common import WithdrawalInfo
from watchearn.domain.error import ValidationError
from watchearn.domain.service import AccountService, WithdrawalService


class RequestWithdrawalRequest(BaseModel):
    """Request withdrawal request."""

    account_id: str
    amount: Union[float, str, None] = None  # Parsed by the withdrawal gate
    method: str = ""


class RequestWithdrawalUseCase(BaseUseCase):
    """Use case for requesting a payout."""

    def __init__(
        self, withdrawal_service: WithdrawalService, account_service: AccountService
    ) -> None:
        """Initialize request withdrawal use case.

        Args:
            withdrawal_service: Withdrawal domain service
            account_service: Account domain service
        """
        self.withdrawal_service = withdrawal_service
        self.account_service = account_service

    async def execute(self, request: RequestWithdrawalRequest) -> WithdrawalInfo:
        """Execute request withdrawal flow.

        The balance is left untouched; the withdrawal stays pending until
        it is settled.

        Raises:
            ValidationError: If amount or method is missing
            NotFoundError: If the account does not exist
            BusinessRuleViolationError: If the withdrawal gate rejects the request
            InvalidAmountError: If amount is not a positive number
        """
        amount = request.amount
        if amount is None or (isinstance(amount, str) and not amount.strip()):
            raise ValidationError("Amount and method are required")

        account_id = self.account_service.parse_account_id(request.account_id)
        withdrawal = await self.withdrawal_service.request_withdrawal(
            account_id, amount, request.method
        )
        return WithdrawalInfo.from_withdrawal(withdrawal)
