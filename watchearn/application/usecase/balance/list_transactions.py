"""List transactions use case."""

from pydantic import BaseModel

from watchearn.application.usecase.common import TransactionInfo
from watchearn.domain.service import AccountService, TransactionService


class ListTransactionsRequest(BaseModel):
    """List transactions request."""

    account_id: str


class ListTransactionsUseCase:
    """Use case for the account's ledger history."""

    def __init__(
        self, transaction_service: TransactionService, account_service: AccountService
    ) -> None:
        self.transaction_service = transaction_service
        self.account_service = account_service

    async def execute(self, request: ListTransactionsRequest) -> list[TransactionInfo]:
        """List ledger entries, newest first."""
        account_id = self.account_service.parse_account_id(request.account_id)
        transactions = await self.transaction_service.list_for_account(account_id)
        return [TransactionInfo.from_transaction(t) for t in transactions]
