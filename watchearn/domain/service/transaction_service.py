"""Transaction ledger domain service."""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import logfire

from watchearn.domain.model import Transaction
from watchearn.domain.repository import TransactionRepository
from watchearn.domain.value import (
    AccountId,
    TransactionId,
    TransactionStatus,
    TransactionType,
)

from .base import Service


class TransactionService(Service):
    """Appends and reads an account's ledger entries."""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def record_credit(
        self,
        account_id: AccountId,
        amount: Decimal,
        description: str,
        now: datetime,
    ) -> Transaction:
        """Append a completed credit entry."""
        return await self._append(
            account_id,
            TransactionType.CREDIT,
            amount,
            description,
            TransactionStatus.COMPLETED,
            now,
        )

    async def record_withdrawal_request(
        self,
        account_id: AccountId,
        amount: Decimal,
        method: str,
        now: datetime,
    ) -> Transaction:
        """Append a pending withdrawal entry."""
        return await self._append(
            account_id,
            TransactionType.WITHDRAWAL,
            amount,
            f"Withdrawal request via {method}",
            TransactionStatus.PENDING,
            now,
        )

    async def list_for_account(self, account_id: AccountId) -> list[Transaction]:
        """List an account's ledger entries, newest first."""
        with logfire.span(
            "transaction_service.list_for_account", account_id=str(account_id)
        ):
            return await self.transaction_repository.find_by_account(account_id)

    async def _append(
        self,
        account_id: AccountId,
        type: TransactionType,
        amount: Decimal,
        description: str,
        status: TransactionStatus,
        now: datetime,
    ) -> Transaction:
        transaction = Transaction(
            id=TransactionId(uuid4()),
            account_id=account_id,
            type=type,
            amount=amount,
            description=description,
            status=status,
            created_at=now,
        )
        saved = await self.transaction_repository.save(transaction)
        logfire.info(
            "Transaction recorded",
            account_id=str(account_id),
            type=type.value,
            status=status.value,
            amount=str(amount),
        )
        return saved
