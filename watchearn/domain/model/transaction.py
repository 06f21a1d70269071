"""Transaction entity (append-only ledger entry)."""

from datetime import datetime

from pydantic import Field

from watchearn.domain.model.common import DomainModel, utcnow
from watchearn.domain.value import (
    AccountId,
    Money,
    TransactionId,
    TransactionStatus,
    TransactionType,
)


class Transaction(DomainModel):
    """Ledger entry created as a side effect of votes and withdrawals."""

    id: TransactionId
    account_id: AccountId
    type: TransactionType
    amount: Money
    description: str
    status: TransactionStatus = TransactionStatus.COMPLETED
    created_at: datetime = Field(default_factory=utcnow)
