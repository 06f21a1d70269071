"""Withdrawal entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from watchearn.domain.model.common import DomainModel, utcnow
from watchearn.domain.value import AccountId, Money, WithdrawalId, WithdrawalStatus


class Withdrawal(DomainModel):
    """Request to pay out part of an account balance.

    Business rules:
    - At most one pending withdrawal per account
    - Created as pending; settlement moves it on and sets processed_at
    """

    id: WithdrawalId
    account_id: AccountId
    amount: Money = Field(gt=0)
    method: str = Field(min_length=1, max_length=100)
    status: WithdrawalStatus = WithdrawalStatus.PENDING
    requested_at: datetime = Field(default_factory=utcnow)
    processed_at: Optional[datetime] = None
