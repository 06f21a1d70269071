"""Account aggregate root.

Accounts hold the viewer's balance and the markers the vote ledger uses
to enforce voting windows and the withdrawal cooldown.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from watchearn.domain.model.common import DomainModel, utcnow
from watchearn.domain.value import AccountId, Email, Money


class Account(DomainModel):
    """Account aggregate root.

    Business rules:
    - Email is unique across accounts
    - Balance never goes below zero
    - voting_days_count only increases
    - last_vote_date_reset only moves forward
    """

    id: AccountId
    name: str = Field(min_length=1, max_length=255)
    email: Email
    balance: Money = Field(default=Decimal("0.00"), ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    first_earn_at: Optional[datetime] = None  # Set by the first reward ever earned
    voting_streak: int = Field(default=0, ge=0)
    last_voted_at: Optional[datetime] = None
    last_vote_date_reset: Optional[datetime] = None  # Anchor of the current window
    voting_days_count: int = Field(default=0, ge=0)  # Drives the withdrawal cooldown
