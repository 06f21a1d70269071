"""Domain value objects for WatchEarn.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any

from pydantic import PlainSerializer, field_validator

from watchearn.domain.value.common import RootValueObject, ValueObject

CENT = Decimal("0.01")


def round_currency(value: Any) -> Decimal:
    """Round a monetary value to cents, half-up.

    Floats are converted through their shortest ``repr`` so that 1.005
    rounds the way it reads rather than the way it is stored.

    Raises:
        InvalidOperation: If the value is not numeric
    """
    if isinstance(value, float):
        value = repr(value)
    amount = Decimal(value)
    if not amount.is_finite():
        raise InvalidOperation(f"Not a finite amount: {value!r}")
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


# Monetary amount: Decimal internally, a plain number on the wire
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class VoteType(str, Enum):
    """Type of vote a viewer can cast on a video."""

    LIKE = "like"
    DISLIKE = "dislike"


class TransactionType(str, Enum):
    """Kind of ledger entry."""

    CREDIT = "credit"
    DEBIT = "debit"
    WITHDRAWAL = "withdrawal"
    WITHDRAWAL_REVERSAL = "withdrawal_reversal"


class TransactionStatus(str, Enum):
    """Settlement state of a ledger entry."""

    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class WithdrawalStatus(str, Enum):
    """Status of a withdrawal request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class Email(RootValueObject[str]):
    """Account email address.

    Stored trimmed and lower-cased so uniqueness is case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class RewardRange(ValueObject):
    """Inclusive bounds for a per-vote reward."""

    minimum: Decimal
    maximum: Decimal

    def contains(self, amount: Decimal) -> bool:
        """Check whether an amount lies inside the bounds."""
        return self.minimum <= amount <= self.maximum
