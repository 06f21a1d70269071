"""Mappers for converting between database rows and domain models.

Domain models are frozen Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from decimal import Decimal
from typing import Any, Dict
from uuid import UUID

from watchearn.domain.model import Account, Transaction, Video, Vote, Withdrawal
from watchearn.domain.value import (
    AccountId,
    Email,
    TransactionId,
    TransactionStatus,
    TransactionType,
    VideoId,
    VoteId,
    VoteType,
    WithdrawalId,
    WithdrawalStatus,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        name=row["name"],
        email=Email(row["email"]),
        balance=Decimal(row["balance"]),
        created_at=row["created_at"],
        first_earn_at=row.get("first_earn_at"),
        voting_streak=row["voting_streak"],
        last_voted_at=row.get("last_voted_at"),
        last_vote_date_reset=row.get("last_vote_date_reset"),
        voting_days_count=row["voting_days_count"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return {
        "id": account.id,
        "name": account.name,
        "email": account.email.root,
        "balance": account.balance,
        "created_at": account.created_at,
        "first_earn_at": account.first_earn_at,
        "voting_streak": account.voting_streak,
        "last_voted_at": account.last_voted_at,
        "last_vote_date_reset": account.last_vote_date_reset,
        "voting_days_count": account.voting_days_count,
    }


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model."""
    return Video(
        id=VideoId(row["id"]),
        title=row["title"],
        description=row.get("description") or "",
        url=row["url"],
        thumbnail=row["thumbnail"],
        reward_min=Decimal(row["reward_min"]),
        reward_max=Decimal(row["reward_max"]),
        created_at=row["created_at"],
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict."""
    return video.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        video_id=VideoId(row["video_id"]),
        vote_type=VoteType(row["vote_type"]),
        reward_amount=Decimal(row["reward_amount"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enums are stored by value.
    """
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_transaction(row: Dict[str, Any]) -> Transaction:
    """Convert database row to Transaction domain model."""
    return Transaction(
        id=TransactionId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        type=TransactionType(row["type"]),
        amount=Decimal(row["amount"]),
        description=row["description"],
        status=TransactionStatus(row["status"]),
        created_at=row["created_at"],
    )


def transaction_to_dict(transaction: Transaction) -> Dict[str, Any]:
    """Convert Transaction domain model to database dict."""
    data = transaction.model_dump()
    data["type"] = transaction.type.value
    data["status"] = transaction.status.value
    return data


def row_to_withdrawal(row: Dict[str, Any]) -> Withdrawal:
    """Convert database row to Withdrawal domain model."""
    return Withdrawal(
        id=WithdrawalId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        amount=Decimal(row["amount"]),
        method=row["method"],
        status=WithdrawalStatus(row["status"]),
        requested_at=row["requested_at"],
        processed_at=row.get("processed_at"),
    )


def withdrawal_to_dict(withdrawal: Withdrawal) -> Dict[str, Any]:
    """Convert Withdrawal domain model to database dict."""
    data = withdrawal.model_dump()
    data["status"] = withdrawal.status.value
    return data
