"""Response models shared by several use cases.

Field names are snake_case in Python and camelCase on the wire. Owned
records expose their account as ``userId``, the name clients know it by.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from watchearn.domain.model import Account, Transaction, Video, Vote, Withdrawal
from watchearn.domain.value import (
    Money,
    TransactionStatus,
    TransactionType,
    VoteType,
    WithdrawalStatus,
)


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountInfo(CamelModel):
    """Account as shown to its owner."""

    id: str
    name: str
    email: str
    balance: Money
    created_at: datetime
    first_earn_at: Optional[datetime]
    voting_streak: int
    last_voted_at: Optional[datetime]
    last_vote_date_reset: Optional[datetime]
    voting_days_count: int

    @classmethod
    def from_account(cls, account: Account) -> "AccountInfo":
        return cls(
            id=str(account.id),
            name=account.name,
            email=account.email.root,
            balance=account.balance,
            created_at=account.created_at,
            first_earn_at=account.first_earn_at,
            voting_streak=account.voting_streak,
            last_voted_at=account.last_voted_at,
            last_vote_date_reset=account.last_vote_date_reset,
            voting_days_count=account.voting_days_count,
        )


class VideoInfo(CamelModel):
    """Catalog entry."""

    id: str
    title: str
    description: str
    url: str
    thumbnail: str
    reward_min: Money
    reward_max: Money
    created_at: datetime

    @classmethod
    def from_video(cls, video: Video) -> "VideoInfo":
        return cls(
            id=video.id,
            title=video.title,
            description=video.description,
            url=video.url,
            thumbnail=video.thumbnail,
            reward_min=video.reward_min,
            reward_max=video.reward_max,
            created_at=video.created_at,
        )


class VoteInfo(CamelModel):
    """Recorded vote."""

    id: str
    user_id: str
    video_id: str
    vote_type: VoteType
    reward_amount: Money
    created_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteInfo":
        return cls(
            id=str(vote.id),
            user_id=str(vote.account_id),
            video_id=vote.video_id,
            vote_type=vote.vote_type,
            reward_amount=vote.reward_amount,
            created_at=vote.created_at,
        )


class TransactionInfo(CamelModel):
    """Ledger entry."""

    id: str
    user_id: str
    type: TransactionType
    amount: Money
    description: str
    status: TransactionStatus
    created_at: datetime

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionInfo":
        return cls(
            id=str(transaction.id),
            user_id=str(transaction.account_id),
            type=transaction.type,
            amount=transaction.amount,
            description=transaction.description,
            status=transaction.status,
            created_at=transaction.created_at,
        )


class WithdrawalInfo(CamelModel):
    """Withdrawal request."""

    id: str
    user_id: str
    amount: Money
    method: str
    status: WithdrawalStatus
    requested_at: datetime
    processed_at: Optional[datetime]

    @classmethod
    def from_withdrawal(cls, withdrawal: Withdrawal) -> "WithdrawalInfo":
        return cls(
            id=str(withdrawal.id),
            user_id=str(withdrawal.account_id),
            amount=withdrawal.amount,
            method=withdrawal.method,
            status=withdrawal.status,
            requested_at=withdrawal.requested_at,
            processed_at=withdrawal.processed_at,
        )
