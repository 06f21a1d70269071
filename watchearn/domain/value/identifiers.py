"""Strongly typed identifiers for WatchEarn domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
VoteId = NewType("VoteId", UUID)
TransactionId = NewType("TransactionId", UUID)
WithdrawalId = NewType("WithdrawalId", UUID)

# Catalog videos are keyed by their YouTube video id
VideoId = NewType("VideoId", str)
