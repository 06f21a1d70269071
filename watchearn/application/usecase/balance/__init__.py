"""Balance use cases."""

from .get_balance import GetBalanceRequest, GetBalanceResponse, GetBalanceUseCase
from .list_transactions import ListTransactionsRequest, ListTransactionsUseCase

__all__ = [
    "GetBalanceRequest",
    "GetBalanceResponse",
    "GetBalanceUseCase",
    "ListTransactionsRequest",
    "ListTransactionsUseCase",
]
