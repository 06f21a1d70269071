"""Withdrawal use cases."""

from .list_withdrawals import ListWithdrawalsRequest, ListWithdrawalsUseCase
from .request_withdrawal import RequestWithdrawalRequest, RequestWithdrawalUseCase

__all__ = [
    "ListWithdrawalsRequest",
    "ListWithdrawalsUseCase",
    "RequestWithdrawalRequest",
    "RequestWithdrawalUseCase",
]
