"""Withdrawal routes."""

from typing import Union

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from watchearn.application.usecase.common import WithdrawalInfo
from watchearn.application.usecase.withdrawal import (
    ListWithdrawalsRequest,
    ListWithdrawalsUseCase,
    RequestWithdrawalRequest,
    RequestWithdrawalUseCase,
)
from watchearn.interface.api.security import require_account_id

router = APIRouter(prefix="/withdrawals", tags=["withdrawals"], route_class=DishkaRoute)


class WithdrawalBody(BaseModel):
    """Withdrawal request body. Amount may be a number or a numeric string."""

    amount: Union[float, str, None] = None
    method: str = ""


@router.post("", response_model=WithdrawalInfo)
async def request_withdrawal(
    body: WithdrawalBody,
    request_withdrawal_use_case: FromDishka[RequestWithdrawalUseCase],
    account_id: str = Depends(require_account_id),
) -> WithdrawalInfo:
    """Request a payout.

    Request:
        {"amount": 50, "method": "paypal"}

    Errors:
        400 with a ``reason`` when the cooldown has not elapsed, a withdrawal
        is already pending, or the balance is too low.
    """
    return await request_withdrawal_use_case.execute(
        RequestWithdrawalRequest(
            account_id=account_id, amount=body.amount, method=body.method
        )
    )


@router.get("", response_model=list[WithdrawalInfo])
async def list_withdrawals(
    list_withdrawals_use_case: FromDishka[ListWithdrawalsUseCase],
    account_id: str = Depends(require_account_id),
) -> list[WithdrawalInfo]:
    """Withdrawal history, newest first."""
    return await list_withdrawals_use_case.execute(
        ListWithdrawalsRequest(account_id=account_id)
    )
