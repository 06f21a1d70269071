"""Balance and ledger routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from watchearn.application.usecase.balance import (
    GetBalanceRequest,
    GetBalanceResponse,
    GetBalanceUseCase,
    ListTransactionsRequest,
    ListTransactionsUseCase,
)
from watchearn.application.usecase.common import TransactionInfo
from watchearn.interface.api.security import require_account_id

router = APIRouter(tags=["balance"], route_class=DishkaRoute)


@router.get("/balance", response_model=GetBalanceResponse)
async def get_balance(
    get_balance_use_case: FromDishka[GetBalanceUseCase],
    account_id: str = Depends(require_account_id),
) -> GetBalanceResponse:
    """Balance overview with withdrawal eligibility."""
    return await get_balance_use_case.execute(GetBalanceRequest(account_id=account_id))


@router.get("/transactions", response_model=list[TransactionInfo])
async def list_transactions(
    list_transactions_use_case: FromDishka[ListTransactionsUseCase],
    account_id: str = Depends(require_account_id),
) -> list[TransactionInfo]:
    """Ledger history, newest first."""
    return await list_transactions_use_case.execute(
        ListTransactionsRequest(account_id=account_id)
    )
