"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends

from watchearn.application.usecase.auth import (
    AuthResponse,
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
)
from watchearn.application.usecase.common import AccountInfo
from watchearn.interface.api.security import require_account_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/signup", response_model=AuthResponse)
async def signup(
    request: SignupRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthResponse:
    """Register an account and return it with a session token.

    Request:
        {"name": "Ada", "email": "ada@example.com"}

    Response:
        {"user": {"id": "...", "balance": 213.19, ...}, "token": "..."}
    """
    response = await signup_use_case.execute(request)
    logger.info("Account signed up: %s", response.user.id)
    return response


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Sign in by email."""
    return await login_use_case.execute(request)


@router.get("/me", response_model=AccountInfo)
async def get_current_account(
    get_current_account_use_case: FromDishka[GetCurrentAccountUseCase],
    account_id: str = Depends(require_account_id),
) -> AccountInfo:
    """Return the signed-in account."""
    return await get_current_account_use_case.execute(
        GetCurrentAccountRequest(account_id=account_id)
    )
