"""Bearer token authentication for routes."""

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Header, HTTPException, status

from watchearn.domain.service import JWTService


def account_id_from_header(jwt_service: JWTService, authorization: str | None) -> str:
    """Resolve the account behind an ``Authorization: Bearer`` header.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw Authorization header value

    Returns:
        Account ID carried by the token

    Raises:
        HTTPException: 401 if the header is missing, malformed or the token is invalid
    """
    scheme, _, token = (authorization or "").partition(" ")
    account_id = None
    if scheme.lower() == "bearer":
        account_id = jwt_service.get_account_id_from_token(token.strip())
    if not account_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return account_id


@inject
async def require_account_id(
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> str:
    """Route dependency yielding the signed-in account ID.

    Dependencies are solved before the request body is validated, so an
    unauthenticated request is a 401 whatever its body holds.

    Usage:
        @router.get("/balance")
        async def get_balance(account_id: str = Depends(require_account_id)):
            ...
    """
    return account_id_from_header(jwt_service, authorization)
