"""
Authentication router for login and the caller's own account.
"""
from fastapi import APIRouter, Depends

from myflix.dependencies.auth import CurrentAccount
from myflix.dependencies.services import get_access_service
from myflix.schemas.account import AccountResponse
from myflix.schemas.auth import LoginRequest, LoginResponse
from myflix.services.access_service import AccessService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Send the token on protected endpoints as `Authorization: Bearer <token>`.
    """
    return await access_service.login(body)


@router.get(
    "/users/me",
    response_model=AccountResponse,
    tags=["Users"],
    summary="Get current account",
)
async def get_current_account_info(current_account: CurrentAccount):
    """Get the account the bearer token was issued for."""
    return AccountResponse.from_account(current_account)
