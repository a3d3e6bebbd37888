"""
Users router for registration, account management and favorites.
"""
from fastapi import APIRouter, Depends, status

from myflix.dependencies.auth import CurrentAccount
from myflix.dependencies.services import get_access_service
from myflix.schemas.account import AccountInput, AccountResponse, MessageResponse
from myflix.services.access_service import AccessService

router = APIRouter(prefix="/users", tags=["Users"])


# ==================== Account lifecycle ====================


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
)
async def register(
    body: AccountInput,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Register a new account.

    - **username**: At least 5 alphanumeric characters (must be unique)
    - **password**: Required
    - **email**: Valid email address
    - **birthday**: Optional, YYYY-MM-DD
    """
    return await access_service.register(body)


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List accounts",
)
async def list_accounts(
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.list_accounts()


@router.get(
    "/{username}",
    response_model=AccountResponse,
    summary="Get account by username",
)
async def get_account(
    username: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.get_account(username)


@router.put(
    "/{username}",
    response_model=AccountResponse,
    summary="Update account",
)
async def update_account(
    username: str,
    body: AccountInput,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Replace username, password, email and birthday of an account.

    Only the account itself (or an admin) may update it.
    """
    return await access_service.update_account(current_account, username, body)


@router.delete(
    "/{username}",
    response_model=MessageResponse,
    summary="Delete account",
)
async def delete_account(
    username: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """Permanently delete an account."""
    return await access_service.delete_account(current_account, username)


# ==================== Favorites ====================


@router.post(
    "/{username}/movies/{movie_id}",
    response_model=AccountResponse,
    summary="Add movie to favorites",
)
async def add_favorite(
    username: str,
    movie_id: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Add a movie to the account's favorites.

    Adding a movie twice keeps a single entry. Responds 404 if the movie is
    not in the catalog.
    """
    return await access_service.add_favorite(current_account, username, movie_id)


@router.delete(
    "/{username}/movies/{movie_id}",
    response_model=AccountResponse,
    summary="Remove movie from favorites",
)
async def remove_favorite(
    username: str,
    movie_id: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """Remove a movie from the account's favorites. Removing a non-favorite is a no-op."""
    return await access_service.remove_favorite(current_account, username, movie_id)
