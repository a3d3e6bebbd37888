"""
Access service: the request-handling core of the API.

Composes validation, the identity of the caller, the catalog and account
stores, and the security collaborators. Every operation either returns a
response record or raises one of the errors in ``myflix.core.exceptions``.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from myflix.core.exceptions import (
    ConflictError,
    CredentialFailure,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)
from myflix.core.security import PasswordHasher, TokenService
from myflix.core.validation import ensure_valid_account_input
from myflix.models.account import Account
from myflix.schemas.account import AccountInput, AccountResponse, MessageResponse
from myflix.schemas.auth import LoginRequest, LoginResponse
from myflix.schemas.movie import DirectorResponse, GenreResponse, MovieResponse
from myflix.stores.accounts import AccountStore
from myflix.stores.catalog import CatalogStore

logger = logging.getLogger(__name__)


class AccessService:
    """Service for catalog reads, account lifecycle and favorites."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        hasher: Optional[PasswordHasher] = None,
        tokens: Optional[TokenService] = None,
    ):
        """Initialize with the myFlix database and security collaborators."""
        self.catalog = CatalogStore(db)
        self.accounts = AccountStore(db)
        self.hasher = hasher or PasswordHasher()
        self.tokens = tokens or TokenService()

    # ==================== Catalog reads ====================

    async def list_movies(self) -> list[MovieResponse]:
        """All movies; an empty catalog is a valid result."""
        return [MovieResponse.from_movie(m) for m in await self.catalog.list_all()]

    async def list_featured_movies(self) -> list[MovieResponse]:
        return [MovieResponse.from_movie(m) for m in await self.catalog.list_featured()]

    async def get_movie(self, movie_id: str) -> MovieResponse:
        movie = await self.catalog.find_by_id(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie {movie_id} not found")
        return MovieResponse.from_movie(movie)

    async def get_movie_by_title(self, title: str) -> MovieResponse:
        movie = await self.catalog.find_by_title(title)
        if movie is None:
            raise NotFoundError(f"Movie {title} not found")
        return MovieResponse.from_movie(movie)

    async def list_movies_by_genre(self, genre_name: str) -> list[MovieResponse]:
        """
        Movies in a genre.

        An empty result is reported as not found, so an unknown genre and a
        genre with no movies look the same to the caller.
        """
        movies = await self.catalog.list_by_genre(genre_name)
        if not movies:
            raise NotFoundError(f"No movies found for genre {genre_name}")
        return [MovieResponse.from_movie(m) for m in movies]

    async def list_movies_by_director(self, director_name: str) -> list[MovieResponse]:
        """Movies by a director; empty result is reported as not found."""
        movies = await self.catalog.list_by_director(director_name)
        if not movies:
            raise NotFoundError(f"No movies found for director {director_name}")
        return [MovieResponse.from_movie(m) for m in movies]

    async def get_genre(self, genre_name: str) -> GenreResponse:
        """Genre details taken from the first movie that embeds it."""
        movie = await self.catalog.find_first_by_genre(genre_name)
        if movie is None:
            raise NotFoundError(f"Genre {genre_name} not found")
        return GenreResponse(**movie.genre.model_dump())

    async def get_director(self, director_name: str) -> DirectorResponse:
        """Director details taken from the first movie that embeds them."""
        movie = await self.catalog.find_first_by_director(director_name)
        if movie is None:
            raise NotFoundError(f"Director {director_name} not found")
        return DirectorResponse(**movie.director.model_dump())

    # ==================== Account reads ====================

    async def list_accounts(self) -> list[AccountResponse]:
        return [AccountResponse.from_account(a) for a in await self.accounts.list_all()]

    async def get_account(self, username: str) -> AccountResponse:
        account = await self.accounts.find_by_username(username)
        if account is None:
            raise NotFoundError(f"{username} was not found")
        return AccountResponse.from_account(account)

    # ==================== Account lifecycle ====================

    async def register(self, request: AccountInput) -> AccountResponse:
        """
        Register a new account.

        Raises:
            BadRequestError: If a required field is missing
            ValidationFailure: If any field rule fails
            ConflictError: If the username is taken
        """
        ensure_valid_account_input(request.model_dump())

        if await self.accounts.find_by_username(request.username) is not None:
            logger.debug("Registration conflict for %s", request.username)
            raise ConflictError(f"{request.username} already exists")

        account = await self.accounts.create(
            username=request.username,
            hashed_password=self.hasher.hash(request.password),
            email=request.email,
            birthday=request.birthday.isoformat() if request.birthday else None,
        )
        logger.info("Registered account %s", account.username)
        return AccountResponse.from_account(account)

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Check a username/password pair and issue a bearer token.

        Raises:
            UnauthorizedError: Same error for an unknown user and a wrong password
        """
        account = await self.accounts.find_by_username(request.username)
        if account is None or not self.hasher.verify(request.password, account.hashed_password):
            logger.info("Failed login for %s", request.username)
            raise UnauthorizedError(CredentialFailure.INVALID_PASSWORD, "Invalid username or password")

        return LoginResponse(
            access_token=self.tokens.issue(account_id=account.id, roles=list(account.roles)),
            token_type="bearer",
            expires_in=self.tokens.expires_in_seconds,
            account=AccountResponse.from_account(account),
        )

    async def update_account(
        self, actor: Account, username: str, request: AccountInput
    ) -> AccountResponse:
        """
        Replace every editable field of an account.

        Only the account itself or an admin may update it.
        """
        self._authorize(actor, username)
        ensure_valid_account_input(request.model_dump())

        target = await self._require_account(username)

        if request.username != target.username:
            other = await self.accounts.find_by_username(request.username)
            if other is not None:
                raise ConflictError(f"{request.username} already exists")

        updated = await self.accounts.replace_fields(
            target.id,
            {
                "username": request.username,
                "hashed_password": self.hasher.hash(request.password),
                "email": request.email,
                "birthday": request.birthday.isoformat() if request.birthday else None,
            },
        )
        if updated is None:
            raise NotFoundError(f"{username} was not found")

        logger.info("Updated account %s", updated.username)
        return AccountResponse.from_account(updated)

    async def delete_account(self, actor: Account, username: str) -> MessageResponse:
        """Delete an account. Irreversible; movies are untouched."""
        self._authorize(actor, username)
        target = await self._require_account(username)

        deleted = await self.accounts.delete_by_id(target.id)
        if deleted is None:
            raise NotFoundError(f"{username} was not found")

        logger.info("Deleted account %s", username)
        return MessageResponse(message=f"{username} was deleted.")

    # ==================== Favorites ====================

    async def add_favorite(self, actor: Account, username: str, movie_id: str) -> AccountResponse:
        """
        Add a movie to an account's favorites (set union).

        Adding a movie that is already a favorite leaves the account unchanged.
        """
        self._authorize(actor, username)

        if not await self.catalog.exists(movie_id):
            raise NotFoundError(f"Movie {movie_id} not found in catalog")

        target = await self._require_account(username)
        updated = await self.accounts.add_favorite(target.id, movie_id)
        if updated is None:
            raise NotFoundError(f"{username} was not found")
        return AccountResponse.from_account(updated)

    async def remove_favorite(self, actor: Account, username: str, movie_id: str) -> AccountResponse:
        """
        Remove a movie from an account's favorites (set difference).

        Removing a movie that is not a favorite succeeds without changes.
        """
        self._authorize(actor, username)

        target = await self._require_account(username)
        updated = await self.accounts.remove_favorite(target.id, movie_id)
        if updated is None:
            raise NotFoundError(f"{username} was not found")
        return AccountResponse.from_account(updated)

    # ==================== Helpers ====================

    @staticmethod
    def _authorize(actor: Account, username: str) -> None:
        """Only the account owner or an admin may act on an account."""
        if actor.username != username and not actor.is_admin:
            logger.info("%s may not modify account %s", actor.username, username)
            raise ForbiddenError()

    async def _require_account(self, username: str) -> Account:
        account = await self.accounts.find_by_username(username)
        if account is None:
            raise NotFoundError(f"{username} was not found")
        return account
