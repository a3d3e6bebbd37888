"""
Request and response schemas for API endpoints.
"""
from myflix.schemas.auth import LoginRequest, LoginResponse, TokenPayload
from myflix.schemas.account import AccountInput, AccountResponse, MessageResponse
from myflix.schemas.movie import DirectorResponse, GenreResponse, MovieResponse

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenPayload",
    # Account
    "AccountInput",
    "AccountResponse",
    "MessageResponse",
    # Movie
    "DirectorResponse",
    "GenreResponse",
    "MovieResponse",
]
