"""
Movies router: read-only catalog queries.
"""
from fastapi import APIRouter, Depends

from myflix.dependencies.auth import CurrentAccount
from myflix.dependencies.services import get_access_service
from myflix.schemas.movie import DirectorResponse, GenreResponse, MovieResponse
from myflix.services.access_service import AccessService

router = APIRouter(tags=["Movies"])


@router.get(
    "/movies",
    response_model=list[MovieResponse],
    summary="List movies",
)
async def list_movies(
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """Return every movie in the catalog."""
    return await access_service.list_movies()


@router.get(
    "/movies/featured",
    response_model=list[MovieResponse],
    summary="List featured movies",
)
async def list_featured_movies(
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.list_featured_movies()


@router.get(
    "/movies/id/{movie_id}",
    response_model=MovieResponse,
    summary="Get movie by id",
)
async def get_movie(
    movie_id: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.get_movie(movie_id)


@router.get(
    "/movies/genre/{genre_name}",
    response_model=list[MovieResponse],
    summary="List movies by genre",
)
async def list_movies_by_genre(
    genre_name: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Return all movies of a genre.

    Responds 404 when no movie has this genre.
    """
    return await access_service.list_movies_by_genre(genre_name)


@router.get(
    "/movies/directors/{director_name}",
    response_model=list[MovieResponse],
    summary="List movies by director",
)
async def list_movies_by_director(
    director_name: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Return all movies by a director.

    Responds 404 when no movie has this director.
    """
    return await access_service.list_movies_by_director(director_name)


@router.get(
    "/movies/{title}",
    response_model=MovieResponse,
    summary="Get movie by title",
)
async def get_movie_by_title(
    title: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    """
    Return the movie with this exact title.

    `/movies/featured` is matched first, so a movie titled "featured" can
    only be fetched through `/movies/id/{movie_id}`.
    """
    return await access_service.get_movie_by_title(title)


@router.get(
    "/genres/{genre_name}",
    response_model=GenreResponse,
    summary="Get genre description",
)
async def get_genre(
    genre_name: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.get_genre(genre_name)


@router.get(
    "/directors/{director_name}",
    response_model=DirectorResponse,
    summary="Get director biography",
)
async def get_director(
    director_name: str,
    current_account: CurrentAccount,
    access_service: AccessService = Depends(get_access_service),
):
    return await access_service.get_director(director_name)
