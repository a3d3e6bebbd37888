"""
Movie response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field

from myflix.models.movie import Movie


class GenreResponse(BaseModel):
    """Genre details."""
    name: str
    description: str


class DirectorResponse(BaseModel):
    """Director details."""
    name: str
    bio: str
    birth_year: Optional[int] = None
    death_year: Optional[int] = None


class MovieResponse(BaseModel):
    """Movie details."""
    id: str = Field(..., description="Movie ID")
    title: str
    description: str
    genre: GenreResponse
    director: DirectorResponse
    image_path: Optional[str] = None
    featured: bool = False

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            genre=GenreResponse(**movie.genre.model_dump()),
            director=DirectorResponse(**movie.director.model_dump()),
            image_path=movie.image_path,
            featured=movie.featured,
        )
