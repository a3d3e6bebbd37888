"""
Movie models for the catalog collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Genre(BaseModel):
    """Genre embedded in a movie document."""
    name: str = Field(..., description="Genre name")
    description: str = Field("", description="Genre description")


class Director(BaseModel):
    """Director embedded in a movie document."""
    name: str = Field(..., description="Director name")
    bio: str = Field("", description="Biography")
    birth_year: Optional[int] = Field(None, description="Year of birth")
    death_year: Optional[int] = Field(None, description="Year of death, if any")


class Movie(BaseModel):
    """
    Movie document model for the MongoDB movies collection.

    Read-only through the API; documents are loaded by the seed command.
    """
    id: Optional[str] = Field(None, alias="_id", description="Movie id as string")
    title: str = Field(..., description="Movie title")
    description: str = Field("", description="Plot summary")
    genre: Genre
    director: Director
    image_path: Optional[str] = Field(None, description="Poster image reference")
    featured: bool = Field(False, description="Shown on the featured list")

    class Config:
        populate_by_name = True

    @classmethod
    def from_document(cls, doc: dict) -> "Movie":
        """Build a Movie from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls(**doc)
