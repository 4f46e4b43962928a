# app/schemas/genre_schema.py
"""
Genre schemas for request/response models.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.genre_model import Genre


class GenreDto(BaseModel):
    """Genre as exchanged over the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None, description="Genre id (ignored on create)", examples=["1"]
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Genre name",
        examples=["Science Fiction"],
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip leading and trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_entity(cls, genre: Genre) -> "GenreDto":
        return cls(id=genre.id, name=genre.name)

    def to_entity(self) -> Genre:
        return Genre(id=self.id, name=self.name)
