# app/schemas/author_schema.py
"""
Author schemas for request/response models.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.author_model import Author


class AuthorDto(BaseModel):
    """Author as exchanged over the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None, description="Author id (ignored on create)", examples=["1"]
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["Fyodor Dostoevsky"],
    )

    @field_validator("name", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip leading and trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorDto":
        return cls(id=author.id, name=author.name)

    def to_entity(self) -> Author:
        return Author(id=self.id, name=self.name)
