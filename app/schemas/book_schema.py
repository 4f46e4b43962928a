# app/schemas/book_schema.py
"""
Book schemas for request/response models.

Wire names are camelCase (``authorDto``, ``genreDtos``); the models accept
either the wire name or the Python field name and always serialize by alias.
"""
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.book_model import Book
from app.schemas.author_schema import AuthorDto
from app.schemas.genre_schema import GenreDto


class AuthorRefDto(AuthorDto):
    """Author reference inside a book. Only the id is read; the name is echoed back."""

    name: Optional[str] = Field(
        default=None, max_length=255, description="Author name (ignored on input)"
    )


class GenreRefDto(GenreDto):
    """Genre reference inside a book. Only the id is read; the name is echoed back."""

    name: Optional[str] = Field(
        default=None, max_length=255, description="Genre name (ignored on input)"
    )


class BookDto(BaseModel):
    """Full book representation, used for create, update and detail responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None,
        description="Book id. Ignored on create, required on update.",
        examples=["1"],
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="The title of the book",
        examples=["The Brothers Karamazov"],
    )
    author_dto: AuthorRefDto = Field(
        ..., alias="authorDto", description="The author of the book"
    )
    genre_dtos: List[GenreRefDto] = Field(
        default_factory=list, alias="genreDtos", description="Genres of the book"
    )

    @field_validator("title", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip leading and trailing whitespace."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def validate_references(self) -> "BookDto":
        """Author and genres are resolved by id, so the ids must be present."""
        if not self.author_dto.id:
            raise ValueError("authorDto.id is required")
        if any(not genre.id for genre in self.genre_dtos):
            raise ValueError("every entry of genreDtos must carry an id")
        return self

    @property
    def author_id(self) -> str:
        return self.author_dto.id

    @property
    def genre_ids(self) -> Set[str]:
        return {genre.id for genre in self.genre_dtos}

    @classmethod
    def from_entity(cls, book: Book) -> "BookDto":
        return cls(
            id=book.id,
            title=book.title,
            author_dto=AuthorRefDto.from_entity(book.author),
            genre_dtos=[GenreRefDto.from_entity(genre) for genre in book.genres],
        )


class BookInfoDto(BaseModel):
    """Book summary used by the list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Book id")
    title: str = Field(..., description="The title of the book")
    author_name: str = Field(..., alias="authorName", description="Author's name")
    genre_names: List[str] = Field(
        default_factory=list, alias="genreNames", description="Names of the genres"
    )

    @classmethod
    def from_entity(cls, book: Book) -> "BookInfoDto":
        return cls(
            id=book.id,
            title=book.title,
            author_name=book.author.name,
            genre_names=[genre.name for genre in book.genres],
        )


class MessageResponse(BaseModel):
    """Confirmation returned by delete endpoints."""

    message: str


# Export all schemas
__all__ = [
    "AuthorRefDto",
    "GenreRefDto",
    "BookDto",
    "BookInfoDto",
    "MessageResponse",
]
