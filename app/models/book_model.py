# app/models/book_model.py
"""
Book aggregate.

A book document embeds a copy of its author and genres as they were when the
book was last saved. The copies are rebuilt from the canonical records on every
insert and update by ``Book.assemble``; they are never shared with the Author or
Genre objects they were built from.
"""
from typing import Iterable, List, Optional

from pydantic import Field

from app.models.author_model import Author
from app.models.document_model import DocumentModel
from app.models.genre_model import Genre


class Book(DocumentModel):
    title: str = Field(
        min_length=1, max_length=255, description="The title of the book"
    )
    author: Author = Field(description="Snapshot of the book's author")
    genres: List[Genre] = Field(
        default_factory=list, description="Snapshots of the book's genres"
    )

    @classmethod
    def assemble(
        cls,
        *,
        book_id: Optional[str],
        title: str,
        author: Author,
        genres: Iterable[Genre],
    ) -> "Book":
        """Build a book from resolved canonical records, copying each of them."""
        return cls(
            id=book_id,
            title=title,
            author=author.model_copy(deep=True),
            genres=[genre.model_copy(deep=True) for genre in genres],
        )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}', author='{self.author.name}')>"
