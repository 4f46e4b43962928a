from pydantic import Field

from app.models.document_model import DocumentModel


class Comment(DocumentModel):
    text: str = Field(min_length=1, max_length=2000, description="Comment text")
    book_id: str = Field(description="Id of the book this comment belongs to")

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, book_id={self.book_id})>"
