from pydantic import Field

from app.models.document_model import DocumentModel


class Author(DocumentModel):
    name: str = Field(min_length=1, max_length=255, description="Author's full name")

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
