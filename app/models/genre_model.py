from pydantic import Field

from app.models.document_model import DocumentModel


class Genre(DocumentModel):
    name: str = Field(min_length=1, max_length=255, description="Genre name")

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"
