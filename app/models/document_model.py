# app/models/document_model.py
"""
Base class for documents persisted in MongoDB.

The identifier is exposed as ``id`` in Python and stored as ``_id`` in the
collection, so ``to_document`` / ``from_document`` round-trip a model through
the driver without renaming fields by hand.
"""
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DocumentType = TypeVar("DocumentType", bound="DocumentModel")


class DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(
        default=None, alias="_id", description="Store-assigned identifier"
    )

    def to_document(self) -> Dict[str, Any]:
        """Dump to the dict shape written to the collection."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_document(
        cls: Type[DocumentType], document: Dict[str, Any]
    ) -> DocumentType:
        return cls.model_validate(document)
