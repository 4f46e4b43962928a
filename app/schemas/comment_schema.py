from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.comment_model import Comment


class CommentDto(BaseModel):
    """Comment as exchanged over the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Comment id")
    text: str = Field(
        ...,
        min_length=1,
        max_length=2000,
        description="Comment text",
        examples=["A gripping read."],
    )
    book_id: str = Field(
        ..., alias="bookId", min_length=1, description="Id of the commented book"
    )

    @field_validator("text", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentDto":
        return cls(id=comment.id, text=comment.text, book_id=comment.book_id)
