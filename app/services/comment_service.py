import logging
from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import raise_for_status
from app.core.exceptions import ResourceNotFound
from app.crud.book_crud import book_repository
from app.crud.comment_crud import comment_repository
from app.models.comment_model import Comment

logger = logging.getLogger(__name__)


class CommentService:
    """
    Comments on books.

    A comment may only be attached to a book that exists. Removing comments
    together with their book is handled by the book service.
    """

    def __init__(self):
        self.comment_repository = comment_repository
        self.book_repository = book_repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def _ensure_book_exists(self, db: AsyncDatabase, *, book_id: str) -> None:
        exists = await self.book_repository.exists(db=db, obj_id=book_id)
        raise_for_status(
            condition=not exists,
            exception=ResourceNotFound,
            resource_type="Book",
            detail=f"bookId: {book_id} Not found",
        )

    async def find_by_book_id(self, db: AsyncDatabase, *, book_id: str) -> List[Comment]:
        await self._ensure_book_exists(db, book_id=book_id)
        return await self.comment_repository.get_by_book_id(db=db, book_id=book_id)

    async def find_by_id(self, db: AsyncDatabase, *, comment_id: str) -> Comment:
        comment = await self.comment_repository.get(db=db, obj_id=comment_id)
        raise_for_status(
            condition=comment is None,
            exception=ResourceNotFound,
            resource_type="Comment",
            detail=f"commentId: {comment_id} Not found",
        )
        return comment

    async def create(self, db: AsyncDatabase, *, text: str, book_id: str) -> Comment:
        await self._ensure_book_exists(db, book_id=book_id)
        comment = await self.comment_repository.save(
            db=db, obj_in=Comment(text=text, book_id=book_id)
        )
        self._logger.info(
            "Comment added", extra={"comment_id": comment.id, "book_id": book_id}
        )
        return comment

    async def update(self, db: AsyncDatabase, *, comment_id: str, text: str) -> Comment:
        """Change the text of a comment. The book it belongs to never changes."""
        comment = await self.find_by_id(db, comment_id=comment_id)
        return await self.comment_repository.save(
            db=db, obj_in=comment.model_copy(update={"text": text})
        )

    async def delete(self, db: AsyncDatabase, *, comment_id: str) -> Comment:
        comment = await self.find_by_id(db, comment_id=comment_id)
        await self.comment_repository.delete(db=db, obj_id=comment_id)
        self._logger.info(f"Deleted comment: {comment!r}")
        return comment


comment_service = CommentService()
