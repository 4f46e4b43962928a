from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import handle_exceptions
from app.core.exceptions import InternalServerError
from app.crud.base_crud import MongoRepository
from app.models.comment_model import Comment


class CommentRepository(MongoRepository[Comment]):
    """Repository for the ``comments`` collection."""

    def __init__(self):
        super().__init__(Comment, "comments")

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def get_by_book_id(self, db: AsyncDatabase, *, book_id: str) -> List[Comment]:
        """Get every comment left on a book."""
        documents = await self._collection(db).find({"book_id": book_id}).to_list()
        return [self.model.from_document(document) for document in documents]

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def delete_by_book_id(self, db: AsyncDatabase, *, book_id: str) -> int:
        """Delete every comment left on a book, returning how many were removed."""
        result = await self._collection(db).delete_many({"book_id": book_id})
        self._logger.info(
            f"Comments deleted for book {book_id}: {result.deleted_count}"
        )
        return result.deleted_count


comment_repository = CommentRepository()
