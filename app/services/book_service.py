import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import raise_for_status
from app.core.exceptions import ResourceNotFound
from app.crud.author_crud import author_repository
from app.crud.book_crud import book_repository
from app.crud.comment_crud import comment_repository
from app.crud.genre_crud import genre_repository
from app.models.author_model import Author
from app.models.book_model import Book
from app.models.genre_model import Genre

logger = logging.getLogger(__name__)


class DeletionStatus(str, Enum):
    NOT_FOUND = "not_found"
    DELETED = "deleted"
    # the book is gone but its comments could not be removed
    PARTIALLY_DELETED = "partially_deleted"


@dataclass(frozen=True)
class BookDeletionResult:
    status: DeletionStatus
    book_id: str
    title: Optional[str] = None
    comments_deleted: int = 0
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is not DeletionStatus.NOT_FOUND


class BookService:
    """
    Book aggregate service.

    Resolves author and genre ids into their canonical records, embeds copies
    of them into the book and persists it. Deleting a book also deletes its
    comments. None of these multi-step flows is atomic: a failure between
    steps leaves the earlier steps applied.
    """

    def __init__(self):
        """
        Initializes the BookService.
        Repositories are plain attributes so tests can swap in fakes.
        """
        self.book_repository = book_repository
        self.author_repository = author_repository
        self.genre_repository = genre_repository
        self.comment_repository = comment_repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # ======= READ OPERATIONS =======
    async def find_by_id(self, db: AsyncDatabase, *, book_id: str) -> Optional[Book]:
        """Get a book by its ID. Author and genres are already embedded."""
        return await self.book_repository.get(db=db, obj_id=book_id)

    async def find_all(self, db: AsyncDatabase) -> List[Book]:
        books = await self.book_repository.get_all(db=db)
        self._logger.info(f"Book list retrieved : {len(books)} books returned")
        return books

    # ======= WRITE OPERATIONS =======
    async def insert(
        self,
        db: AsyncDatabase,
        *,
        title: str,
        author_id: str,
        genre_ids: Iterable[str],
    ) -> Book:
        """Create a book from an author id and a set of genre ids."""
        author, genres = await self._resolve_references(
            db, author_id=author_id, genre_ids=genre_ids
        )
        book = Book.assemble(book_id=None, title=title, author=author, genres=genres)
        new_book = await self.book_repository.save(db=db, obj_in=book)

        self._logger.info(
            f"New book created: {new_book.title}",
            extra={"book_id": new_book.id, "author_id": author.id},
        )
        return new_book

    async def update(
        self,
        db: AsyncDatabase,
        *,
        book_id: str,
        title: str,
        author_id: str,
        genre_ids: Iterable[str],
    ) -> Optional[Book]:
        """
        Rebuild an existing book from fresh author and genre records.

        Returns None when ``book_id`` does not exist. The write never upserts,
        so a book deleted concurrently stays deleted.
        """
        author, genres = await self._resolve_references(
            db, author_id=author_id, genre_ids=genre_ids
        )
        book = Book.assemble(
            book_id=book_id, title=title, author=author, genres=genres
        )
        updated_book = await self.book_repository.replace(db=db, obj_in=book)
        if updated_book is None:
            self._logger.info(f"Book {book_id} not found, nothing updated")
            return None

        self._logger.info(
            f"Book {book_id} updated",
            extra={"book_id": book_id, "genre_count": len(updated_book.genres)},
        )
        return updated_book

    async def delete_by_id(
        self, db: AsyncDatabase, *, book_id: str
    ) -> BookDeletionResult:
        """Delete a book, then every comment that references it."""
        book = await self.book_repository.get(db=db, obj_id=book_id)
        if book is None:
            return BookDeletionResult(status=DeletionStatus.NOT_FOUND, book_id=book_id)

        await self.book_repository.delete(db=db, obj_id=book_id)

        try:
            deleted = await self.comment_repository.delete_by_book_id(
                db=db, book_id=book_id
            )
        except Exception as e:
            self._logger.error(
                f"Book {book_id} deleted but its comments were not",
                exc_info=True,
                extra={"book_id": book_id},
            )
            return BookDeletionResult(
                status=DeletionStatus.PARTIALLY_DELETED,
                book_id=book_id,
                title=book.title,
                error=e,
            )

        self._logger.warning(
            f"Book {book_id} permanently deleted",
            extra={
                "deleted_book_id": book_id,
                "deleted_book_title": book.title,
                "deleted_comments": deleted,
            },
        )
        return BookDeletionResult(
            status=DeletionStatus.DELETED,
            book_id=book_id,
            title=book.title,
            comments_deleted=deleted,
        )

    # Helper Functions
    async def _resolve_references(
        self, db: AsyncDatabase, *, author_id: str, genre_ids: Iterable[str]
    ) -> Tuple[Author, List[Genre]]:
        """Load the canonical author and genres, failing on any unknown id."""
        author = await self.author_repository.get(db=db, obj_id=author_id)
        raise_for_status(
            condition=author is None,
            exception=ResourceNotFound,
            resource_type="Author",
            detail=f"Author with id {author_id} not found.",
        )

        wanted = set(genre_ids)
        genres = await self.genre_repository.get_by_ids(db=db, obj_ids=wanted)
        missing = wanted - {genre.id for genre in genres}
        raise_for_status(
            condition=bool(missing),
            exception=ResourceNotFound,
            resource_type="Genre",
            detail=f"Genres with ids {sorted(missing)} not found.",
        )

        return author, genres


book_service = BookService()
