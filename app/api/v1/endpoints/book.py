import logging

from typing import List
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.core.config import settings
from app.core.exceptions import BadRequestException, InternalServerError, ResourceNotFound
from app.db.session import get_database
from app.schemas.book_schema import BookDto, BookInfoDto, MessageResponse
from app.schemas.comment_schema import CommentDto
from app.services.book_service import BookDeletionResult, DeletionStatus, book_service
from app.services.comment_service import comment_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Books"],
    prefix=f"{settings.API_V1_STR}/book",
)


def deletion_response(result: BookDeletionResult) -> MessageResponse:
    """Map a cascade delete outcome onto the HTTP contract."""
    if result.status is DeletionStatus.NOT_FOUND:
        raise ResourceNotFound(
            f"bookId: {result.book_id} Not found", resource_type="Book"
        )
    if result.status is DeletionStatus.PARTIALLY_DELETED:
        raise InternalServerError(
            f"Book: {result.title} deleted, but its comments could not be removed"
        )
    return MessageResponse(message=f"Book: {result.title} deleted!")


def require_book_id(book_dto: BookDto) -> str:
    if not book_dto.id:
        raise BadRequestException("Book id is required for update", resource_type="Book")
    return book_dto.id


@router.get(
    "",
    response_model=List[BookInfoDto],
    status_code=status.HTTP_200_OK,
    summary="Get all books",
    description="Retrieve a summary of every book in the catalog",
)
async def get_books(*, db: AsyncDatabase = Depends(get_database)):
    books = await book_service.find_all(db)
    return [BookInfoDto.from_entity(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookDto,
    status_code=status.HTTP_200_OK,
    summary="Get book by id",
    description="Get a book with its author and genres.",
)
async def get_book(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    """Get book by its ID"""
    book = await book_service.find_by_id(db, book_id=book_id)
    if book is None:
        raise ResourceNotFound(f"bookId: {book_id} Not found", resource_type="Book")
    return BookDto.from_entity(book)


@router.post(
    "",
    response_model=BookDto,
    status_code=status.HTTP_200_OK,
    summary="Create a new book",
    description="Create a new book entry",
)
async def create_book(*, db: AsyncDatabase = Depends(get_database), book_dto: BookDto):
    """
    Create a new book.
    - **title**: The title of the book (required)
    - **authorDto**: The author, resolved by its id (required)
    - **genreDtos**: Genres, resolved by their ids (may be empty)

    Any id sent for the book itself is ignored.
    """
    book = await book_service.insert(
        db,
        title=book_dto.title,
        author_id=book_dto.author_id,
        genre_ids=book_dto.genre_ids,
    )
    return BookDto.from_entity(book)


@router.put(
    "",
    response_model=BookDto,
    status_code=status.HTTP_200_OK,
    summary="Update a book",
    description="Replace a book's title, author and genres",
)
async def update_book(*, db: AsyncDatabase = Depends(get_database), book_dto: BookDto):
    book_id = require_book_id(book_dto)
    book = await book_service.update(
        db,
        book_id=book_id,
        title=book_dto.title,
        author_id=book_dto.author_id,
        genre_ids=book_dto.genre_ids,
    )
    if book is None:
        raise ResourceNotFound(f"bookId: {book_id} Not found", resource_type="Book")
    return BookDto.from_entity(book)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a book",
    description="Delete a book by it's Id",
)
async def delete_book(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    """
    Delete a book.

    This will also delete all comments left on it.
    """
    result = await book_service.delete_by_id(db, book_id=book_id)
    return deletion_response(result)


@router.get(
    "/{book_id}/comment",
    response_model=List[CommentDto],
    status_code=status.HTTP_200_OK,
    summary="Get comments of a book",
)
async def get_book_comments(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    comments = await comment_service.find_by_book_id(db, book_id=book_id)
    return [CommentDto.from_entity(comment) for comment in comments]
