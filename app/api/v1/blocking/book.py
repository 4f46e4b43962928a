import logging

from typing import List
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.api.v1.blocking.bridge import run_blocking
from app.api.v1.endpoints.book import deletion_response, require_book_id
from app.core.config import settings
from app.core.exceptions import ResourceNotFound
from app.db.session import get_database
from app.schemas.book_schema import BookDto, BookInfoDto, MessageResponse
from app.schemas.comment_schema import CommentDto
from app.services.book_service import book_service
from app.services.comment_service import comment_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Books (blocking)"],
    prefix=f"{settings.API_V1_STR}/book",
)


@router.get("", response_model=List[BookInfoDto], status_code=status.HTTP_200_OK)
def get_books(*, db: AsyncDatabase = Depends(get_database)):
    books = run_blocking(book_service.find_all, db)
    return [BookInfoDto.from_entity(book) for book in books]


@router.get("/{book_id}", response_model=BookDto, status_code=status.HTTP_200_OK)
def get_book(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    book = run_blocking(book_service.find_by_id, db, book_id=book_id)
    if book is None:
        raise ResourceNotFound(f"bookId: {book_id} Not found", resource_type="Book")
    return BookDto.from_entity(book)


@router.post("", response_model=BookDto, status_code=status.HTTP_200_OK)
def create_book(*, db: AsyncDatabase = Depends(get_database), book_dto: BookDto):
    book = run_blocking(
        book_service.insert,
        db,
        title=book_dto.title,
        author_id=book_dto.author_id,
        genre_ids=book_dto.genre_ids,
    )
    return BookDto.from_entity(book)


@router.put("", response_model=BookDto, status_code=status.HTTP_200_OK)
def update_book(*, db: AsyncDatabase = Depends(get_database), book_dto: BookDto):
    book_id = require_book_id(book_dto)
    book = run_blocking(
        book_service.update,
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
    "/{book_id}", response_model=MessageResponse, status_code=status.HTTP_200_OK
)
def delete_book(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    result = run_blocking(book_service.delete_by_id, db, book_id=book_id)
    return deletion_response(result)


@router.get(
    "/{book_id}/comment",
    response_model=List[CommentDto],
    status_code=status.HTTP_200_OK,
)
def get_book_comments(*, db: AsyncDatabase = Depends(get_database), book_id: str):
    comments = run_blocking(comment_service.find_by_book_id, db, book_id=book_id)
    return [CommentDto.from_entity(comment) for comment in comments]
