import logging

from typing import List
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.core.config import settings
from app.core.exceptions import BadRequestException
from app.db.session import get_database
from app.schemas.book_schema import MessageResponse
from app.schemas.author_schema import AuthorDto
from app.services.author_service import author_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Authors"],
    prefix=f"{settings.API_V1_STR}/author",
)


@router.get(
    "",
    response_model=List[AuthorDto],
    status_code=status.HTTP_200_OK,
    summary="Get all authors",
)
async def get_authors(*, db: AsyncDatabase = Depends(get_database)):
    authors = await author_service.find_all(db)
    return [AuthorDto.from_entity(author) for author in authors]


@router.get(
    "/{author_id}",
    response_model=AuthorDto,
    status_code=status.HTTP_200_OK,
    summary="Get author by id",
)
async def get_author(*, author_id: str, db: AsyncDatabase = Depends(get_database)):
    author = await author_service.find_by_id(db, author_id=author_id)
    return AuthorDto.from_entity(author)


# ======CREATE========
@router.post(
    "",
    response_model=AuthorDto,
    status_code=status.HTTP_200_OK,
    summary="Create an author",
    description="Create an author. Any id in the body is ignored.",
)
async def create_author(*, author_dto: AuthorDto, db: AsyncDatabase = Depends(get_database)):
    author = await author_service.create(db, name=author_dto.name)
    return AuthorDto.from_entity(author)


# ======Update========
@router.put(
    "",
    response_model=AuthorDto,
    status_code=status.HTTP_200_OK,
    summary="Update an author",
)
async def update_author(*, author_dto: AuthorDto, db: AsyncDatabase = Depends(get_database)):
    """Rename an author."""
    if not author_dto.id:
        raise BadRequestException("Author id is required for update", resource_type="Author")
    author = await author_service.update(db, author_id=author_dto.id, name=author_dto.name)
    return AuthorDto.from_entity(author)


@router.delete(
    "/{author_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete an author",
)
async def delete_author(*, author_id: str, db: AsyncDatabase = Depends(get_database)):
    author = await author_service.delete(db, author_id=author_id)
    return MessageResponse(message=f"Author: {author.name} deleted!")
