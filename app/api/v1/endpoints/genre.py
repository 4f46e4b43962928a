import logging

from typing import List
from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from app.core.config import settings
from app.core.exceptions import BadRequestException
from app.db.session import get_database
from app.schemas.book_schema import MessageResponse
from app.schemas.genre_schema import GenreDto
from app.services.genre_service import genre_service


logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Genres"],
    prefix=f"{settings.API_V1_STR}/genre",
)


@router.get(
    "",
    response_model=List[GenreDto],
    status_code=status.HTTP_200_OK,
    summary="Get all genres",
)
async def get_genres(*, db: AsyncDatabase = Depends(get_database)):
    genres = await genre_service.find_all(db)
    return [GenreDto.from_entity(genre) for genre in genres]


@router.get(
    "/{genre_id}",
    response_model=GenreDto,
    status_code=status.HTTP_200_OK,
    summary="Get genre by id",
)
async def get_genre(*, genre_id: str, db: AsyncDatabase = Depends(get_database)):
    """Get Genre by it's ID"""
    genre = await genre_service.find_by_id(db, genre_id=genre_id)
    return GenreDto.from_entity(genre)


# ======CREATE========
@router.post(
    "",
    response_model=GenreDto,
    status_code=status.HTTP_200_OK,
    summary="Create a genre",
    description="Create a genre. Any id in the body is ignored.",
)
async def create_genre(*, genre_dto: GenreDto, db: AsyncDatabase = Depends(get_database)):
    genre = await genre_service.create(db, name=genre_dto.name)
    return GenreDto.from_entity(genre)


# ======Update========
@router.put(
    "",
    response_model=GenreDto,
    status_code=status.HTTP_200_OK,
    summary="Update a genre",
)
async def update_genre(*, genre_dto: GenreDto, db: AsyncDatabase = Depends(get_database)):
    """Rename an existing genre; unknown ids are a 404."""
    if not genre_dto.id:
        raise BadRequestException("Genre id is required for update", resource_type="Genre")
    genre = await genre_service.update(db, genre_id=genre_dto.id, name=genre_dto.name)
    return GenreDto.from_entity(genre)


@router.delete(
    "/{genre_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete a genre",
)
async def delete_genre(*, genre_id: str, db: AsyncDatabase = Depends(get_database)):
    genre = await genre_service.delete(db, genre_id=genre_id)
    return MessageResponse(message=f"Genre: {genre.name} deleted!")
