import logging
from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import raise_for_status
from app.core.exceptions import ResourceNotFound
from app.crud.genre_crud import genre_repository
from app.models.genre_model import Genre

logger = logging.getLogger(__name__)


class GenreService:
    """Genre CRUD with not-found handling."""

    def __init__(self):
        self.genre_repository = genre_repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def find_all(self, db: AsyncDatabase) -> List[Genre]:
        return await self.genre_repository.get_all(db=db)

    async def find_by_id(self, db: AsyncDatabase, *, genre_id: str) -> Genre:
        """Fetch genre by its ID"""
        genre = await self.genre_repository.get(db=db, obj_id=genre_id)
        raise_for_status(
            condition=genre is None,
            exception=ResourceNotFound,
            resource_type="Genre",
            detail=f"genreId: {genre_id} Not found",
        )
        return genre

    async def create(self, db: AsyncDatabase, *, name: str) -> Genre:
        genre = await self.genre_repository.save(db=db, obj_in=Genre(name=name))
        self._logger.info(f"New genre created: {genre.name}")
        return genre

    async def update(self, db: AsyncDatabase, *, genre_id: str, name: str) -> Genre:
        """Rename an existing genre. Never creates one."""
        genre = await self.genre_repository.replace(
            db=db, obj_in=Genre(id=genre_id, name=name)
        )
        raise_for_status(
            condition=genre is None,
            exception=ResourceNotFound,
            resource_type="Genre",
            detail=f"genreId: {genre_id} Not found",
        )
        return genre

    async def delete(self, db: AsyncDatabase, *, genre_id: str) -> Genre:
        """Delete a genre and return what was deleted."""
        genre = await self.find_by_id(db, genre_id=genre_id)
        await self.genre_repository.delete(db=db, obj_id=genre_id)
        self._logger.info(f"Deleted genre: {genre!r}")
        return genre


genre_service = GenreService()
