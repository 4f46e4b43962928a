import logging
from typing import List

from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import raise_for_status
from app.core.exceptions import ResourceNotFound
from app.crud.author_crud import author_repository
from app.models.author_model import Author

logger = logging.getLogger(__name__)


class AuthorService:
    """Authors are edited on their own; books pick up a new name on their next save."""

    def __init__(self):
        self.author_repository = author_repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def find_all(self, db: AsyncDatabase) -> List[Author]:
        return await self.author_repository.get_all(db=db)

    async def find_by_id(self, db: AsyncDatabase, *, author_id: str) -> Author:
        author = await self.author_repository.get(db=db, obj_id=author_id)
        raise_for_status(
            condition=author is None,
            exception=ResourceNotFound,
            resource_type="Author",
            detail=f"authorId: {author_id} Not found",
        )
        return author

    async def create(self, db: AsyncDatabase, *, name: str) -> Author:
        author = await self.author_repository.save(db=db, obj_in=Author(name=name))
        self._logger.info(f"New author created: {author.name}")
        return author

    async def update(self, db: AsyncDatabase, *, author_id: str, name: str) -> Author:
        """Rename an existing author. Never creates one."""
        author = await self.author_repository.replace(
            db=db, obj_in=Author(id=author_id, name=name)
        )
        raise_for_status(
            condition=author is None,
            exception=ResourceNotFound,
            resource_type="Author",
            detail=f"authorId: {author_id} Not found",
        )
        return author

    async def delete(self, db: AsyncDatabase, *, author_id: str) -> Author:
        """Delete an author and return what was deleted."""
        author = await self.find_by_id(db, author_id=author_id)
        await self.author_repository.delete(db=db, obj_id=author_id)
        self._logger.info(f"Deleted author: {author!r}")
        return author


author_service = AuthorService()
