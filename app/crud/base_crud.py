import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from app.core.exception_utils import handle_exceptions
from app.core.exceptions import InternalServerError
from app.models.document_model import DocumentModel

T = TypeVar("T", bound=DocumentModel)


class BaseRepository(ABC, Generic[T]):
    """Abstract base repository providing consistent interface for database operations."""

    def __init__(self, model: Type[T]):
        self.model = model

    @abstractmethod
    async def get(self, db: AsyncDatabase, *, obj_id: str) -> Optional[T]:
        """Get entity by its id."""
        pass

    @abstractmethod
    async def get_all(self, db: AsyncDatabase) -> List[T]:
        """Get every entity in the collection."""
        pass

    @abstractmethod
    async def get_by_ids(self, db: AsyncDatabase, *, obj_ids: Iterable[str]) -> List[T]:
        """Get the entities whose ids are in ``obj_ids``."""
        pass

    @abstractmethod
    async def save(self, db: AsyncDatabase, *, obj_in: T) -> T:
        """Insert the entity, or replace it when it already has an id."""
        pass

    @abstractmethod
    async def replace(self, db: AsyncDatabase, *, obj_in: T) -> Optional[T]:
        """Overwrite an existing entity. Returns None when no entity has its id."""
        pass

    @abstractmethod
    async def delete(self, db: AsyncDatabase, *, obj_id: str) -> bool:
        """Delete an entity by its id."""
        pass

    @abstractmethod
    async def exists(self, db: AsyncDatabase, *, obj_id: str) -> bool:
        """Check if an entity exists by id."""
        pass


class MongoRepository(BaseRepository[T]):
    """Repository over a single MongoDB collection."""

    def __init__(self, model: Type[T], collection_name: str):
        super().__init__(model)
        self.collection_name = collection_name
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _collection(self, db: AsyncDatabase) -> AsyncCollection:
        return db[self.collection_name]

    @staticmethod
    def new_id() -> str:
        return str(ObjectId())

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def get(self, db: AsyncDatabase, *, obj_id: str) -> Optional[T]:
        document = await self._collection(db).find_one({"_id": obj_id})
        if document is None:
            return None
        return self.model.from_document(document)

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def get_all(self, db: AsyncDatabase) -> List[T]:
        documents = await self._collection(db).find({}).to_list()
        return [self.model.from_document(document) for document in documents]

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def get_by_ids(self, db: AsyncDatabase, *, obj_ids: Iterable[str]) -> List[T]:
        ids = list(set(obj_ids))
        if not ids:
            return []
        documents = await self._collection(db).find({"_id": {"$in": ids}}).to_list()
        self._logger.debug(
            f"Retrieved {len(documents)} {self.collection_name} out of {len(ids)} requested"
        )
        return [self.model.from_document(document) for document in documents]

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def save(self, db: AsyncDatabase, *, obj_in: T) -> T:
        if obj_in.id is None:
            obj_in = obj_in.model_copy(update={"id": self.new_id()})
        await self._collection(db).replace_one(
            {"_id": obj_in.id}, obj_in.to_document(), upsert=True
        )
        self._logger.info(f"{self.model.__name__} saved: {obj_in.id}")
        return obj_in

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def replace(self, db: AsyncDatabase, *, obj_in: T) -> Optional[T]:
        result = await self._collection(db).replace_one(
            {"_id": obj_in.id}, obj_in.to_document(), upsert=False
        )
        if result.matched_count == 0:
            self._logger.info(f"{self.model.__name__} {obj_in.id} not found, nothing replaced")
            return None
        self._logger.info(f"{self.model.__name__} replaced: {obj_in.id}")
        return obj_in

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def delete(self, db: AsyncDatabase, *, obj_id: str) -> bool:
        result = await self._collection(db).delete_one({"_id": obj_id})
        self._logger.info(f"{self.model.__name__} deleted: {obj_id}")
        return result.deleted_count > 0

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def exists(self, db: AsyncDatabase, *, obj_id: str) -> bool:
        return await self._collection(db).count_documents({"_id": obj_id}, limit=1) > 0

    @handle_exceptions(
        default_exception=InternalServerError,
        message="An unexpected database error occurred.",
    )
    async def count(self, db: AsyncDatabase) -> int:
        return await self._collection(db).count_documents({})
