# app/db/session.py
"""
MongoDB connection management.

A single ``AsyncMongoClient`` is opened at application startup and closed on
shutdown. Endpoints receive the database handle through ``get_database``.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from app.core.config import settings

logger = logging.getLogger(__name__)


class MongoDatabase:
    """Owns the client and hands out the configured database."""

    def __init__(self, url: str, database_name: str, timeout_ms: int):
        self._url = url
        self._database_name = database_name
        self._timeout_ms = timeout_ms
        self.client: Optional[AsyncMongoClient] = None

    async def connect(self) -> None:
        if self.client is not None:
            return
        self.client = AsyncMongoClient(
            self._url, serverSelectionTimeoutMS=self._timeout_ms
        )
        # fail fast on startup instead of on the first request
        await self.client.admin.command("ping")
        logger.info(
            "Connected to MongoDB", extra={"database": self._database_name}
        )

    async def disconnect(self) -> None:
        if self.client is None:
            return
        await self.client.close()
        self.client = None
        logger.info("Disconnected from MongoDB")

    @property
    def database(self) -> AsyncDatabase:
        if self.client is None:
            raise RuntimeError("Database client is not connected")
        return self.client[self._database_name]


db = MongoDatabase(
    url=settings.MONGODB_URL,
    database_name=settings.MONGODB_DATABASE,
    timeout_ms=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
)


def get_database() -> AsyncDatabase:
    """FastAPI dependency returning the live database handle."""
    return db.database
