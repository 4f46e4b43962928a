from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.core.config import settings
from app.core.exception_handler import register_exception_handlers
from app.core.logging_config import setup_logging
from app.core.middleware import register_middlewares
from app.db.init_data import seed_database
from app.db.session import db

# Routers
from app.api.v1.endpoints import author, book, comment, genre
from app.api.v1.blocking import book as blocking_book
from app.api.v1.blocking import genre as blocking_genre


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown events.
    """
    await db.connect()
    if settings.MONGODB_SEED:
        await seed_database(db.database)

    yield

    await db.disconnect()


def create_application(api_mode: Optional[str] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    ``api_mode`` picks the binding for the book and genre routes:
    ``"reactive"`` serves them from ``async def`` endpoints on the event loop,
    ``"blocking"`` from plain ``def`` endpoints on the worker thread pool.
    """
    setup_logging()
    api_mode = api_mode or settings.API_MODE

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        lifespan=lifespan,
    )

    register_middlewares(app)
    register_exception_handlers(app)

    if api_mode == "blocking":
        app.include_router(blocking_book.router)
        app.include_router(blocking_genre.router)
    else:
        app.include_router(book.router)
        app.include_router(genre.router)
    app.include_router(author.router)
    app.include_router(comment.router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "api_mode": api_mode}

    return app


app = create_application()
