"""
Initial catalog loaded on startup when ``MONGODB_SEED`` is enabled.

Seeding is skipped as soon as any book exists, so restarting the service never
duplicates the data.
"""
import logging

from pymongo.asynchronous.database import AsyncDatabase

from app.crud.author_crud import author_repository
from app.crud.book_crud import book_repository
from app.crud.comment_crud import comment_repository
from app.crud.genre_crud import genre_repository
from app.models.author_model import Author
from app.models.book_model import Book
from app.models.comment_model import Comment
from app.models.genre_model import Genre

logger = logging.getLogger(__name__)

AUTHORS = [Author(id=str(i), name=f"Author_{i}") for i in range(1, 4)]
GENRES = [Genre(id=str(i), name=f"Genre_{i}") for i in range(1, 7)]


def build_books() -> list[Book]:
    # book i gets author i and genres 2i-1 and 2i
    return [
        Book.assemble(
            book_id=str(i),
            title=f"BookTitle_{i}",
            author=AUTHORS[i - 1],
            genres=GENRES[2 * i - 2 : 2 * i],
        )
        for i in range(1, 4)
    ]


def build_comments() -> list[Comment]:
    return [
        Comment(id=f"{book}{n}", text=f"Comment_{n} on BookTitle_{book}", book_id=str(book))
        for book in range(1, 4)
        for n in range(1, 3)
    ]


async def seed_database(db: AsyncDatabase) -> bool:
    """Insert the initial catalog into an empty database. Returns True if seeded."""
    if await book_repository.count(db=db) > 0:
        logger.info("Catalog already populated, skipping seed")
        return False

    for author in AUTHORS:
        await author_repository.save(db=db, obj_in=author)
    for genre in GENRES:
        await genre_repository.save(db=db, obj_in=genre)
    for book in build_books():
        await book_repository.save(db=db, obj_in=book)
    for comment in build_comments():
        await comment_repository.save(db=db, obj_in=comment)

    logger.info(
        "Catalog seeded",
        extra={"authors": len(AUTHORS), "genres": len(GENRES), "books": 3},
    )
    return True
