from app.crud.base_crud import MongoRepository
from app.models.book_model import Book


class BookRepository(MongoRepository[Book]):
    """Repository for the ``books`` collection. Books are stored with their
    author and genres embedded."""

    def __init__(self):
        super().__init__(Book, "books")


book_repository = BookRepository()
