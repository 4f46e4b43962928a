from app.crud.base_crud import MongoRepository
from app.models.author_model import Author


class AuthorRepository(MongoRepository[Author]):
    """Repository for the ``authors`` collection."""

    def __init__(self):
        super().__init__(Author, "authors")


author_repository = AuthorRepository()
