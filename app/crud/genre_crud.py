from app.crud.base_crud import MongoRepository
from app.models.genre_model import Genre


class GenreRepository(MongoRepository[Genre]):
    """Repository for the ``genres`` collection."""

    def __init__(self):
        super().__init__(Genre, "genres")


genre_repository = GenreRepository()
