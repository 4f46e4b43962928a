import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from app.core.exceptions import InternalServerError
from app.crud.author_crud import AuthorRepository
from app.crud.book_crud import BookRepository
from app.crud.comment_crud import CommentRepository
from app.crud.genre_crud import GenreRepository
from app.models.author_model import Author
from app.models.book_model import Book
from app.models.genre_model import Genre
from app.services.book_service import BookService

# Mark all tests in this file as async
pytestmark = pytest.mark.asyncio


def make_collection(documents=None) -> MagicMock:
    """A stand-in for an AsyncCollection returning ``documents`` from find()."""
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=list(documents or []))
    collection.find.return_value = cursor
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=0))
    collection.count_documents = AsyncMock(return_value=0)
    return collection


BOOK_DOCUMENT = {
    "_id": "1",
    "title": "BookTitle_1",
    "author": {"_id": "1", "name": "Author_1"},
    "genres": [{"_id": "1", "name": "Genre_1"}, {"_id": "2", "name": "Genre_2"}],
}


# ==================== GET TESTS ====================


async def test_get_maps_document_to_model():
    collection = make_collection()
    collection.find_one.return_value = BOOK_DOCUMENT

    book = await BookRepository().get({"books": collection}, obj_id="1")

    collection.find_one.assert_awaited_once_with({"_id": "1"})
    assert book.id == "1"
    assert book.author == Author(id="1", name="Author_1")
    assert [g.id for g in book.genres] == ["1", "2"]


async def test_get_missing_returns_none():
    collection = make_collection()

    assert await BookRepository().get({"books": collection}, obj_id="x") is None


async def test_get_by_ids_queries_with_in():
    collection = make_collection([{"_id": "1", "name": "Genre_1"}])

    genres = await GenreRepository().get_by_ids(
        {"genres": collection}, obj_ids=["1", "1"]
    )

    query = collection.find.call_args.args[0]
    assert query == {"_id": {"$in": ["1"]}}
    assert genres == [Genre(id="1", name="Genre_1")]


async def test_get_by_ids_empty_skips_query():
    collection = make_collection()

    assert await GenreRepository().get_by_ids({"genres": collection}, obj_ids=[]) == []
    collection.find.assert_not_called()


# ==================== SAVE TESTS ====================


async def test_save_assigns_id_on_insert():
    collection = make_collection()
    book = Book(
        title="New",
        author=Author(id="1", name="Author_1"),
        genres=[],
    )

    saved = await BookRepository().save({"books": collection}, obj_in=book)

    assert saved.id
    assert book.id is None
    filter_, document = collection.replace_one.call_args.args
    assert filter_ == {"_id": saved.id}
    assert document["_id"] == saved.id
    assert document["author"] == {"_id": "1", "name": "Author_1"}
    assert collection.replace_one.call_args.kwargs == {"upsert": True}


async def test_save_keeps_existing_id():
    collection = make_collection()

    saved = await GenreRepository().save(
        {"genres": collection}, obj_in=Genre(id="7", name="Drama")
    )

    assert saved.id == "7"
    collection.replace_one.assert_awaited_once_with(
        {"_id": "7"}, {"_id": "7", "name": "Drama"}, upsert=True
    )


# ==================== DELETE / EXISTS TESTS ====================


async def test_delete_by_book_id_returns_count():
    collection = make_collection()
    collection.delete_many.return_value = MagicMock(deleted_count=3)

    deleted = await CommentRepository().delete_by_book_id(
        {"comments": collection}, book_id="1"
    )

    collection.delete_many.assert_awaited_once_with({"book_id": "1"})
    assert deleted == 3


async def test_exists_counts_with_limit():
    collection = make_collection()
    collection.count_documents.return_value = 1

    assert await BookRepository().exists({"books": collection}, obj_id="1") is True
    collection.count_documents.assert_awaited_once_with({"_id": "1"}, limit=1)


# ==================== ERROR HANDLING TESTS ====================


async def test_driver_error_becomes_internal_server_error():
    collection = make_collection()
    collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(InternalServerError):
        await BookRepository().get({"books": collection}, obj_id="1")


# ==================== REPLACE TESTS ====================


async def test_replace_never_upserts():
    collection = make_collection()
    collection.replace_one.return_value = MagicMock(matched_count=1)

    replaced = await GenreRepository().replace(
        {"genres": collection}, obj_in=Genre(id="7", name="Drama")
    )

    assert replaced == Genre(id="7", name="Drama")
    collection.replace_one.assert_awaited_once_with(
        {"_id": "7"}, {"_id": "7", "name": "Drama"}, upsert=False
    )


async def test_replace_missing_returns_none():
    collection = make_collection()
    collection.replace_one.return_value = MagicMock(matched_count=0)

    replaced = await GenreRepository().replace(
        {"genres": collection}, obj_in=Genre(id="7", name="Drama")
    )

    assert replaced is None


async def test_book_update_of_deleted_book_does_not_recreate_it():
    """
    The book is deleted after its references are resolved: the write
    matches nothing and the update reports absence instead of inserting it.
    """
    books = make_collection()
    books.count_documents.return_value = 1
    books.replace_one.return_value = MagicMock(matched_count=0)
    authors = make_collection()
    authors.find_one.return_value = {"_id": "1", "name": "Author_1"}
    genres = make_collection([{"_id": "1", "name": "Genre_1"}])
    db = {"books": books, "authors": authors, "genres": genres}

    service = BookService()
    service.book_repository = BookRepository()
    service.author_repository = AuthorRepository()
    service.genre_repository = GenreRepository()

    result = await service.update(
        db, book_id="1", title="BookTitle_1", author_id="1", genre_ids={"1"}
    )

    assert result is None
    assert books.replace_one.call_args.kwargs == {"upsert": False}
