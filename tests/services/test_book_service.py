# tests/services/test_book_service.py
import pytest

from app.core.exceptions import ResourceNotFound
from app.models.author_model import Author
from app.services.book_service import BookService, DeletionStatus
from tests.mocks.fake_repositories import BrokenCommentRepository

# Mark all tests in this file as async
pytestmark = pytest.mark.asyncio


@pytest.fixture
def book_service(fake_repositories) -> BookService:
    """A BookService wired to fresh fake repositories for each test."""
    service = BookService()
    service.book_repository = fake_repositories["book"]
    service.author_repository = fake_repositories["author"]
    service.genre_repository = fake_repositories["genre"]
    service.comment_repository = fake_repositories["comment"]
    return service


# ==================== READ TESTS ====================


async def test_find_by_id_returns_embedded_snapshots(book_service, authors, genres):
    book = await book_service.find_by_id(None, book_id="1")

    assert book is not None
    assert book.title == "BookTitle_1"
    assert book.author == authors["1"]
    assert book.genres == [genres["1"], genres["2"]]


async def test_find_by_id_missing_returns_none(book_service):
    assert await book_service.find_by_id(None, book_id="404") is None


async def test_find_all_returns_every_book(book_service):
    books = await book_service.find_all(None)

    assert [book.id for book in books] == ["1", "2"]
    assert books[0].author.id == "1"
    assert len(books[0].genres) == 2


# ==================== INSERT TESTS ====================


async def test_insert_resolves_author_and_genres(book_service, authors, genres):
    created = await book_service.insert(
        None, title="T", author_id="1", genre_ids={"1", "2"}
    )
    assert created.id

    stored = await book_service.find_by_id(None, book_id=created.id)
    assert stored.title == "T"
    assert stored.author.name == authors["1"].name
    assert {g.id for g in stored.genres} == {"1", "2"}
    assert {g.name for g in stored.genres} == {genres["1"].name, genres["2"].name}


async def test_insert_assigns_new_id(book_service, fake_repositories):
    created = await book_service.insert(None, title="T", author_id="1", genre_ids=set())

    assert created.id not in {"1", "2"}
    assert await fake_repositories["book"].count(None) == 3


async def test_insert_with_no_genres(book_service):
    created = await book_service.insert(None, title="T", author_id="2", genre_ids=[])

    assert created.genres == []


async def test_insert_collapses_duplicate_genre_ids(book_service):
    created = await book_service.insert(
        None, title="T", author_id="1", genre_ids=["3", "3", "4"]
    )

    assert sorted(g.id for g in created.genres) == ["3", "4"]


async def test_insert_unknown_author_fails_without_write(book_service, fake_repositories):
    with pytest.raises(ResourceNotFound, match="Author with id 99"):
        await book_service.insert(None, title="T", author_id="99", genre_ids={"1"})

    assert fake_repositories["book"].save_calls == 0


async def test_insert_unknown_genre_fails_without_write(book_service, fake_repositories):
    with pytest.raises(ResourceNotFound, match="Genres"):
        await book_service.insert(
            None, title="T", author_id="1", genre_ids={"1", "missing"}
        )

    assert fake_repositories["book"].save_calls == 0
    assert await fake_repositories["book"].count(None) == 2


async def test_insert_snapshot_is_not_shared_with_canonical_author(
    book_service, fake_repositories
):
    created = await book_service.insert(None, title="T", author_id="1", genre_ids=set())
    canonical = await fake_repositories["author"].get(None, obj_id="1")

    assert created.author == canonical
    assert created.author is not canonical


# ==================== UPDATE TESTS ====================


async def test_update_existing_book(book_service, fake_repositories):
    updated = await book_service.update(
        None, book_id="1", title="BookTitle_Updated", author_id="2", genre_ids={"4"}
    )

    assert updated.id == "1"
    stored = await book_service.find_by_id(None, book_id="1")
    assert stored.title == "BookTitle_Updated"
    assert stored.author.id == "2"
    assert [g.id for g in stored.genres] == ["4"]
    assert len(await book_service.find_all(None)) == 2


async def test_update_refreshes_stale_author_snapshot(book_service, fake_repositories):
    await fake_repositories["author"].save(None, obj_in=Author(id="1", name="Renamed"))

    updated = await book_service.update(
        None, book_id="1", title="BookTitle_1", author_id="1", genre_ids={"1", "2"}
    )

    assert updated.author.name == "Renamed"


async def test_update_missing_book_returns_none(book_service, fake_repositories):
    result = await book_service.update(
        None, book_id="404", title="T", author_id="1", genre_ids={"1"}
    )

    assert result is None
    assert fake_repositories["book"].save_calls == 0
    assert len(await book_service.find_all(None)) == 2
    assert await fake_repositories["book"].get(None, obj_id="404") is None


async def test_update_unknown_genre_leaves_book_untouched(book_service):
    with pytest.raises(ResourceNotFound):
        await book_service.update(
            None, book_id="1", title="Changed", author_id="1", genre_ids={"nope"}
        )

    stored = await book_service.find_by_id(None, book_id="1")
    assert stored.title == "BookTitle_1"


# ==================== DELETE TESTS ====================


async def test_delete_removes_book_and_its_comments(book_service, fake_repositories):
    result = await book_service.delete_by_id(None, book_id="1")

    assert result.status is DeletionStatus.DELETED
    assert result.title == "BookTitle_1"
    assert result.comments_deleted == 2
    assert await book_service.find_by_id(None, book_id="1") is None
    assert await fake_repositories["comment"].get_by_book_id(None, book_id="1") == []
    # other books keep their comments
    assert len(await fake_repositories["comment"].get_by_book_id(None, book_id="2")) == 1


async def test_delete_missing_book_reports_not_found(book_service, fake_repositories):
    result = await book_service.delete_by_id(None, book_id="404")

    assert result.status is DeletionStatus.NOT_FOUND
    assert not result.found
    assert await fake_repositories["comment"].count(None) == 3


async def test_delete_reports_partial_failure(book_service, comments):
    book_service.comment_repository = BrokenCommentRepository(comments.values())

    result = await book_service.delete_by_id(None, book_id="1")

    assert result.status is DeletionStatus.PARTIALLY_DELETED
    assert isinstance(result.error, ConnectionError)
    assert await book_service.find_by_id(None, book_id="1") is None
    remaining = await book_service.comment_repository.get_by_book_id(None, book_id="1")
    assert len(remaining) == 2
