from typing import AsyncGenerator, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.db.session import get_database
from app.main import create_application
from app.models.author_model import Author
from app.models.book_model import Book
from app.models.comment_model import Comment
from app.models.genre_model import Genre
from app.services.author_service import author_service
from app.services.book_service import book_service
from app.services.comment_service import comment_service
from app.services.genre_service import genre_service
from tests.mocks.fake_repositories import FakeCommentRepository, FakeRepository


# --- Test Data Fixtures ---


@pytest.fixture
def authors() -> Dict[str, Author]:
    return {
        "1": Author(id="1", name="Author_1"),
        "2": Author(id="2", name="Author_2"),
    }


@pytest.fixture
def genres() -> Dict[str, Genre]:
    return {str(i): Genre(id=str(i), name=f"Genre_{i}") for i in range(1, 5)}


@pytest.fixture
def books(authors, genres) -> Dict[str, Book]:
    return {
        "1": Book.assemble(
            book_id="1",
            title="BookTitle_1",
            author=authors["1"],
            genres=[genres["1"], genres["2"]],
        ),
        "2": Book.assemble(
            book_id="2",
            title="BookTitle_2",
            author=authors["2"],
            genres=[genres["3"]],
        ),
    }


@pytest.fixture
def comments() -> Dict[str, Comment]:
    return {
        "11": Comment(id="11", text="Great", book_id="1"),
        "12": Comment(id="12", text="Too long", book_id="1"),
        "21": Comment(id="21", text="Classic", book_id="2"),
    }


@pytest.fixture
def fake_repositories(authors, genres, books, comments) -> Dict[str, FakeRepository]:
    """Fresh in-memory repositories for each test."""
    return {
        "author": FakeRepository(Author, authors.values()),
        "genre": FakeRepository(Genre, genres.values()),
        "book": FakeRepository(Book, books.values()),
        "comment": FakeCommentRepository(comments.values()),
    }


@pytest.fixture
def wired_services(monkeypatch, fake_repositories):
    """
    Swap the fake repositories into the service singletons used by the
    endpoints, so the API tests run against memory instead of MongoDB.
    """
    repos = fake_repositories
    monkeypatch.setattr(book_service, "book_repository", repos["book"])
    monkeypatch.setattr(book_service, "author_repository", repos["author"])
    monkeypatch.setattr(book_service, "genre_repository", repos["genre"])
    monkeypatch.setattr(book_service, "comment_repository", repos["comment"])
    monkeypatch.setattr(genre_service, "genre_repository", repos["genre"])
    monkeypatch.setattr(author_service, "author_repository", repos["author"])
    monkeypatch.setattr(comment_service, "comment_repository", repos["comment"])
    monkeypatch.setattr(comment_service, "book_repository", repos["book"])
    return repos


# --- HTTP Client Fixtures ---


@pytest.fixture(params=["reactive", "blocking"])
def api_mode(request) -> str:
    return request.param


@pytest_asyncio.fixture(scope="function")
async def test_client(wired_services, api_mode) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an HTTP client for API testing, overriding the DB dependency.
    The lifespan is not run, so no MongoDB connection is opened.
    """
    app = create_application(api_mode=api_mode)
    app.dependency_overrides[get_database] = lambda: None

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
