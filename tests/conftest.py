import pytest

from locallibrary import create_app
from locallibrary.config import TestingConfig
from locallibrary.models import Author, Book, BookInstance, Genre, db
from locallibrary.store import get_store


@pytest.fixture
def app():
    # Fresh in-memory database per test
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return get_store()


@pytest.fixture
def make_author(store):
    def _make(first_name="Isaac", family_name="Asimov", **kwargs):
        return store.authors.create(Author(first_name=first_name, family_name=family_name, **kwargs))
    return _make


@pytest.fixture
def make_genre(store):
    def _make(name="Fantasy"):
        return store.genres.create(Genre(name=name))
    return _make


@pytest.fixture
def make_book(store, make_author):
    def _make(title="Foundation", author=None, genres=(), summary="Psychohistory.", isbn="9780553293357"):
        author = author or make_author()
        return store.books.create(Book(title=title, author_id=author.id, summary=summary,
                                       isbn=isbn, genres=list(genres)))
    return _make


@pytest.fixture
def make_copy(store):
    def _make(book, imprint="Bantam Spectra, 1991.", status="Available", due_back=None):
        return store.book_instances.create(BookInstance(book_id=book.id, imprint=imprint,
                                                        status=status, due_back=due_back))
    return _make
