from locallibrary.models import Book, BookInstance, Genre, db
from locallibrary.store import CatalogStore, get_store


def test_store_is_attached_to_app(app):
    store = get_store()

    assert isinstance(store, CatalogStore)
    assert store.session is db.session


def test_count_and_find(store, make_book, make_copy):
    book = make_book()
    make_copy(book, status="Available")
    make_copy(book, status="Loaned")

    assert store.book_instances.count() == 2
    assert store.book_instances.count(BookInstance.status == "Available") == 1
    assert [c.status for c in store.book_instances.of_book(book.id)] == ["Available", "Loaned"]


def test_find_by_id_missing_returns_none(store):
    assert store.books.find_by_id(42) is None


def test_find_by_name_is_exact(store, make_genre):
    make_genre("Fantasy")

    assert store.genres.find_by_name("Fantasy") is not None
    assert store.genres.find_by_name("fantasy") is None
    assert store.genres.find_by_name("Fant") is None


def test_find_by_ids_skips_unknown(store, make_genre):
    fantasy = make_genre("Fantasy")

    assert store.genres.find_by_ids([fantasy.id, 999]) == [fantasy]
    assert store.genres.find_by_ids([]) == []


def test_catalog_sorted_with_authors(store, make_author, make_book):
    bova = make_author("Ben", "Bova")
    make_book(title="Foundation")
    make_book(title="Apes and Angels", author=bova)

    books = store.books.catalog()

    assert [b.title for b in books] == ["Apes and Angels", "Foundation"]
    assert books[0].author.name == "Bova, Ben"


def test_reverse_lookups(store, make_author, make_genre, make_book):
    author = make_author("Patrick", "Rothfuss")
    fantasy = make_genre("Fantasy")
    make_book(title="The Wise Man's Fear", author=author, genres=[fantasy])
    make_book(title="The Name of the Wind", author=author, genres=[fantasy])
    make_book(title="Foundation")

    assert [b.title for b in store.books.by_author(author.id)] == [
        "The Name of the Wind", "The Wise Man's Fear",
    ]
    assert len(store.books.in_genre(fantasy.id)) == 2


def test_update_copies_fields_but_not_id(store, make_book, make_genre):
    book = make_book(title="Old")
    poetry = make_genre("Poetry")
    candidate = Book(id=999, title="New", author_id=book.author_id, summary="s", isbn="1",
                     genres=[poetry])

    updated = store.books.update(book.id, candidate)

    assert updated.id == book.id
    assert updated.title == "New"
    assert updated.genres == [poetry]
    assert store.books.find_by_id(999) is None


def test_update_missing_returns_none(store):
    assert store.genres.update(5, Genre(name="Anything")) is None


def test_delete(store, make_genre):
    genre = make_genre("Fantasy")

    assert store.genres.delete(genre.id) is True
    assert store.genres.delete(genre.id) is False
    assert store.genres.count() == 0


def test_store_can_wrap_any_session(app, make_genre):
    make_genre("Fantasy")
    other = CatalogStore(db.session)

    assert other.genres.count() == 1
