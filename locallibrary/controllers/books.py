import logging

from flask import abort, redirect, render_template, url_for

from ..forms import BookForm, validation_errors
from ..models import Book, BookInstance
from ..store import get_store

logger = logging.getLogger(__name__)


def index():
    """Site home: counts of every collection."""
    store = get_store()
    return render_template(
        "index.html",
        title="Local Library Home",
        book_count=store.books.count(),
        book_instance_count=store.book_instances.count(),
        book_instance_available_count=store.book_instances.count(BookInstance.status == "Available"),
        author_count=store.authors.count(),
        genre_count=store.genres.count(),
    )


def book_list():
    books = get_store().books.catalog()
    return render_template("book_list.html", title="Book List", book_list=books)


def book_detail(book_id):
    store = get_store()
    book = store.books.find_by_id(book_id, populate=("author", "genres"))
    if book is None:
        abort(404, description="Book not found")
    book_instances = store.book_instances.of_book(book_id)

    return render_template("book_detail.html", title=book.title, book=book,
                           book_instances=book_instances)


def _book_from_form(form, book_id=None):
    # Unsaved candidate built from sanitized input; keeps the id on update.
    return Book(
        id=book_id,
        title=form.title.data,
        author_id=form.author.data,
        summary=form.summary.data,
        isbn=form.isbn.data,
        genres=get_store().genres.find_by_ids(form.genre.data or []),
    )


def _render_form(title, form, authors, genres, book=None, errors=None):
    return render_template(
        "book_form.html",
        title=title,
        form=form,
        authors=authors,
        genres=genres,
        checked=set(form.genre.data or []),
        book=book,
        errors=errors or [],
    )


def book_create_get():
    store = get_store()
    authors, genres = store.authors.all_sorted(), store.genres.all_sorted()
    form = BookForm()
    form.set_choices(authors, genres)
    return _render_form("Create Book", form, authors, genres)


def book_create_post():
    store = get_store()
    authors, genres = store.authors.all_sorted(), store.genres.all_sorted()
    form = BookForm()
    form.set_choices(authors, genres)
    valid = form.validate()
    book = _book_from_form(form)

    if not valid:
        return _render_form("Create Book", form, authors, genres, book=book,
                            errors=validation_errors(form))

    store.books.create(book)
    return redirect(book.url)


def book_update_get(book_id):
    store = get_store()
    book = store.books.find_by_id(book_id, populate=("author", "genres"))
    if book is None:
        abort(404, description="Book not found")

    authors, genres = store.authors.all_sorted(), store.genres.all_sorted()
    form = BookForm(
        title=book.title,
        author=book.author_id,
        summary=book.summary,
        isbn=book.isbn,
        genre=[g.id for g in book.genres],
    )
    form.set_choices(authors, genres)
    return _render_form("Update Book", form, authors, genres, book=book)


def book_update_post(book_id):
    store = get_store()
    authors, genres = store.authors.all_sorted(), store.genres.all_sorted()
    form = BookForm()
    form.set_choices(authors, genres)
    valid = form.validate()
    book = _book_from_form(form, book_id=book_id)

    if not valid:
        return _render_form("Update Book", form, authors, genres, book=book,
                            errors=validation_errors(form))

    updated = store.books.update(book_id, book)
    if updated is None:
        abort(404, description="Book not found")
    return redirect(updated.url)


def book_delete_get(book_id):
    store = get_store()
    book = store.books.find_by_id(book_id, populate=("author", "genres"))
    if book is None:
        abort(404, description="Book not found.")
    book_instances = store.book_instances.of_book(book_id)

    return render_template("book_delete.html", title="Delete Book", book=book,
                           book_instances=book_instances)


def book_delete_post(book_id):
    store = get_store()
    book = store.books.find_by_id(book_id, populate=("author", "genres"))
    if book is None:
        return redirect(url_for('catalog.book_list'))

    book_instances = store.book_instances.of_book(book_id)
    if book_instances:
        logger.info("Not deleting book id=%s: %d copies still reference it",
                    book_id, len(book_instances))
        return render_template("book_delete.html", title="Delete Book", book=book,
                               book_instances=book_instances)

    store.books.delete(book_id)
    return redirect(url_for('catalog.book_list'))
