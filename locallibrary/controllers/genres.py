import logging

from flask import abort, redirect, render_template, url_for
from sqlalchemy.exc import IntegrityError

from ..forms import GenreForm, validation_errors
from ..models import Genre
from ..store import get_store

logger = logging.getLogger(__name__)


def genre_list():
    genres = get_store().genres.all_sorted()
    return render_template("genre_list.html", title="Genre List", genre_list=genres)


def genre_detail(genre_id):
    store = get_store()
    genre = store.genres.find_by_id(genre_id)
    if genre is None:
        abort(404, description="Genre not found")
    genre_books = store.books.in_genre(genre_id)

    return render_template("genre_detail.html", title="Genre Detail", genre=genre,
                           genre_books=genre_books)


def genre_create_get():
    return render_template("genre_form.html", title="Create Genre", form=GenreForm(), errors=[])


def genre_create_post():
    """
    Create a genre, or redirect to the one that already has this name.

    The name lookup happens before the insert; the unique index on
    ``genres.name`` settles two submissions racing past the lookup, and the
    loser is redirected to the winner.
    """
    store = get_store()
    form = GenreForm()
    valid = form.validate()
    genre = Genre(name=form.name.data)

    if not valid:
        return render_template("genre_form.html", title="Create Genre", form=form, genre=genre,
                               errors=validation_errors(form))

    existing = store.genres.find_by_name(genre.name)
    if existing is not None:
        logger.info("Genre %r already exists as id=%s", genre.name, existing.id)
        return redirect(existing.url)

    try:
        store.genres.create(genre)
    except IntegrityError:
        existing = store.genres.find_by_name(genre.name)
        if existing is None:
            raise
        logger.info("Genre %r was created concurrently as id=%s", genre.name, existing.id)
        return redirect(existing.url)

    return redirect(genre.url)


def genre_update_get(genre_id):
    genre = get_store().genres.find_by_id(genre_id)
    if genre is None:
        abort(404, description="Genre not found")

    form = GenreForm(name=genre.name)
    return render_template("genre_form.html", title="Update Genre", form=form, genre=genre, errors=[])


def genre_update_post(genre_id):
    store = get_store()
    form = GenreForm()
    valid = form.validate()
    genre = Genre(id=genre_id, name=form.name.data)

    if valid:
        try:
            updated = store.genres.update(genre_id, genre)
        except IntegrityError:
            form.name.errors.append(f"Genre '{genre.name}' already exists")
        else:
            if updated is None:
                abort(404, description="Genre not found")
            return redirect(updated.url)

    return render_template("genre_form.html", title="Update Genre", form=form, genre=genre,
                           errors=validation_errors(form))


def genre_delete_get(genre_id):
    store = get_store()
    genre = store.genres.find_by_id(genre_id)
    if genre is None:
        return redirect(url_for('catalog.genre_list'))
    genre_books = store.books.in_genre(genre_id)

    return render_template("genre_delete.html", title="Delete Genre", genre=genre,
                           genre_books=genre_books)


def genre_delete_post(genre_id):
    store = get_store()
    genre = store.genres.find_by_id(genre_id)
    if genre is None:
        return redirect(url_for('catalog.genre_list'))

    genre_books = store.books.in_genre(genre_id)
    if genre_books:
        logger.info("Not deleting genre id=%s: %d books still reference it",
                    genre_id, len(genre_books))
        return render_template("genre_delete.html", title="Delete Genre", genre=genre,
                               genre_books=genre_books)

    store.genres.delete(genre_id)
    return redirect(url_for('catalog.genre_list'))
