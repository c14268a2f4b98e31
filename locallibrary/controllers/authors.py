import logging

from flask import abort, redirect, render_template, url_for

from ..forms import AuthorForm, validation_errors
from ..models import Author
from ..store import get_store

logger = logging.getLogger(__name__)


def author_list():
    authors = get_store().authors.all_sorted()
    return render_template("author_list.html", title="Author List", author_list=authors)


def author_detail(author_id):
    store = get_store()
    author = store.authors.find_by_id(author_id)
    if author is None:
        abort(404, description="Author not found")
    author_books = store.books.by_author(author_id)

    return render_template("author_detail.html", title="Author Detail", author=author,
                           author_books=author_books)


def _author_from_form(form, author_id=None):
    return Author(
        id=author_id,
        first_name=form.first_name.data,
        family_name=form.family_name.data,
        date_of_birth=form.date_of_birth.data,
        date_of_death=form.date_of_death.data,
    )


def author_create_get():
    return render_template("author_form.html", title="Create Author", form=AuthorForm(), errors=[])


def author_create_post():
    form = AuthorForm()
    valid = form.validate()
    author = _author_from_form(form)

    if not valid:
        return render_template("author_form.html", title="Create Author", form=form, author=author,
                               errors=validation_errors(form))

    get_store().authors.create(author)
    return redirect(author.url)


def author_update_get(author_id):
    author = get_store().authors.find_by_id(author_id)
    if author is None:
        abort(404, description="Author not found")

    form = AuthorForm(
        first_name=author.first_name,
        family_name=author.family_name,
        date_of_birth=author.date_of_birth,
        date_of_death=author.date_of_death,
    )
    return render_template("author_form.html", title="Update Author", form=form, author=author,
                           errors=[])


def author_update_post(author_id):
    form = AuthorForm()
    valid = form.validate()
    author = _author_from_form(form, author_id=author_id)

    if not valid:
        return render_template("author_form.html", title="Update Author", form=form, author=author,
                               errors=validation_errors(form))

    updated = get_store().authors.update(author_id, author)
    if updated is None:
        abort(404, description="Author not found")
    return redirect(updated.url)


def author_delete_get(author_id):
    store = get_store()
    author = store.authors.find_by_id(author_id)
    if author is None:
        return redirect(url_for('catalog.author_list'))
    author_books = store.books.by_author(author_id)

    return render_template("author_delete.html", title="Delete Author", author=author,
                           author_books=author_books)


def author_delete_post(author_id):
    store = get_store()
    author = store.authors.find_by_id(author_id)
    if author is None:
        return redirect(url_for('catalog.author_list'))

    author_books = store.books.by_author(author_id)
    if author_books:
        logger.info("Not deleting author id=%s: %d books still reference it",
                    author_id, len(author_books))
        return render_template("author_delete.html", title="Delete Author", author=author,
                               author_books=author_books)

    store.authors.delete(author_id)
    return redirect(url_for('catalog.author_list'))
