from flask import abort, redirect, render_template, url_for

from ..forms import BookInstanceForm, validation_errors
from ..models import BookInstance
from ..store import get_store


def bookinstance_list():
    instances = get_store().book_instances.listing()
    return render_template("bookinstance_list.html", title="Book Instance List",
                           bookinstance_list=instances)


def bookinstance_detail(bookinstance_id):
    bookinstance = get_store().book_instances.find_by_id(bookinstance_id, populate=("book",))
    if bookinstance is None:
        abort(404, description="Book copy not found")

    return render_template("bookinstance_detail.html", title="Book:", bookinstance=bookinstance)


def _instance_from_form(form, bookinstance_id=None):
    return BookInstance(
        id=bookinstance_id,
        book_id=form.book.data,
        imprint=form.imprint.data,
        status=form.status.data,
        due_back=form.due_back.data,
    )


def _render_form(title, form, books, bookinstance=None, errors=None):
    return render_template(
        "bookinstance_form.html",
        title=title,
        form=form,
        book_list=books,
        selected_book=form.book.data,
        bookinstance=bookinstance,
        errors=errors or [],
    )


def bookinstance_create_get():
    books = get_store().books.titles()
    form = BookInstanceForm()
    form.set_choices(books)
    return _render_form("Create BookInstance", form, books)


def bookinstance_create_post():
    store = get_store()
    books = store.books.titles()
    form = BookInstanceForm()
    form.set_choices(books)
    valid = form.validate()
    bookinstance = _instance_from_form(form)

    if not valid:
        return _render_form("Create BookInstance", form, books, bookinstance=bookinstance,
                            errors=validation_errors(form))

    store.book_instances.create(bookinstance)
    return redirect(bookinstance.url)


def bookinstance_update_get(bookinstance_id):
    store = get_store()
    bookinstance = store.book_instances.find_by_id(bookinstance_id)
    if bookinstance is None:
        abort(404, description="Book copy not found")
    books = store.books.titles()

    form = BookInstanceForm(
        book=bookinstance.book_id,
        imprint=bookinstance.imprint,
        status=bookinstance.status,
        due_back=bookinstance.due_back,
    )
    form.set_choices(books)
    return _render_form("Update Book Instance", form, books, bookinstance=bookinstance)


def bookinstance_update_post(bookinstance_id):
    store = get_store()
    books = store.books.titles()
    form = BookInstanceForm()
    form.set_choices(books)
    valid = form.validate()
    bookinstance = _instance_from_form(form, bookinstance_id=bookinstance_id)

    if not valid:
        return _render_form("Update Book Instance", form, books, bookinstance=bookinstance,
                            errors=validation_errors(form))

    updated = store.book_instances.update(bookinstance_id, bookinstance)
    if updated is None:
        abort(404, description="Book copy not found")
    return redirect(updated.url)


def bookinstance_delete_get(bookinstance_id):
    bookinstance = get_store().book_instances.find_by_id(bookinstance_id, populate=("book",))
    if bookinstance is None:
        abort(404, description="Book copy not found")

    return render_template("bookinstance_delete.html", title="Delete Book Instance",
                           bookinstance=bookinstance)


def bookinstance_delete_post(bookinstance_id):
    # Copies have no dependents: delete without a guard.
    get_store().book_instances.delete(bookinstance_id)
    return redirect(url_for('catalog.bookinstance_list'))
