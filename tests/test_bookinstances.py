from datetime import date

import pytest

from locallibrary.models import BookInstance


@pytest.fixture
def book(make_book):
    return make_book()


def test_create_copy_redirects_to_detail(client, store, book):
    response = client.post("/catalog/bookinstance/create", data={
        "book": str(book.id),
        "imprint": "Bantam Spectra, 1991.",
        "status": "Loaned",
        "due_back": "2024-05-01",
    })

    assert response.status_code == 302
    copy = store.book_instances.find_one(BookInstance.book_id == book.id)
    assert response.headers["Location"] == f"/catalog/bookinstance/{copy.id}"
    assert copy.status == "Loaned"
    assert copy.due_back == date(2024, 5, 1)


def test_status_defaults_to_maintenance_and_due_back_is_optional(client, store, book):
    client.post("/catalog/bookinstance/create", data={"book": str(book.id), "imprint": "Gollancz"})

    copy = store.book_instances.find_one(BookInstance.book_id == book.id)
    assert copy.status == "Maintenance"
    assert copy.due_back is None


def test_invalid_due_back_redisplays_form(client, store, book):
    response = client.post("/catalog/bookinstance/create", data={
        "book": str(book.id),
        "imprint": "Gollancz",
        "due_back": "next tuesday",
    })

    assert response.status_code == 200
    assert b"Invalid date" in response.data
    assert b'value="next tuesday"' in response.data
    assert f'<option value="{book.id}" selected>'.encode() in response.data
    assert store.book_instances.count() == 0


def test_copy_requires_book_and_imprint(client, store, book):
    response = client.post("/catalog/bookinstance/create", data={"book": "", "imprint": " "})

    assert response.status_code == 200
    assert b"Imprint must be specified" in response.data
    assert b'data-field="book"' in response.data
    assert store.book_instances.count() == 0


def test_unknown_status_is_rejected(client, store, book):
    response = client.post("/catalog/bookinstance/create", data={
        "book": str(book.id), "imprint": "Gollancz", "status": "Lost",
    })

    assert response.status_code == 200
    assert b'data-field="status"' in response.data
    assert store.book_instances.count() == 0


def test_copy_list_and_detail(client, make_copy, book):
    copy = make_copy(book, imprint="Gollancz, 2011.", status="Loaned", due_back=date(2020, 10, 20))

    listing = client.get("/catalog/bookinstances")
    assert b"Foundation : Gollancz, 2011." in listing.data
    assert b"Oct 20, 2020" in listing.data

    detail = client.get(f"/catalog/bookinstance/{copy.id}")
    assert detail.status_code == 200
    assert b"Gollancz, 2011." in detail.data


def test_copy_detail_not_found(client):
    response = client.get("/catalog/bookinstance/999")

    assert response.status_code == 404
    assert b"Book copy not found" in response.data


def test_update_copy(client, store, make_copy, book):
    copy = make_copy(book, status="Available")

    form = client.get(f"/catalog/bookinstance/{copy.id}/update")
    assert b'<option value="Available" selected>' in form.data

    response = client.post(f"/catalog/bookinstance/{copy.id}/update", data={
        "book": str(book.id), "imprint": "Reprint", "status": "Reserved", "due_back": "20250102",
    })

    assert response.status_code == 302
    assert response.headers["Location"] == f"/catalog/bookinstance/{copy.id}"
    updated = store.book_instances.find_by_id(copy.id)
    assert (updated.imprint, updated.status, updated.due_back) == ("Reprint", "Reserved", date(2025, 1, 2))


def test_update_missing_copy_is_404(client, book):
    assert client.get("/catalog/bookinstance/999/update").status_code == 404
    response = client.post("/catalog/bookinstance/999/update", data={
        "book": str(book.id), "imprint": "Reprint",
    })
    assert response.status_code == 404


def test_delete_copy_is_unconditional(client, store, make_copy, book):
    copy = make_copy(book)
    make_copy(book)

    confirm = client.get(f"/catalog/bookinstance/{copy.id}/delete")
    assert b"Do you really want to delete this BookInstance?" in confirm.data

    response = client.post(f"/catalog/bookinstance/{copy.id}/delete")

    assert response.status_code == 302
    assert response.headers["Location"] == "/catalog/bookinstances"
    assert store.book_instances.count() == 1


def test_delete_page_for_missing_copy_is_404(client):
    assert client.get("/catalog/bookinstance/999/delete").status_code == 404
