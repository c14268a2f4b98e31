"""
Entity accessors over the catalog store.

Each accessor is a thin pass-through to one collection (find, find-by-id,
count, create, update, delete). ``CatalogStore`` bundles the four accessors
around a single session which is handed in explicitly, so controllers and
tests never reach for module-level connection state.
"""
import logging

from flask import current_app
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, load_only

from .models import Author, Book, BookInstance, Genre

logger = logging.getLogger(__name__)

EXTENSION_KEY = "catalog_store"


class EntityAccessor:
    model = None
    # Attributes replaced by update(); the id is never copied.
    fields = ()

    def __init__(self, session):
        self.session = session

    def _select(self, order_by=None, fields=None, populate=()):
        stmt = select(self.model)
        if fields:
            stmt = stmt.options(load_only(*[getattr(self.model, f) for f in fields]))
        for rel in populate:
            stmt = stmt.options(joinedload(getattr(self.model, rel)))
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        return stmt

    def find(self, *criteria, order_by=None, fields=None, populate=()):
        """All entities matching ``criteria``, optionally projected and with relations populated."""
        stmt = self._select(order_by=order_by, fields=fields, populate=populate)
        if criteria:
            stmt = stmt.where(*criteria)
        return self.session.scalars(stmt).unique().all()

    def find_one(self, *criteria):
        stmt = select(self.model).where(*criteria).limit(1)
        return self.session.scalars(stmt).first()

    def find_by_id(self, entity_id, populate=()):
        options = [joinedload(getattr(self.model, rel)) for rel in populate]
        return self.session.get(self.model, entity_id, options=options)

    def count(self, *criteria):
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        return self.session.scalar(stmt)

    def create(self, entity):
        self.session.add(entity)
        self._commit()
        logger.info("Created %r", entity)
        return entity

    def update(self, entity_id, candidate):
        """Replace the stored fields of ``entity_id`` with the candidate's. Returns None if it is gone."""
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return None
        for name in self.fields:
            setattr(entity, name, getattr(candidate, name))
        self._commit()
        logger.info("Updated %r", entity)
        return entity

    def delete(self, entity_id):
        entity = self.session.get(self.model, entity_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self._commit()
        logger.info("Deleted %s id=%s", self.model.__name__, entity_id)
        return True

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise


class AuthorAccessor(EntityAccessor):
    model = Author
    fields = ("first_name", "family_name", "date_of_birth", "date_of_death")

    def all_sorted(self):
        return self.find(order_by=Author.family_name)


class GenreAccessor(EntityAccessor):
    model = Genre
    fields = ("name",)

    def all_sorted(self):
        return self.find(order_by=Genre.name)

    def find_by_name(self, name):
        # Exact, case-sensitive match on the stored (sanitized) name.
        return self.find_one(Genre.name == name)

    def find_by_ids(self, ids):
        if not ids:
            return []
        return self.find(Genre.id.in_(ids), order_by=Genre.name)


class BookAccessor(EntityAccessor):
    model = Book
    fields = ("title", "author_id", "summary", "isbn", "genres")

    def catalog(self):
        """Every book projected to title and author, sorted by title."""
        return self.find(order_by=Book.title, fields=("title", "author_id"), populate=("author",))

    def titles(self):
        return self.find(order_by=Book.title, fields=("title",))

    def by_author(self, author_id):
        return self.find(Book.author_id == author_id, order_by=Book.title,
                         fields=("title", "summary"))

    def in_genre(self, genre_id):
        return self.find(Book.genres.any(Genre.id == genre_id), order_by=Book.title,
                         fields=("title", "summary"))


class BookInstanceAccessor(EntityAccessor):
    model = BookInstance
    fields = ("book_id", "imprint", "status", "due_back")

    def of_book(self, book_id):
        return self.find(BookInstance.book_id == book_id, order_by=BookInstance.id)

    def listing(self):
        return self.find(order_by=BookInstance.id, populate=("book",))


class CatalogStore:
    """The four collections of the catalog, sharing one session."""

    def __init__(self, session):
        self.session = session
        self.authors = AuthorAccessor(session)
        self.genres = GenreAccessor(session)
        self.books = BookAccessor(session)
        self.book_instances = BookInstanceAccessor(session)


def get_store():
    """The store attached to the running application by ``create_app``."""
    return current_app.extensions[EXTENSION_KEY]

