from flask import url_for
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

BOOK_INSTANCE_STATUSES = ("Available", "Maintenance", "Loaned", "Reserved")
DEFAULT_STATUS = "Maintenance"


book_genres = db.Table(
    'book_genres',
    db.Column('book_id', db.Integer, db.ForeignKey('books.id'), primary_key=True),
    db.Column('genre_id', db.Integer, db.ForeignKey('genres.id'), primary_key=True),
)


class Author(db.Model):
    __tablename__ = 'authors'
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    family_name = db.Column(db.String(100), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=True)
    date_of_death = db.Column(db.Date, nullable=True)

    @property
    def name(self):
        """Full name as "family_name, first_name", or empty when either part is missing."""
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return ""

    @property
    def lifespan(self):
        born = self.date_of_birth.isoformat() if self.date_of_birth else ""
        died = self.date_of_death.isoformat() if self.date_of_death else ""
        return f"{born} - {died}" if born or died else ""

    @property
    def url(self):
        return url_for('catalog.author_detail', author_id=self.id)

    def __repr__(self):
        return f"<Author id={self.id} name='{self.name}'>"

    def __str__(self):
        return self.name


class Genre(db.Model):
    __tablename__ = 'genres'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True, index=True)

    @property
    def url(self):
        return url_for('catalog.genre_detail', genre_id=self.id)

    def __repr__(self):
        return f"<Genre id={self.id} name='{self.name}'>"

    def __str__(self):
        return self.name


class Book(db.Model):
    """A catalog title. References its author and a set of genres; copies live in BookInstance."""
    __tablename__ = 'books'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(250), nullable=False, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('authors.id'), nullable=False)
    summary = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String(20), nullable=False)

    # One-way references: reverse lookups go through the store.
    author = db.relationship('Author')
    genres = db.relationship('Genre', secondary=book_genres, order_by='Genre.name')

    @property
    def url(self):
        return url_for('catalog.book_detail', book_id=self.id)

    def __repr__(self):
        return f"<Book id={self.id} title='{self.title}'>"

    def __str__(self):
        return self.title


class BookInstance(db.Model):
    """A physical copy of a book that can be borrowed."""
    __tablename__ = 'book_instances'
    id = db.Column(db.Integer, primary_key=True)
    book_id = db.Column(db.Integer, db.ForeignKey('books.id'), nullable=False, index=True)
    imprint = db.Column(db.String(250), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=DEFAULT_STATUS, index=True)
    due_back = db.Column(db.Date, nullable=True)

    book = db.relationship('Book')

    @property
    def url(self):
        return url_for('catalog.bookinstance_detail', bookinstance_id=self.id)

    @property
    def due_back_formatted(self):
        return self.due_back.strftime("%b %d, %Y") if self.due_back else ""

    def __repr__(self):
        return f"<BookInstance id={self.id} book_id={self.book_id} status='{self.status}'>"
