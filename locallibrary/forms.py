"""
Form validation and sanitization for the catalog.

Every form trims its text input and strips markup with bleach before the
validators run, so the values redisplayed on an invalid submission are the
sanitized ones. ``validation_errors`` flattens a failed form into a list of
``{"field": ..., "message": ...}`` entries; an empty list means valid.
"""
import html

from dateutil.parser import isoparse
from flask_wtf import FlaskForm
from wtforms import SelectField, SelectMultipleField, StringField, TextAreaField
from wtforms.validators import DataRequired, Length, Optional, Regexp
import bleach

from .models import BOOK_INSTANCE_STATUSES, DEFAULT_STATUS

ALPHANUMERIC = r"^[A-Za-z0-9]+$"


def sanitize(value):
    """Trim and strip all markup from a submitted string. The result is plain text; templates escape it."""
    if value is None:
        return None
    # bleach entity-encodes the text it keeps
    return html.unescape(bleach.clean(value.strip(), tags=set(), strip=True)).strip()


def parse_iso_date(value):
    value = (value or "").strip()
    if not value:
        return None
    return isoparse(value).date()


class ISODateField(StringField):
    """
    Optional date input accepting any ISO 8601 date (``2024-03-01``,
    ``20240301``, ``2024-03-01T10:00``). The parsed value is a ``datetime.date``.
    """

    def __init__(self, label=None, validators=None, invalid_message="Invalid date", **kwargs):
        super().__init__(label, validators, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        self.data = None
        if not valuelist:
            return
        try:
            self.data = parse_iso_date(valuelist[0])
        except (ValueError, OverflowError):
            raise ValueError(self.invalid_message)

    def _value(self):
        if self.raw_data:
            return " ".join(self.raw_data)
        return self.data.isoformat() if self.data else ""


class GenreForm(FlaskForm):
    name = StringField("Genre", filters=[sanitize], validators=[
        Length(min=3, max=100, message="Genre name must contain at least 3 characters"),
    ])


class AuthorForm(FlaskForm):
    first_name = StringField("First name", filters=[sanitize], validators=[
        DataRequired(message="First name must be specified."),
        Length(max=100),
        Regexp(ALPHANUMERIC, message="First name has non-alphanumeric characters."),
    ])
    family_name = StringField("Family name", filters=[sanitize], validators=[
        DataRequired(message="Family name must be specified."),
        Length(max=100),
        Regexp(ALPHANUMERIC, message="Family name has non-alphanumeric characters."),
    ])
    date_of_birth = ISODateField("Date of birth", validators=[Optional()],
                                 invalid_message="Invalid date of birth")
    date_of_death = ISODateField("Date of death", validators=[Optional()],
                                 invalid_message="Invalid date of death")


class BookForm(FlaskForm):
    title = StringField("Title", filters=[sanitize], validators=[
        DataRequired(message="Title must not be empty."),
        Length(max=250),
    ])
    author = SelectField("Author", coerce=int, validators=[
        DataRequired(message="Author must not be empty."),
    ])
    summary = TextAreaField("Summary", filters=[sanitize], validators=[
        DataRequired(message="Summary must not be empty."),
    ])
    isbn = StringField("ISBN", filters=[sanitize], validators=[
        DataRequired(message="ISBN must not be empty"),
        Length(max=20),
    ])
    # Absent -> [], a single value -> [value]; ids are coerced to int.
    genre = SelectMultipleField("Genre", coerce=int)

    def set_choices(self, authors, genres):
        self.author.choices = [(a.id, a.name) for a in authors]
        self.genre.choices = [(g.id, g.name) for g in genres]


class BookInstanceForm(FlaskForm):
    book = SelectField("Book", coerce=int, validators=[
        DataRequired(message="Book must be specified"),
    ])
    imprint = StringField("Imprint", filters=[sanitize], validators=[
        DataRequired(message="Imprint must be specified"),
        Length(max=250),
    ])
    status = SelectField("Status", choices=[(s, s) for s in BOOK_INSTANCE_STATUSES],
                         default=DEFAULT_STATUS)
    due_back = ISODateField("Date when book available", validators=[Optional()])

    def set_choices(self, books):
        self.book.choices = [(b.id, b.title) for b in books]


def validation_errors(form):
    """Flatten ``form.errors`` into ``[{"field": name, "message": msg}, ...]``."""
    errors = []
    for name, messages in form.errors.items():
        for message in messages:
            errors.append({"field": name, "message": message})
    return errors
