from datetime import date

import click

from .models import Author, Book, BookInstance, Genre, db
from .store import get_store


def seed_catalog(store):
    """Load a small sample catalog. Returns False if the store already holds authors."""
    if store.authors.count():
        return False

    rothfuss = Author(first_name="Patrick", family_name="Rothfuss", date_of_birth=date(1973, 6, 6))
    asimov = Author(first_name="Isaac", family_name="Asimov", date_of_birth=date(1920, 1, 2),
                    date_of_death=date(1992, 4, 6))
    bova = Author(first_name="Ben", family_name="Bova", date_of_birth=date(1932, 11, 8))
    fantasy, scifi, poetry = Genre(name="Fantasy"), Genre(name="Science Fiction"), Genre(name="French Poetry")
    for entity in (rothfuss, asimov, bova, fantasy, scifi, poetry):
        store.session.add(entity)

    wind = Book(title="The Name of the Wind (The Kingkiller Chronicle, #1)", author=rothfuss,
                isbn="9781473211896", genres=[fantasy],
                summary="I have stolen princesses back from sleeping barrow kings.")
    fear = Book(title="The Wise Man's Fear (The Kingkiller Chronicle, #2)", author=rothfuss,
                isbn="9788401352836", genres=[fantasy],
                summary="Picking up the tale of Kvothe Kingkiller once again.")
    apes = Book(title="Apes and Angels", author=bova, isbn="9780765379528", genres=[scifi],
                summary="Humankind headed out to the stars not for conquest, nor exploration.")
    foundation = Book(title="Foundation", author=asimov, isbn="9780553293357", genres=[scifi],
                      summary="For twelve thousand years the Galactic Empire has ruled supreme.")
    for book in (wind, fear, apes, foundation):
        store.session.add(book)

    copies = [
        BookInstance(book=wind, imprint="London Gollancz, 2014.", status="Available"),
        BookInstance(book=fear, imprint="Gollancz, 2011.", status="Loaned", due_back=date(2020, 10, 20)),
        BookInstance(book=apes, imprint="New York Tom Doherty Associates, 2016.", status="Available"),
        BookInstance(book=apes, imprint="New York Tom Doherty Associates, 2016.", status="Maintenance"),
        BookInstance(book=foundation, imprint="Bantam Spectra, 1991.", status="Reserved"),
    ]
    for copy in copies:
        store.session.add(copy)

    store.session.commit()
    return True


def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        """Create the catalog tables."""
        db.create_all()
        click.echo("Initialized the catalog store.")

    @app.cli.command("seed")
    def seed():
        """Load sample authors, genres, books and copies (dev only)."""
        db.create_all()
        if seed_catalog(get_store()):
            click.echo("Loaded the sample catalog.")
        else:
            click.echo("Catalog already has data.")
