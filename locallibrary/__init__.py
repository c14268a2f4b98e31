"""
Local Library - a server-rendered library catalog built with Flask.

Features:
- Books, Authors, Genres and BookInstances (copies): list, detail, create, update, delete
- Server-side validation with WTForms; invalid forms are redisplayed with their errors
- Delete guards: books with copies, and genres or authors with books, are kept
- CSRF protection (Flask-WTF) and security headers (Flask-Talisman)
"""
import logging

from flask import Flask, request
from flask_talisman import Talisman
from flask_wtf import CSRFProtect
from sqlalchemy.exc import SQLAlchemyError

from .cli import register_commands
from .config import Config
from .errors import register_error_handlers
from .models import db
from .routes import catalog, site
from .store import EXTENSION_KEY, CatalogStore

logger = logging.getLogger(__name__)

csrf = CSRFProtect()


def init_store(app):
    """Create missing tables. A failed connection is logged and the app keeps running degraded."""
    with app.app_context():
        try:
            db.create_all()
        except SQLAlchemyError:
            logger.exception("Could not connect to the catalog store at %s", db.engine.url)
            return False
    return True


def create_app(config_object=None, **overrides):
    """
    Application factory.

    ``config_object`` defaults to ``Config``; ``overrides`` are applied on top
    of it (handy in tests).
    """
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.update(overrides)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    csrf.init_app(app)
    Talisman(
        app,
        force_https=app.config["FORCE_HTTPS"],
        session_cookie_secure=app.config["FORCE_HTTPS"],
        content_security_policy=app.config["CONTENT_SECURITY_POLICY"],
    )

    # The store is passed explicitly to the accessors; controllers reach it
    # through the application, never through module state.
    app.extensions[EXTENSION_KEY] = CatalogStore(db.session)

    app.register_blueprint(site)
    app.register_blueprint(catalog)
    register_error_handlers(app)
    register_commands(app)

    @app.after_request
    def log_request(response):
        logger.info("%s %s %s", request.method, request.full_path.rstrip("?"), response.status_code)
        return response

    init_store(app)
    return app
