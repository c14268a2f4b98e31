import logging
import traceback

from flask import current_app, render_template, request
from werkzeug.exceptions import HTTPException

from .models import db

logger = logging.getLogger(__name__)


def show_error_details():
    return current_app.config.get("CATALOG_ENV") == "development"


def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def http_error(e):
        return render_template("error.html", title=e.name, status=e.code,
                               message=e.description, error=None), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        # Anything reaching here is a store failure or a bug: log it, answer 500.
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        db.session.rollback()
        error = None
        if show_error_details():
            error = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        return render_template("error.html", title="Error", status=500,
                               message=str(e) if show_error_details() else "Internal Server Error",
                               error=error), 500
