"""
Error Handlers

Turns store and routing failures into plain-text responses. Backend details
are logged server-side and never sent to the client.
"""

from flask import current_app, request
from werkzeug.exceptions import HTTPException

from services.content_store import ContentNotFound, StoreError

NOT_FOUND_BODY = "404 page not found"
SERVER_ERROR_BODY = "Internal Server Error"


def _plain(body: str, status: int):
    return body + "\n", status, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    """Attach the site's error handlers to ``app``."""

    @app.errorhandler(ContentNotFound)
    def content_not_found(e):
        return _plain(NOT_FOUND_BODY, 404)

    @app.errorhandler(StoreError)
    def store_error(e):
        current_app.logger.error(f"request error: {request.method} {request.path}: {e}")
        return _plain(SERVER_ERROR_BODY, 500)

    @app.errorhandler(HTTPException)
    def http_error(e):
        if e.code == 404:
            return _plain(NOT_FOUND_BODY, 404)
        # Keeps headers such as Allow on 405
        return e

    @app.errorhandler(Exception)
    def unhandled_error(e):
        current_app.logger.exception(f"request error: {request.method} {request.path}: {e}")
        return _plain(SERVER_ERROR_BODY, 500)

    return app
