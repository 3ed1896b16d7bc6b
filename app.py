"""
Portfolio site - about, blog, research and resume pages served from PostgreSQL
"""
import sys

import click
from flask import Flask, request, send_file
from jinja2 import TemplateError
from sqlalchemy.exc import SQLAlchemyError

from config import get_config
from extensions import db
from routes import PageController, create_pages_blueprint, register_error_handlers
from services import PageTemplates, SQLContentStore, StoreError
from utils.logger import setup_logger
from utils.template_helpers import register_template_helpers


class BootstrapError(Exception):
    """A startup step failed; the server must not start."""

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"{step}: {cause}")
        self.step = step
        self.cause = cause


def _bootstrap_step(app, step, func, *args):
    """Run one startup step, converting its failure into a BootstrapError."""
    try:
        return func(*args)
    except (StoreError, SQLAlchemyError, TemplateError, ImportError) as e:
        app.logger.critical(f"{step}: {e}")
        raise BootstrapError(step, e) from e


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "img-src 'self' data: https:; "
        "style-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def create_app(config_class=None, store=None):
    """
    Build the application: open the store, prepare it, load templates, wire routes.

    Args:
        config_class: Config class to load, defaults to the one named by FLASK_ENV
        store: ContentStore to serve from, defaults to the SQL-backed store

    Raises:
        BootstrapError: if the store cannot be opened, migrated or seeded, or a
            template fails to load
    """
    if config_class is None:
        config_class = get_config()

    app = Flask(
        __name__,
        static_folder=str(config_class.ASSETS_DIR),
        static_url_path='/assets',
        template_folder=str(config_class.TEMPLATES_DIR),
    )
    app.config.from_object(config_class)

    setup_logger(app)
    register_template_helpers(app)
    app.after_request(set_security_headers)

    _bootstrap_step(app, 'db open', db.init_app, app)
    if store is None:
        store = SQLContentStore()
    app.extensions['content_store'] = store

    with app.app_context():
        _bootstrap_step(app, 'db schema', store.ensure_schema, app.config['SCHEMA_TIMEOUT_SECONDS'])
        _bootstrap_step(app, 'db seed', store.seed_if_empty)
    templates = _bootstrap_step(app, 'templates', PageTemplates.load, app.jinja_env)

    controller = PageController(store, templates)
    app.register_blueprint(create_pages_blueprint(controller))
    register_error_handlers(app)

    @app.route('/styles.css')
    def stylesheet():
        return send_file(app.config['STYLESHEET'], mimetype='text/css')

    @app.cli.command('init-db')
    def init_db_command():
        """Create missing tables, seed an empty database and print row counts."""
        store.ensure_schema(app.config['SCHEMA_TIMEOUT_SECONDS'])
        seeded = store.seed_if_empty()
        click.echo("Seeded default content." if seeded else "Database already has content.")
        for table, count in store.content_counts().items():
            click.echo(f"{table}: {count}")

    app.logger.info(f"Application ready - pages: {', '.join(templates.names)}")
    return app


def main():
    try:
        app = create_app()
    except BootstrapError:
        sys.exit(1)

    host = app.config['HOST']
    port = app.config['PORT']
    app.logger.info(f"listening on {host}:{port}")
    app.run(host=host, port=port, debug=app.config.get('DEBUG', False), use_reloader=False)


if __name__ == "__main__":
    main()
