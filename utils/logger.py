"""
Logging Setup

Provides centralized logging configuration for the Flask application
with structured output and request tracking.
"""

import logging
import sys
from flask import request, has_request_context


def setup_logger(app):
    """
    Configure logging for the Flask application.

    Sets up:
    - Structured log format with timestamps
    - Console output to stdout
    - Request logging (method and path) for every incoming HTTP request
    - Log level from LOG_LEVEL, otherwise based on debug mode

    Args:
        app: Flask application instance
    """
    # Create console handler
    handler = logging.StreamHandler(sys.stdout)

    # Create formatter with detailed structure
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    # Configure app logger
    app.logger.handlers = [handler]

    level_name = app.config.get('LOG_LEVEL')
    if level_name:
        app.logger.setLevel(level_name.upper())
    elif app.debug:
        app.logger.setLevel(logging.DEBUG)
    else:
        app.logger.setLevel(logging.INFO)

    # Prevent duplicate logs from propagating
    app.logger.propagate = False

    @app.before_request
    def log_request_info():
        """Log incoming request method and path."""
        if has_request_context():
            app.logger.info(f"{request.method} {request.path}")

    @app.after_request
    def log_response_info(response):
        """Log response status."""
        if has_request_context():
            app.logger.debug(
                f"Response: {response.status_code} for "
                f"{request.method} {request.path}"
            )
        return response

    # Log startup
    app.logger.info(f"Logging configured - Level: {logging.getLevelName(app.logger.level)}")

    return app
