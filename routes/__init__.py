"""
Routes Package - Blueprint Registration

The page blueprint is built per application from an injected controller;
error handlers are registered on the application itself.
"""

from .pages import PageController, create_pages_blueprint
from .errors import register_error_handlers

__all__ = ['PageController', 'create_pages_blueprint', 'register_error_handlers']
