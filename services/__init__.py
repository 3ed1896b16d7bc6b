"""
Services Package - Content Access Layer

This package contains the content store and the page template set,
keeping route handlers thin and focused on HTTP concerns.
"""

from .content_store import (
    ContentStore,
    SQLContentStore,
    StoreError,
    ContentNotFound,
    ResearchPageNotFound,
)
from .page_templates import PageTemplates, PAGE_NAMES

__all__ = [
    'ContentStore',
    'SQLContentStore',
    'StoreError',
    'ContentNotFound',
    'ResearchPageNotFound',
    'PageTemplates',
    'PAGE_NAMES',
]
