"""
Models package for the portfolio site.

Provides the immutable content records rendered by the page templates.
The database tables live in ``models.content``.
"""
from .records import (
    Settings,
    SkillGroup,
    TrustBadge,
    BlogPost,
    ResearchItem,
    ResearchPage,
    Experience,
    PageData,
)

__all__ = [
    'Settings',
    'SkillGroup',
    'TrustBadge',
    'BlogPost',
    'ResearchItem',
    'ResearchPage',
    'Experience',
    'PageData',
]
