"""
Read-only content records handed to the page templates.

These are detached from the database session so a request never touches
lazy-loaded ORM state while rendering.
"""
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class Settings:
    """Site-wide settings singleton."""
    site_name: str
    owner_name: str
    tagline: str = ''
    email: str = ''
    location: str = ''
    github_url: str = ''
    linkedin_url: str = ''
    scholar_url: str = ''
    footer_note: str = ''


@dataclass(frozen=True)
class SkillGroup:
    """Named group of skills in display order."""
    name: str
    skills: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TrustBadge:
    label: str
    issuer: str = ''
    year: str = ''
    url: str = ''


@dataclass(frozen=True)
class BlogPost:
    """Represents a blog post."""
    id: int
    slug: str
    title: str
    published_on: date
    summary: str = ''
    body_html: str = ''
    url: str = ''

    @property
    def reading_time(self) -> int:
        """Estimated reading time in minutes (minimum 1)."""
        words = len(f"{self.summary} {self.body_html}".split())
        return max(1, round(words / 200))


@dataclass(frozen=True)
class ResearchItem:
    """Summary card on the research index."""
    slug: str
    title: str
    venue: str = ''
    year: str = ''
    summary: str = ''
    tags: Tuple[str, ...] = ()

    @property
    def detail_url(self) -> str:
        return f"/research-{self.slug}.html"


@dataclass(frozen=True)
class ResearchPage:
    """Full research write-up looked up by slug."""
    slug: str
    title: str
    subtitle: str = ''
    venue: str = ''
    year: str = ''
    authors: Tuple[str, ...] = ()
    abstract: str = ''
    body_html: str = ''
    paper_url: str = ''
    code_url: str = ''


@dataclass(frozen=True)
class Experience:
    """One resume entry."""
    role: str
    organization: str
    start_label: str
    end_label: str = ''
    location: str = ''
    description_html: str = ''

    @property
    def period(self) -> str:
        """Return 'start – end', with an empty end shown as Present."""
        return f"{self.start_label} – {self.end_label or 'Present'}"


@dataclass
class PageData:
    """
    Everything a page template can read.

    Only the fields relevant to the current page are populated; the rest keep
    their empty defaults so templates can share one layout.
    """
    active_tab: str
    settings: Settings
    about: Tuple[str, ...] = ()
    skills: Tuple[SkillGroup, ...] = ()
    badges: Tuple[TrustBadge, ...] = ()
    blog_posts: Tuple[BlogPost, ...] = ()
    research_items: Tuple[ResearchItem, ...] = ()
    research_page: Optional[ResearchPage] = None
    experiences: Tuple[Experience, ...] = ()


def split_list(value: str, sep: str = ',') -> Tuple[str, ...]:
    """Split a delimited column into a tuple of trimmed, non-empty parts."""
    return tuple(part.strip() for part in (value or '').split(sep) if part.strip())
