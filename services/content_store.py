"""
Content Store - Read access to the portfolio content tables

Owns schema creation and first-boot seeding, and exposes one read method per
content type. Every read returns immutable records from ``models.records`` in
display order, so templates never see live ORM objects.
"""

import threading
from functools import wraps
from typing import Dict, List, Protocol

from flask import current_app
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from extensions import db
from models import content as tables
from models import records
from models.records import split_list
from services import seed_content


class StoreError(Exception):
    """The database could not answer a query."""


class ContentNotFound(LookupError):
    """A lookup matched no row."""


class ResearchPageNotFound(ContentNotFound):
    """No research page exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"research page not found: {slug!r}")
        self.slug = slug


class ContentStore(Protocol):
    """Read operations the page controller depends on."""

    def ensure_schema(self, timeout: float = 10) -> None: ...

    def seed_if_empty(self) -> bool: ...

    def content_counts(self) -> Dict[str, int]: ...

    def get_settings(self) -> records.Settings: ...

    def list_about_paragraphs(self) -> List[str]: ...

    def list_skill_groups(self) -> List[records.SkillGroup]: ...

    def list_trust_badges(self) -> List[records.TrustBadge]: ...

    def list_blog_posts(self) -> List[records.BlogPost]: ...

    def list_research_items(self) -> List[records.ResearchItem]: ...

    def get_research_page(self, slug: str) -> records.ResearchPage: ...

    def list_experiences(self) -> List[records.Experience]: ...


def _translate_db_errors(method):
    """Roll back and re-raise SQLAlchemy failures as StoreError."""
    @wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StoreError(f"{method.__name__} failed: {e}") from e
    return wrapper


class SQLContentStore:
    """ContentStore backed by Flask-SQLAlchemy. Must be used inside an app context."""

    @staticmethod
    def _ordered(model):
        """Select a positioned table in display order."""
        return db.select(model).order_by(model.position, model.id)

    def ensure_schema(self, timeout: float = 10) -> None:
        """
        Create any missing tables, giving up after ``timeout`` seconds.

        ``create_all`` skips existing tables, so this runs on every boot. The
        work runs on a daemon thread so a hung connect cannot keep the process
        alive once startup has been aborted.

        Raises:
            StoreError: if the backend fails or does not answer in time
        """
        app = current_app._get_current_object()
        failure = []

        def create_tables():
            try:
                with app.app_context():
                    db.create_all()
            except SQLAlchemyError as e:
                failure.append(e)

        worker = threading.Thread(target=create_tables, name='ensure-schema', daemon=True)
        worker.start()
        worker.join(timeout)

        if worker.is_alive():
            raise StoreError(f"schema setup did not finish within {timeout}s")
        if failure:
            raise StoreError(f"schema setup failed: {failure[0]}") from failure[0]

        current_app.logger.info(f"Schema ready ({len(tables.CONTENT_TABLES)} content tables)")

    @_translate_db_errors
    def content_counts(self) -> Dict[str, int]:
        """Row count per content table, keyed by table name."""
        return {
            model.__tablename__: db.session.scalar(db.select(func.count()).select_from(model))
            for model in tables.CONTENT_TABLES
        }

    @_translate_db_errors
    def seed_if_empty(self) -> bool:
        """
        Insert the default content when every content table is empty.

        A database that already holds content is left alone, apart from
        restoring the settings row if it has been removed.

        Returns:
            True if the default content was inserted
        """
        counts = self.content_counts()
        if any(counts.values()):
            if not counts[tables.SiteSettings.__tablename__]:
                db.session.add(tables.SiteSettings(**seed_content.SETTINGS))
                db.session.commit()
                current_app.logger.warning("Settings row was missing, restored defaults")
            return False

        db.session.add(tables.SiteSettings(**seed_content.SETTINGS))

        for position, body in enumerate(seed_content.ABOUT_PARAGRAPHS):
            db.session.add(tables.AboutParagraph(position=position, body_html=body))

        for position, group in enumerate(seed_content.SKILL_GROUPS):
            db.session.add(tables.SkillGroup(
                position=position,
                name=group["name"],
                skills=[tables.Skill(position=i, name=name) for i, name in enumerate(group["skills"])],
            ))

        for position, badge in enumerate(seed_content.TRUST_BADGES):
            db.session.add(tables.TrustBadge(position=position, **badge))

        for post in seed_content.BLOG_POSTS:
            db.session.add(tables.BlogPost(**post))

        for position, item in enumerate(seed_content.RESEARCH_ITEMS):
            db.session.add(tables.ResearchItem(position=position, **item))

        for page in seed_content.RESEARCH_PAGES:
            db.session.add(tables.ResearchPage(**page))

        for position, experience in enumerate(seed_content.EXPERIENCES):
            db.session.add(tables.Experience(position=position, **experience))

        db.session.commit()
        current_app.logger.info("Seeded default content into empty database")
        return True

    @_translate_db_errors
    def get_settings(self) -> records.Settings:
        """
        Fetch the settings singleton.

        Raises:
            StoreError: if the row is missing
        """
        row = db.session.scalars(db.select(tables.SiteSettings).order_by(tables.SiteSettings.id).limit(1)).first()
        if row is None:
            raise StoreError("site settings row is missing")
        return records.Settings(
            site_name=row.site_name,
            owner_name=row.owner_name,
            tagline=row.tagline,
            email=row.email,
            location=row.location,
            github_url=row.github_url,
            linkedin_url=row.linkedin_url,
            scholar_url=row.scholar_url,
            footer_note=row.footer_note,
        )

    @_translate_db_errors
    def list_about_paragraphs(self) -> List[str]:
        rows = db.session.scalars(self._ordered(tables.AboutParagraph))
        return [row.body_html for row in rows]

    @_translate_db_errors
    def list_skill_groups(self) -> List[records.SkillGroup]:
        stmt = self._ordered(tables.SkillGroup).options(selectinload(tables.SkillGroup.skills))
        groups = []
        for row in db.session.scalars(stmt):
            skills = sorted(row.skills, key=lambda s: (s.position, s.id))
            groups.append(records.SkillGroup(name=row.name, skills=tuple(s.name for s in skills)))
        return groups

    @_translate_db_errors
    def list_trust_badges(self) -> List[records.TrustBadge]:
        return [
            records.TrustBadge(label=row.label, issuer=row.issuer, year=row.year, url=row.url)
            for row in db.session.scalars(self._ordered(tables.TrustBadge))
        ]

    @_translate_db_errors
    def list_blog_posts(self) -> List[records.BlogPost]:
        """Blog posts, newest first."""
        stmt = db.select(tables.BlogPost).order_by(tables.BlogPost.published_on.desc(), tables.BlogPost.id)
        return [
            records.BlogPost(
                id=row.id,
                slug=row.slug,
                title=row.title,
                published_on=row.published_on,
                summary=row.summary,
                body_html=row.body_html,
                url=row.url,
            )
            for row in db.session.scalars(stmt)
        ]

    @_translate_db_errors
    def list_research_items(self) -> List[records.ResearchItem]:
        return [
            records.ResearchItem(
                slug=row.slug,
                title=row.title,
                venue=row.venue,
                year=row.year,
                summary=row.summary,
                tags=split_list(row.tags),
            )
            for row in db.session.scalars(self._ordered(tables.ResearchItem))
        ]

    @_translate_db_errors
    def get_research_page(self, slug: str) -> records.ResearchPage:
        """
        Look up one research page by its slug.

        Args:
            slug: Identifier taken from the /research-<slug>.html path

        Raises:
            ResearchPageNotFound: if the slug is empty or matches no row
        """
        if not slug:
            raise ResearchPageNotFound(slug)

        row = db.session.scalars(db.select(tables.ResearchPage).filter_by(slug=slug)).first()
        if row is None:
            raise ResearchPageNotFound(slug)

        return records.ResearchPage(
            slug=row.slug,
            title=row.title,
            subtitle=row.subtitle,
            venue=row.venue,
            year=row.year,
            authors=split_list(row.authors),
            abstract=row.abstract,
            body_html=row.body_html,
            paper_url=row.paper_url,
            code_url=row.code_url,
        )

    @_translate_db_errors
    def list_experiences(self) -> List[records.Experience]:
        return [
            records.Experience(
                role=row.role,
                organization=row.organization,
                start_label=row.start_label,
                end_label=row.end_label,
                location=row.location,
                description_html=row.description_html,
            )
            for row in db.session.scalars(self._ordered(tables.Experience))
        ]
