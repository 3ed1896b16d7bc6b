"""
Pytest Configuration and Fixtures

Provides shared fixtures for testing the Flask application using the
application factory pattern with clean, isolated test instances.
"""

import pytest
import os
from datetime import date


class InMemoryContentStore:
    """ContentStore double holding records in plain Python containers."""

    def __init__(self, settings=None, about=(), skills=(), badges=(), blog_posts=(),
                 research_items=(), research_pages=(), experiences=()):
        from models import Settings
        self.settings = settings or Settings(site_name='Test Site', owner_name='Test Owner', tagline='Testing')
        self.about = list(about)
        self.skills = list(skills)
        self.badges = list(badges)
        self.blog_posts = list(blog_posts)
        self.research_items = list(research_items)
        self.research_pages = {page.slug: page for page in research_pages}
        self.experiences = list(experiences)
        self.schema_ready = False
        self.calls = []

    def _record(self, name):
        self.calls.append(name)

    def ensure_schema(self, timeout=10):
        self.schema_ready = True

    def seed_if_empty(self):
        return False

    def content_counts(self):
        return {
            'site_settings': 1,
            'about_paragraphs': len(self.about),
            'blog_posts': len(self.blog_posts),
        }

    def get_settings(self):
        self._record('get_settings')
        return self.settings

    def list_about_paragraphs(self):
        self._record('list_about_paragraphs')
        return list(self.about)

    def list_skill_groups(self):
        self._record('list_skill_groups')
        return list(self.skills)

    def list_trust_badges(self):
        self._record('list_trust_badges')
        return list(self.badges)

    def list_blog_posts(self):
        self._record('list_blog_posts')
        return list(self.blog_posts)

    def list_research_items(self):
        self._record('list_research_items')
        return list(self.research_items)

    def get_research_page(self, slug):
        from services import ResearchPageNotFound
        self._record('get_research_page')
        try:
            return self.research_pages[slug]
        except KeyError:
            raise ResearchPageNotFound(slug) from None

    def list_experiences(self):
        self._record('list_experiences')
        return list(self.experiences)


class FailingContentStore(InMemoryContentStore):
    """Raises StoreError from the named read methods while ``failing`` is set."""

    def __init__(self, fail_on=('get_settings',), **kwargs):
        super().__init__(**kwargs)
        self.fail_on = set(fail_on)
        self.failing = True

    def _record(self, name):
        from services import StoreError
        super()._record(name)
        if self.failing and name in self.fail_on:
            raise StoreError(f"{name}: connection refused")


@pytest.fixture(scope='session')
def test_config():
    """Test configuration class."""
    from config import TestingConfig
    return TestingConfig


@pytest.fixture
def app(test_config):
    """
    Create and configure a Flask application instance for testing.

    Uses the application factory pattern against a fresh in-memory SQLite
    database, which create_app migrates and seeds.
    """
    os.environ['FLASK_ENV'] = 'testing'

    from app import create_app
    app = create_app(test_config)

    # Push application context
    ctx = app.app_context()
    ctx.push()

    yield app

    # Clean up
    ctx.pop()


@pytest.fixture
def client(app):
    """
    Flask test client for making HTTP requests.

    Provides a test client that can make requests to the application
    without running a live server.
    """
    return app.test_client()


@pytest.fixture
def runner(app):
    """
    Flask CLI test runner.

    Provides a runner for testing CLI commands.
    """
    return app.test_cli_runner()


@pytest.fixture
def store(app):
    """The SQL-backed content store wired into the app."""
    return app.extensions['content_store']


@pytest.fixture
def sample_content():
    """Small, hand-written set of records for the in-memory store."""
    from models import (
        Settings, SkillGroup, TrustBadge, BlogPost, ResearchItem, ResearchPage, Experience
    )

    return dict(
        settings=Settings(site_name='Jane Doe', owner_name='Jane Doe', tagline='Researcher',
                          email='jane@example.com'),
        about=['I study <em>robust</em> learning.'],
        skills=[SkillGroup(name='Languages', skills=('Python', 'Go'))],
        badges=[TrustBadge(label='Best Paper', issuer='Workshop', year='2022')],
        blog_posts=[BlogPost(id=1, slug='hello', title='Hello World', published_on=date(2024, 1, 15),
                             summary='First post.')],
        research_items=[ResearchItem(slug='robust-ml', title='Robust ML', venue='ICML', year='2023',
                                     summary='Robustness study.', tags=('robustness',))],
        research_pages=[ResearchPage(slug='robust-ml', title='Robust ML', subtitle='A study',
                                     authors=('Jane Doe', 'John Roe'), abstract='We study robustness.',
                                     body_html='<p>Detailed findings.</p>')],
        experiences=[Experience(role='Engineer', organization='Acme', start_label='Jan 2020')],
    )


@pytest.fixture
def memory_store(sample_content):
    """In-memory ContentStore double populated with sample content."""
    return InMemoryContentStore(**sample_content)


@pytest.fixture
def memory_app(test_config, memory_store):
    """Application serving from the in-memory store double."""
    from app import create_app
    return create_app(test_config, store=memory_store)


@pytest.fixture
def memory_client(memory_app):
    return memory_app.test_client()


@pytest.fixture
def failing_store(sample_content):
    """Store double whose settings read fails until ``failing`` is cleared."""
    return FailingContentStore(**sample_content)


@pytest.fixture
def failing_client(test_config, failing_store):
    from app import create_app
    return create_app(test_config, store=failing_store).test_client()


@pytest.fixture
def store_factory():
    """Build in-memory store doubles with custom content."""
    return InMemoryContentStore


@pytest.fixture
def failing_store_factory():
    """Build store doubles that fail on chosen read methods."""
    return FailingContentStore
