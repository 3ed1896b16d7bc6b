"""
Page Routes Blueprint

Maps the site's URLs to a content query and a page template. The controller
receives its store and templates at construction, so tests can swap in an
in-memory store.
"""

from flask import Blueprint, Response, current_app, redirect, render_template

from models import PageData
from services.content_store import ContentStore
from services.page_templates import PageTemplates


class PageController:
    """Assembles page data from the content store and renders it."""

    def __init__(self, store: ContentStore, templates: PageTemplates):
        self.store = store
        self.templates = templates

    def index(self):
        """About page: intro paragraphs, skills and badges."""
        settings = self.store.get_settings()
        page = PageData(
            active_tab="about",
            settings=settings,
            about=tuple(self.store.list_about_paragraphs()),
            skills=tuple(self.store.list_skill_groups()),
            badges=tuple(self.store.list_trust_badges()),
        )
        return self.render("index", page)

    def blog(self):
        settings = self.store.get_settings()
        page = PageData(
            active_tab="blog",
            settings=settings,
            blog_posts=tuple(self.store.list_blog_posts()),
        )
        return self.render("blog", page)

    def research(self):
        settings = self.store.get_settings()
        page = PageData(
            active_tab="research",
            settings=settings,
            research_items=tuple(self.store.list_research_items()),
        )
        return self.render("research", page)

    def resume(self):
        settings = self.store.get_settings()
        page = PageData(
            active_tab="resume",
            settings=settings,
            experiences=tuple(self.store.list_experiences()),
            badges=tuple(self.store.list_trust_badges()),
            skills=tuple(self.store.list_skill_groups()),
        )
        return self.render("resume", page)

    def research_detail(self, slug: str):
        """
        Single research write-up.

        ResearchPageNotFound propagates to the app's 404 handler.
        """
        settings = self.store.get_settings()
        research_page = self.store.get_research_page(slug)
        current_app.logger.debug(f"Research page accessed: {slug}")
        page = PageData(
            active_tab="research",
            settings=settings,
            research_page=research_page,
        )
        return self.render("research_detail", page)

    def render(self, name: str, page: PageData) -> Response:
        """Render a page template as UTF-8 HTML."""
        html = render_template(self.templates[name], page=page)
        return Response(html, mimetype="text/html")


def redirect_to_research():
    """Trailing-slash research URL moved permanently."""
    return redirect("/research", code=301)


def create_pages_blueprint(controller: PageController) -> Blueprint:
    """
    Bind a controller's page handlers to their URLs.

    Each page answers on a clean path and its legacy ``.html`` path.
    """
    pages_bp = Blueprint('pages', __name__)

    routes = [
        ('index', controller.index, ('/', '/index.html')),
        ('blog', controller.blog, ('/blog', '/blog.html')),
        ('research', controller.research, ('/research', '/research.html')),
        ('resume', controller.resume, ('/resume', '/resume.html')),
    ]
    for endpoint, view, paths in routes:
        for path in paths:
            pages_bp.add_url_rule(path, endpoint, view, methods=['GET'])

    pages_bp.add_url_rule('/research/', 'research_slash', redirect_to_research, methods=['GET'])
    pages_bp.add_url_rule('/research-<slug>.html', 'research_detail', controller.research_detail, methods=['GET'])

    return pages_bp
