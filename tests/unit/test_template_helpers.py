"""
Unit Tests for Template Helpers and the Page Template Set
"""

from datetime import date

import pytest
from jinja2 import DictLoader, Environment, TemplateNotFound, TemplateSyntaxError
from markupsafe import Markup

from services.page_templates import PAGE_NAMES, PageTemplates
from utils.template_helpers import active_class, format_date, safe_html


def page_sources(**overrides):
    sources = {'base.html': '<nav>{% block content %}{% endblock %}</nav>'}
    for name in PAGE_NAMES:
        sources[f'{name}.html'] = '{% extends "base.html" %}{% block content %}' + name + '{% endblock %}'
    sources.update(overrides)
    return sources


class TestSafeHtml:

    def test_returns_markup(self):
        """Test: Marked strings are not escaped by Jinja."""
        assert isinstance(safe_html('<b>x</b>'), Markup)
        env = Environment(autoescape=True)
        env.filters['safe_html'] = safe_html
        assert env.from_string('{{ v|safe_html }}').render(v='<b>x</b>') == '<b>x</b>'

    def test_none_becomes_empty(self):
        assert safe_html(None) == ''


class TestActiveClass:

    def test_matching_tab(self):
        assert active_class('blog', 'blog') == 'active'

    def test_other_tab(self):
        assert active_class('blog', 'resume') == ''


class TestFormatDate:

    def test_date_object(self):
        assert format_date(date(2024, 3, 10)) == 'March 10, 2024'

    def test_iso_string(self):
        assert format_date('2024-01-15') == 'January 15, 2024'


class TestPageTemplates:
    """Test loading the fixed template set."""

    def test_loads_every_page(self):
        templates = PageTemplates.load(Environment(loader=DictLoader(page_sources())))
        assert templates.names == PAGE_NAMES
        assert 'research_detail' in templates.names
        assert templates['blog'].render() == '<nav>blog</nav>'

    def test_syntax_error_fails_load(self):
        """Test: A broken template aborts loading."""
        env = Environment(loader=DictLoader(page_sources(**{'resume.html': '{% if %}'})))
        with pytest.raises(TemplateSyntaxError):
            PageTemplates.load(env)

    def test_missing_template_fails_load(self):
        sources = page_sources()
        del sources['research_detail.html']
        with pytest.raises(TemplateNotFound):
            PageTemplates.load(Environment(loader=DictLoader(sources)))

    def test_missing_layout_fails_load(self):
        sources = page_sources()
        del sources['base.html']
        with pytest.raises(TemplateNotFound):
            PageTemplates.load(Environment(loader=DictLoader(sources)))

    def test_unknown_page_raises_key_error(self):
        templates = PageTemplates.load(Environment(loader=DictLoader(page_sources())))
        with pytest.raises(KeyError):
            templates['projects']
