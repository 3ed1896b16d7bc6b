"""
Portfolio content tables.

Database schema for the site's read-only content with SQLAlchemy ORM.
Tables: site_settings, about_paragraphs, skill_groups, skills, trust_badges,
blog_posts, research_items, research_pages, experiences
"""
from extensions import db
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship


class SiteSettings(db.Model):
    """Singleton row of site-wide settings."""
    __tablename__ = 'site_settings'

    id = Column(Integer, primary_key=True)
    site_name = Column(String(200), nullable=False)
    owner_name = Column(String(200), nullable=False)
    tagline = Column(String(300), nullable=False, default='')
    email = Column(String(200), nullable=False, default='')
    location = Column(String(200), nullable=False, default='')
    github_url = Column(String(300), nullable=False, default='')
    linkedin_url = Column(String(300), nullable=False, default='')
    scholar_url = Column(String(300), nullable=False, default='')
    footer_note = Column(String(300), nullable=False, default='')

    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<SiteSettings {self.site_name}>'


class AboutParagraph(db.Model):
    """One block of the about section, stored as trusted HTML."""
    __tablename__ = 'about_paragraphs'

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    body_html = Column(Text, nullable=False)

    def __repr__(self):
        return f'<AboutParagraph {self.position}>'


class SkillGroup(db.Model):
    """Named group of skills (e.g. Languages, Tooling)."""
    __tablename__ = 'skill_groups'

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(100), nullable=False)

    # Relationships
    skills = relationship(
        'Skill',
        back_populates='group',
        cascade='all, delete-orphan',
        order_by='Skill.position',
    )

    def __repr__(self):
        return f'<SkillGroup {self.name}>'


class Skill(db.Model):
    """Single skill entry inside a group."""
    __tablename__ = 'skills'

    id = Column(Integer, primary_key=True)
    group_id = Column(Integer, ForeignKey('skill_groups.id'), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    name = Column(String(100), nullable=False)

    group = relationship('SkillGroup', back_populates='skills')

    def __repr__(self):
        return f'<Skill {self.name}>'


class TrustBadge(db.Model):
    """Credential or achievement shown as a small badge."""
    __tablename__ = 'trust_badges'

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    label = Column(String(200), nullable=False)
    issuer = Column(String(200), nullable=False, default='')
    year = Column(String(10), nullable=False, default='')
    url = Column(String(300), nullable=False, default='')

    def __repr__(self):
        return f'<TrustBadge {self.label}>'


class BlogPost(db.Model):
    """Blog post with summary and body."""
    __tablename__ = 'blog_posts'

    id = Column(Integer, primary_key=True)
    slug = Column(String(200), unique=True, nullable=False)
    title = Column(String(300), nullable=False)
    published_on = Column(Date, nullable=False, index=True)
    summary = Column(Text, nullable=False, default='')
    body_html = Column(Text, nullable=False, default='')
    url = Column(String(300), nullable=False, default='')  # Optional external link

    def __repr__(self):
        return f'<BlogPost {self.slug} - {self.published_on}>'


class ResearchItem(db.Model):
    """Summary card listed on the research index."""
    __tablename__ = 'research_items'

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    slug = Column(String(200), nullable=False, index=True)
    title = Column(String(300), nullable=False)
    venue = Column(String(200), nullable=False, default='')
    year = Column(String(10), nullable=False, default='')
    summary = Column(Text, nullable=False, default='')
    tags = Column(String(300), nullable=False, default='')  # Comma separated

    def __repr__(self):
        return f'<ResearchItem {self.slug}>'


class ResearchPage(db.Model):
    """Full detail page for one research item, addressed by slug."""
    __tablename__ = 'research_pages'

    id = Column(Integer, primary_key=True)
    slug = Column(String(200), unique=True, nullable=False)
    title = Column(String(300), nullable=False)
    subtitle = Column(String(300), nullable=False, default='')
    venue = Column(String(200), nullable=False, default='')
    year = Column(String(10), nullable=False, default='')
    authors = Column(String(500), nullable=False, default='')
    abstract = Column(Text, nullable=False, default='')
    body_html = Column(Text, nullable=False, default='')
    paper_url = Column(String(300), nullable=False, default='')
    code_url = Column(String(300), nullable=False, default='')

    def __repr__(self):
        return f'<ResearchPage {self.slug}>'


class Experience(db.Model):
    """One resume entry."""
    __tablename__ = 'experiences'

    id = Column(Integer, primary_key=True)
    position = Column(Integer, nullable=False, default=0)
    role = Column(String(200), nullable=False)
    organization = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False, default='')
    start_label = Column(String(50), nullable=False)  # e.g. 'Sep 2021'
    end_label = Column(String(50), nullable=False, default='')  # Empty means current
    description_html = Column(Text, nullable=False, default='')

    def __repr__(self):
        return f'<Experience {self.role} @ {self.organization}>'


CONTENT_TABLES = (
    SiteSettings,
    AboutParagraph,
    SkillGroup,
    Skill,
    TrustBadge,
    BlogPost,
    ResearchItem,
    ResearchPage,
    Experience,
)
