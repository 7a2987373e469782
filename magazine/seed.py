# magazine/seed.py
import logging

import click
from flask.cli import with_appcontext
from sqlalchemy import func, or_, select

from . import db
from .models import Article, Category, Event

log = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Technology", "slug": "technology"},
    {"name": "Design", "slug": "design"},
    {"name": "Culture", "slug": "culture"},
    {"name": "Travel", "slug": "travel"},
]

EVENTS = [
    {"title": "Tech Summit 2024", "date": "Oct 15, 2024", "location": "San Francisco, CA"},
    {"title": "Design Week", "date": "Nov 02, 2024", "location": "New York, NY"},
    {"title": "Writers Retreat", "date": "Dec 10, 2024", "location": "Portland, OR"},
]

# "category" is the index into CATEGORIES
ARTICLES = [
    {
        "title": "The Future of AI in Publishing",
        "slug": "future-of-ai-publishing",
        "description": "How artificial intelligence is reshaping the landscape of modern journalism and content creation.",
        "content": "Artificial intelligence is rapidly transforming the publishing industry...",
        "cover_image_url": "https://images.unsplash.com/photo-1677442136019-21780ecad995",
        "author_name": "Sarah Connor",
        "category": 0,
    },
    {
        "title": "Minimalism in Web Design",
        "slug": "minimalism-web-design",
        "description": "Why less is more when it comes to creating effective and accessible user interfaces.",
        "content": "Minimalism isn't just an aesthetic choice; it's a functional one...",
        "cover_image_url": "https://images.unsplash.com/photo-1507238691740-187a5b1d37b8",
        "author_name": "John Doe",
        "category": 1,
    },
    {
        "title": "Coffee Culture Around the World",
        "slug": "coffee-culture-world",
        "description": "Exploring how different cultures prepare and enjoy their daily brew.",
        "content": "From Italian espresso to Turkish coffee, the world loves its caffeine...",
        "cover_image_url": "https://images.unsplash.com/photo-1495474472287-4d71bcdd2085",
        "author_name": "Emily Chen",
        "category": 2,
    },
    {
        "title": "Hidden Gems of Kyoto",
        "slug": "hidden-gems-kyoto",
        "description": "Off the beaten path locations in Japan's ancient capital.",
        "content": "Beyond the Golden Pavilion lies a world of quiet temples and tea houses...",
        "cover_image_url": "https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e",
        "author_name": "Michael Smith",
        "category": 3,
    },
]


def seed_database() -> bool:
    """Insert the starter categories, events and articles into an empty store.

    Guarded by an emptiness check on ``categories`` so repeated runs are no-ops.
    Returns True when rows were inserted.
    """
    existing = db.session.scalar(select(func.count()).select_from(Category))
    if existing:
        log.debug("seed skipped: %s categories present", existing)
        return False

    log.info("Seeding database...")
    cats = [Category(**c) for c in CATEGORIES]
    db.session.add_all(cats)
    db.session.add_all(Event(**e) for e in EVENTS)
    for a in ARTICLES:
        fields = {k: v for k, v in a.items() if k != "category"}
        db.session.add(Article(category=cats[a["category"]], **fields))
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    log.info("Database seeded successfully.")
    return True


@click.command("seed")
@with_appcontext
def seed_command():
    """Seed an empty database with starter content."""
    if seed_database():
        click.echo("[ok] seeded categories, events and articles")
    else:
        click.echo("[info] categories already present, nothing to do")


@click.command("check-articles")
@with_appcontext
def check_articles_command():
    """Report article totals and articles with empty content."""
    total = db.session.scalar(select(func.count()).select_from(Article))
    empty = db.session.scalars(
        select(Article).where(or_(Article.content.is_(None), Article.content == ""))
    ).all()
    click.echo(f"Total: {total}")
    click.echo(f"Empty content: {len(empty)}")
    for a in empty:
        click.echo(f"- {a.slug} | {(a.title or '')[:80]}")
