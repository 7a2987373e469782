# magazine/storage.py
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import contains_eager

from .errors import ArticleNotFound
from .models import Article, Category, Event

log = logging.getLogger(__name__)


class Storage(ABC):
    """Data access used by the API handlers and the HTML views."""

    @abstractmethod
    def list_articles(self, category_slug: Optional[str] = None) -> List[Article]:
        ...

    @abstractmethod
    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        ...

    @abstractmethod
    def get_article_by_id(self, article_id: int) -> Optional[Article]:
        ...

    @abstractmethod
    def create_article(self, fields: Dict[str, Any]) -> Article:
        ...

    @abstractmethod
    def update_article(self, article_id: int, fields: Dict[str, Any]) -> Article:
        ...

    @abstractmethod
    def delete_article(self, article_id: int) -> None:
        ...

    @abstractmethod
    def list_categories(self) -> List[Category]:
        ...

    @abstractmethod
    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        ...

    @abstractmethod
    def list_events(self) -> List[Event]:
        ...


class DatabaseStorage(Storage):
    """SQLAlchemy implementation; every call is one round trip on ``db.session``."""

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def _articles_with_category(self):
        # inner join: an article whose category row is missing is never returned
        return (
            select(Article)
            .join(Article.category)
            .options(contains_eager(Article.category))
        )

    def list_articles(self, category_slug=None):
        stmt = self._articles_with_category().order_by(
            Article.created_at.desc(), Article.id.desc()
        )
        if category_slug:
            stmt = stmt.where(Category.slug == category_slug)
        return list(self.session.scalars(stmt))

    def get_article_by_slug(self, slug):
        stmt = self._articles_with_category().where(Article.slug == slug)
        return self.session.scalars(stmt).first()

    def get_article_by_id(self, article_id):
        return self.session.get(Article, article_id)

    def create_article(self, fields):
        article = Article(**fields)
        self.session.add(article)
        self._commit()
        log.info("created article id=%s slug=%s", article.id, article.slug)
        return article

    def update_article(self, article_id, fields):
        article = self.session.get(Article, article_id)
        if article is None:
            raise ArticleNotFound()
        for attr, value in fields.items():
            setattr(article, attr, value)
        self._commit()
        log.info("updated article id=%s fields=%s", article_id, sorted(fields))
        return article

    def delete_article(self, article_id):
        article = self.session.get(Article, article_id)
        if article is None:
            return
        self.session.delete(article)
        self._commit()
        log.info("deleted article id=%s", article_id)

    def list_categories(self):
        return list(self.session.scalars(select(Category).order_by(Category.id)))

    def get_category_by_slug(self, slug):
        return self.session.scalars(select(Category).where(Category.slug == slug)).first()

    def list_events(self):
        return list(self.session.scalars(select(Event).order_by(Event.id)))

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
