"""
HTTP client for the magazine JSON API.

Reads are cached per request key until a mutation invalidates them, so repeat
reads cost no round trip. A single-article 404 resolves to ``None``; any other
non-success status raises ``ClientError``.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

log = logging.getLogger(__name__)

UA = "magazine-client/1.0"


class ClientError(Exception):
    def __init__(self, status: int, message: str, field: Optional[str] = None):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message
        self.field = field


class ContentClient:
    def __init__(self, base_url: str = "", session=None, timeout: float = 15):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self._cache: Dict[tuple, Any] = {}

    # ---------- transport ----------

    def _request(self, method: str, path: str, **kwargs):
        headers = {"User-Agent": UA, "Accept": "application/json"}
        r = self.session.request(method, self.base_url + path, headers=headers,
                                 timeout=self.timeout, **kwargs)
        log.debug("%s %s -> %s", method, path, r.status_code)
        return r

    @staticmethod
    def _fail(r, fallback: str):
        message, field = fallback, None
        try:
            body = r.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            message, field = body["message"], body.get("field")
        raise ClientError(r.status_code, message, field)

    def _cached(self, key: tuple, fetch):
        if key not in self._cache:
            self._cache[key] = fetch()
        return self._cache[key]

    # ---------- invalidation ----------

    def _invalidate_lists(self):
        for key in [k for k in self._cache if k[0] == "articles"]:
            del self._cache[key]

    def _invalidate_article(self, article_id: int, *slugs: str):
        self._cache.pop(("article-id", article_id), None)
        for slug in slugs:
            self._cache.pop(("article", slug), None)
        for key, value in list(self._cache.items()):
            if key[0] == "article" and isinstance(value, dict) and value.get("id") == article_id:
                del self._cache[key]

    # ---------- reads ----------

    def list_articles(self, category: Optional[str] = None) -> List[dict]:
        def fetch():
            params = {"category": category} if category else None
            r = self._request("GET", "/api/articles", params=params)
            if not r.ok:
                self._fail(r, "Failed to fetch articles")
            return r.json()
        return self._cached(("articles", category), fetch)

    def get_article(self, slug: str) -> Optional[dict]:
        def fetch():
            r = self._request("GET", f"/api/articles/{slug}")
            if r.status_code == 404:
                return None
            if not r.ok:
                self._fail(r, "Failed to fetch article")
            return r.json()
        return self._cached(("article", slug), fetch)

    def get_article_by_id(self, article_id: int) -> Optional[dict]:
        def fetch():
            r = self._request("GET", f"/api/articles/by-id/{article_id}")
            if r.status_code == 404:
                return None
            if not r.ok:
                self._fail(r, "Failed to fetch article")
            return r.json()
        return self._cached(("article-id", article_id), fetch)

    def list_categories(self) -> List[dict]:
        def fetch():
            r = self._request("GET", "/api/categories")
            if not r.ok:
                self._fail(r, "Failed to fetch categories")
            return r.json()
        return self._cached(("categories",), fetch)

    def list_events(self) -> List[dict]:
        def fetch():
            r = self._request("GET", "/api/events")
            if not r.ok:
                self._fail(r, "Failed to fetch events")
            return r.json()
        return self._cached(("events",), fetch)

    # ---------- mutations ----------

    def create_article(self, data: Dict[str, Any]) -> dict:
        r = self._request("POST", "/api/articles", json=data)
        if r.status_code != 201:
            self._fail(r, "Failed to create article")
        created = r.json()
        self._invalidate_lists()
        self._invalidate_article(created["id"], created["slug"])
        return created

    def update_article(self, article_id: int, data: Dict[str, Any]) -> dict:
        r = self._request("PUT", f"/api/articles/{article_id}", json=data)
        if not r.ok:
            self._fail(r, "Failed to update article")
        updated = r.json()
        self._invalidate_lists()
        self._invalidate_article(article_id, updated["slug"])
        return updated

    def delete_article(self, article_id: int) -> None:
        r = self._request("DELETE", f"/api/articles/{article_id}")
        if r.status_code != 204:
            self._fail(r, "Failed to delete article")
        self._invalidate_lists()
        self._invalidate_article(article_id)
