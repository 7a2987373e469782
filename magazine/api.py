# magazine/api.py
import logging

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import HTTPException

from . import db
from .errors import ArticleNotFound, MagazineError, ValidationFailed
from .schema import Invalid, validate_article
from .storage import Storage

log = logging.getLogger(__name__)


def _validated(partial: bool) -> dict:
    result = validate_article(request.get_json(silent=True), partial=partial)
    if isinstance(result, Invalid):
        raise ValidationFailed(result.message, result.field)
    return result.data


def create_api_blueprint(storage: Storage) -> Blueprint:
    api_bp = Blueprint("api", __name__, url_prefix="/api")

    @api_bp.get("/articles")
    def list_articles():
        category = (request.args.get("category") or "").strip() or None
        items = storage.list_articles(category)
        return jsonify([a.to_dict(with_category=True) for a in items])

    @api_bp.get("/articles/<slug>")
    def get_article(slug):
        a = storage.get_article_by_slug(slug)
        if a is None:
            log.debug("no article with slug %r", slug)
            raise ArticleNotFound()
        return jsonify(a.to_dict(with_category=True))

    @api_bp.get("/articles/by-id/<int:article_id>")
    def get_article_by_id(article_id):
        a = storage.get_article_by_id(article_id)
        if a is None:
            raise ArticleNotFound()
        return jsonify(a.to_dict(with_category=True))

    @api_bp.post("/articles")
    def create_article():
        a = storage.create_article(_validated(partial=False))
        return jsonify(a.to_dict()), 201

    @api_bp.put("/articles/<int:article_id>")
    def update_article(article_id):
        fields = _validated(partial=True)
        a = storage.update_article(article_id, fields)
        return jsonify(a.to_dict())

    @api_bp.delete("/articles/<int:article_id>")
    def delete_article(article_id):
        if storage.get_article_by_id(article_id) is None:
            raise ArticleNotFound()
        storage.delete_article(article_id)
        return "", 204

    @api_bp.get("/categories")
    def list_categories():
        return jsonify([c.to_dict() for c in storage.list_categories()])

    @api_bp.get("/events")
    def list_events():
        return jsonify([e.to_dict() for e in storage.list_events()])

    @api_bp.errorhandler(MagazineError)
    def handle_magazine_error(e):
        return jsonify(e.to_dict()), e.status_code

    @api_bp.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify(message=e.description), e.code

    @api_bp.errorhandler(Exception)
    def handle_unexpected(e):
        log.exception("unhandled error on %s %s", request.method, request.path)
        try:
            db.session.rollback()
        except Exception:
            log.warning("session rollback failed", exc_info=True)
        return jsonify(message="Internal Server Error"), 500

    return api_bp
