# magazine/views.py
import logging

from flask import Blueprint, abort, flash, redirect, render_template, request, url_for
from sqlalchemy.exc import IntegrityError

from .errors import ArticleNotFound
from .schema import ARTICLE_FIELDS, Invalid, slugify, validate_article
from .storage import Storage

log = logging.getLogger(__name__)

FORM_FIELDS = [wire for wire, _attr, _kind in ARTICLE_FIELDS]


def _form_payload():
    payload = {k: request.form.get(k, "") for k in FORM_FIELDS}
    if not payload["slug"].strip():
        payload["slug"] = slugify(payload["title"])
    return payload


def _form_values(article):
    d = article.to_dict()
    return {k: d[k] for k in FORM_FIELDS}


def create_views_blueprint(storage: Storage) -> Blueprint:
    main_bp = Blueprint("main", __name__)

    @main_bp.app_context_processor
    def inject_nav():
        return {"nav_categories": storage.list_categories()}

    @main_bp.app_template_filter("date")
    def format_date(value):
        if not value:
            return ""
        return f"{value:%b} {value.day}, {value.year}"

    @main_bp.get("/")
    def index():
        items = storage.list_articles()
        news = {
            "featured": items[0] if items else None,
            "recent": items[1:5],
            "older": items[5:],
        }
        return render_template("index.html", news=news, events=storage.list_events())

    @main_bp.get("/article/<slug>")
    def article(slug):
        a = storage.get_article_by_slug(slug)
        if not a:
            abort(404)
        return render_template("article.html", article=a)

    @main_bp.get("/category/<slug>")
    def category(slug):
        c = storage.get_category_by_slug(slug)
        if not c:
            abort(404)
        items = storage.list_articles(slug)
        return render_template("category.html", category=c, items=items)

    @main_bp.get("/admin")
    def admin():
        return render_template("admin.html", items=storage.list_articles())

    @main_bp.route("/admin/new", methods=["GET", "POST"])
    def admin_new():
        values = {k: "" for k in FORM_FIELDS}
        if request.method == "POST":
            values = _form_payload()
            result = validate_article(values)
            if isinstance(result, Invalid):
                flash(result.message, "error")
            else:
                try:
                    storage.create_article(result.data)
                    flash("Article published successfully", "success")
                    return redirect(url_for("main.admin"))
                except IntegrityError:
                    flash("Slug already in use or category does not exist", "error")
        return render_template("admin_edit.html", article=None, values=values,
                               categories=storage.list_categories())

    @main_bp.route("/admin/<int:aid>/edit", methods=["GET", "POST"])
    def admin_edit(aid):
        a = storage.get_article_by_id(aid)
        if a is None:
            abort(404)
        values = _form_values(a)
        if request.method == "POST":
            values = _form_payload()
            result = validate_article(values)
            if isinstance(result, Invalid):
                flash(result.message, "error")
            else:
                try:
                    storage.update_article(aid, result.data)
                    flash("Article updated successfully", "success")
                    return redirect(url_for("main.admin"))
                except ArticleNotFound:
                    abort(404)
                except IntegrityError:
                    flash("Slug already in use or category does not exist", "error")
        return render_template("admin_edit.html", article=a, values=values,
                               categories=storage.list_categories())

    @main_bp.post("/admin/<int:aid>/delete")
    def admin_delete(aid):
        if storage.get_article_by_id(aid) is None:
            flash("Article not found", "error")
            return redirect(url_for("main.admin"))
        storage.delete_article(aid)
        flash("Article deleted", "success")
        return redirect(url_for("main.admin"))

    return main_bp
