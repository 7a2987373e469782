# magazine/__init__.py
import logging
import sqlite3

from flask import Flask, jsonify, render_template, request
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from werkzeug.exceptions import HTTPException

db = SQLAlchemy()

log = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_conn, _record):
    if isinstance(dbapi_conn, sqlite3.Connection):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys = ON;")
        cur.close()


def create_app(overrides=None):
    from dotenv import load_dotenv; load_dotenv()
    from .config import configure_logging, load_config

    app = Flask(__name__, static_folder="static", static_url_path="/static")
    app.config.from_mapping(load_config())
    if overrides:
        app.config.from_mapping(overrides)

    configure_logging(app.config["LOG_LEVEL"])
    db.init_app(app)

    # models must be imported before create_all
    from .models import Article, Category, Event  # noqa: F401
    from .storage import DatabaseStorage

    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)
        db.create_all()
        if app.config.get("SEED_ON_STARTUP"):
            from .seed import seed_database
            seed_database()

    # one storage instance per process, handed to every blueprint
    storage = DatabaseStorage(db)
    app.extensions["magazine.storage"] = storage

    from .api import create_api_blueprint
    app.register_blueprint(create_api_blueprint(storage))

    from .views import create_views_blueprint
    app.register_blueprint(create_views_blueprint(storage))

    from .seed import check_articles_command, seed_command
    app.cli.add_command(seed_command)
    app.cli.add_command(check_articles_command)

    @app.errorhandler(HTTPException)
    def http_error(e):
        if request.path.startswith("/api/"):
            message = "Not found" if e.code == 404 else e.description
            return jsonify(message=message), e.code
        if e.code == 404:
            return render_template("404.html"), 404
        return e

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    log.debug("app created for %s", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
