import pytest

from magazine import create_app, db


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'magazine.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    return url


@pytest.fixture
def app(db_url):
    """Flask app on a temporary SQLite file, seeded with the starter content."""
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "SEED_ON_STARTUP": True})
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    with app.app_context():
        yield app.extensions["magazine.storage"]


@pytest.fixture
def article_payload():
    return {
        "title": "T",
        "slug": "t",
        "description": "d",
        "content": "c",
        "coverImageUrl": "u",
        "authorName": "A",
        "categoryId": 1,
    }
