# magazine/config.py
import logging
import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(BASE_DIR, "data")

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def database_url() -> str:
    db_url = os.getenv("DATABASE_URL")
    if db_url and db_url.startswith("postgres://"):
        db_url = db_url.replace("postgres://", "postgresql+psycopg2://", 1)
    if db_url:
        return db_url
    os.makedirs(DATA_DIR, exist_ok=True)
    return "sqlite:///" + os.path.join(DATA_DIR, "magazine.db")


def load_config() -> dict:
    """Read settings from the environment (``.env`` is loaded by the factory)."""
    url = database_url()
    cfg = {
        "SECRET_KEY": os.getenv("SECRET_KEY", "dev-secret"),
        "SQLALCHEMY_DATABASE_URI": url,
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "SEED_ON_STARTUP": env_bool("SEED_ON_STARTUP", True),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
    if not url.startswith("sqlite"):
        # keep pooled connections alive behind hosted Postgres proxies
        cfg["SQLALCHEMY_ENGINE_OPTIONS"] = {"pool_pre_ping": True, "pool_recycle": 300}
    return cfg


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level)
