# wsgi.py
from dotenv import load_dotenv; load_dotenv()

from magazine import create_app

application = create_app()


def _has_root(a) -> bool:
    return any(r.rule == "/" for r in a.url_map.iter_rules())


if not _has_root(application):
    raise RuntimeError("WSGI application has no '/' route; views blueprint not registered")
