"""
Validation of article write payloads.

Payloads arrive with the JSON (camelCase) field names and leave as a dict keyed
by ``Article`` attribute names, ready for the storage layer. Only the first
violation is reported.
"""
from dataclasses import dataclass, field
from re import fullmatch, search, sub
from typing import Any, Dict, Optional, Union

# (wire name, model attribute, kind) in reporting order
ARTICLE_FIELDS = (
    ("title", "title", "text"),
    ("slug", "slug", "text"),
    ("description", "description", "text"),
    ("content", "content", "text"),
    ("coverImageUrl", "cover_image_url", "text"),
    ("authorName", "author_name", "text"),
    ("categoryId", "category_id", "int"),
)


@dataclass(frozen=True)
class Valid:
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Invalid:
    message: str
    field: Optional[str] = None


ValidationResult = Union[Valid, Invalid]


def _coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        s = value.strip()
        if fullmatch(r"-?[0-9]+", s):
            return int(s)
    return None


def validate_article(payload: Any, partial: bool = False) -> ValidationResult:
    """Check a create (``partial=False``) or update (``partial=True``) payload.

    Unknown keys, including ``id`` and ``createdAt``, are dropped. Accepted
    values are passed through unchanged. A payload that is not an object has
    no offending field, so ``field`` is None.
    """
    if not isinstance(payload, dict):
        return Invalid("Expected a JSON object")

    data: Dict[str, Any] = {}
    for wire, attr, kind in ARTICLE_FIELDS:
        if wire not in payload:
            if partial:
                continue
            return Invalid(f"{wire} is required", wire)
        value = payload[wire]
        if kind == "int":
            number = _coerce_int(value)
            if number is None:
                return Invalid(f"{wire} must be an integer", wire)
            data[attr] = number
            continue
        if not isinstance(value, str):
            return Invalid(f"{wire} must be a string", wire)
        if not value.strip():
            return Invalid(f"{wire} is required", wire)
        if wire == "slug" and search(r"\s", value):
            return Invalid(f"{wire} must not contain whitespace", wire)
        data[attr] = value
    return Valid(data)


def slugify(text: str) -> str:
    s = (text or "").lower()
    s = sub(r"[^a-z0-9]+", "-", s)
    return s.strip("-")
