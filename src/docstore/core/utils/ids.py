"""Identifier generation for newly saved documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 string (36 chars, hyphenated)."""
    return str(uuid4())


def is_blank(doc_id: str | None) -> bool:
    """True when doc_id is None or empty and a new id must be generated."""
    return not doc_id
