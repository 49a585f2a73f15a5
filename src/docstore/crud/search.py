"""Multi-criteria document search: one predicate per request field, combined with AND.

Every predicate is vacuously true when its request field is None or empty.
Content criteria are matched as prefixes of the document content, the same way
title prefixes are, despite the ``contains_contents`` field name.
"""

import logging
from datetime import datetime
from typing import Optional

from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


def _starts_with_any(text: Optional[str], prefixes: Optional[list[str]]) -> bool:
    """True if prefixes is empty, else if some prefix is a literal leading substring of text."""
    if not prefixes:
        return True
    if text is None:
        return False
    return any(text.startswith(p) for p in prefixes)


def matches_title_prefixes(doc: Document, prefixes: Optional[list[str]]) -> bool:
    return _starts_with_any(doc.title, prefixes)


def matches_content_prefixes(doc: Document, prefixes: Optional[list[str]]) -> bool:
    return _starts_with_any(doc.content, prefixes)


def matches_author_ids(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True if author_ids is empty, else if the document author's id is one of them."""
    if not author_ids:
        return True
    if doc.author is None:
        return False
    return doc.author.id in author_ids


def matches_created_range(
    doc: Document,
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """True if doc.created lies within the given bounds; both ends inclusive, either may be None."""
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if doc satisfies every criterion of request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_content_prefixes(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_range(doc, request.created_from, request.created_to)
    )


def search(repo: DocumentRepo, request: Optional[SearchRequest]) -> list[Document]:
    """Return stored documents matching request, in the repo's enumeration order.

    A None request returns every stored document.
    """
    docs = repo.all()
    if request is None:
        return docs
    results = [doc for doc in docs if matches(doc, request)]
    logger.debug("search matched %d of %d documents", len(results), len(docs))
    return results
