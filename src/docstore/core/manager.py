"""Document manager: upsert, lookup by id, and search over a single store"""

from typing import Iterable, Optional

from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo
from docstore.crud.search import search as search_repo


class DocumentManager:
    """Owns one DocumentRepo; a fresh MemoryRepo is created when none is given.

    Each manager is independent, so tests and callers can hold as many as they need.
    """

    def __init__(self, repo: Optional[DocumentRepo] = None):
        self.repo = repo if repo is not None else MemoryRepo()

    def save(self, document: Document) -> Document:
        """Upsert document: generate an id when missing, never change a stored created value."""
        return self.repo.save(document)

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the stored document with doc_id, or None if not found."""
        return self.repo.find_by_id(doc_id)

    def search(self, request: Optional[SearchRequest] = None) -> list[Document]:
        """Return documents matching every criterion in request; all documents when request is None."""
        return search_repo(self.repo, request)

    def load(self, documents: Iterable[Document]) -> list[Document]:
        """Save each document in order and return the stored results."""
        return [self.save(doc) for doc in documents]

    def __len__(self) -> int:
        return len(self.repo)
