import logging
from dataclasses import dataclass, field
from threading import RLock

from docstore.core.utils.ids import is_blank, new_id
from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)

@dataclass
class MemoryRepo(DocumentRepo):
    _docs: dict[str, Document] = field(default_factory=dict)
    _lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    def save(self, document: Document) -> Document:
        if document is None:
            raise ValueError("Cannot save None; a Document is required")
        with self._lock:
            if is_blank(document.id):
                document.id = new_id()

            existing = self._docs.get(document.id)
            if existing is not None:
                # created and id stay as first stored
                existing.title = document.title
                existing.content = document.content
                existing.author = document.author.model_copy() if document.author else None
                logger.debug("updated document %s", existing.id)
                return existing

            stored = document.model_copy(deep=True)
            self._docs[stored.id] = stored
            logger.debug("created document %s", stored.id)
            return stored

    def find_by_id(self, doc_id: str) -> Document | None:
        with self._lock:
            return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        with self._lock:
            return list(self._docs.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
