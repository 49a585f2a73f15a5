from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Iterator

from docstore.crud.models import Document

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, document: Document) -> Document:
        """Upsert by id and return the stored document."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError

    @abstractmethod
    def all(self) -> list[Document]:
        """Return a snapshot of every stored document in a stable order."""
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self.all())

    def __contains__(self, doc_id: object) -> bool:
        return isinstance(doc_id, str) and self.find_by_id(doc_id) is not None

    def __iter__(self) -> Iterator[Document]:
        return iter(self.all())
