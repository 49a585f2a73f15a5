"""Root test configuration: shared document factories and a fresh store per test"""

from datetime import datetime, timedelta, timezone

import pytest

from docstore.core.manager import DocumentManager
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import Author, Document


T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_doc(
    doc_id: str = None,
    title: str = "Title",
    content: str = "Content",
    author_id: str = "author1",
    author_name: str = "John Doe",
    created: datetime = T0,
    ) -> Document:
    """Build a Document with an embedded Author; author_id=None leaves the author unset."""
    author = Author(id=author_id, name=author_name) if author_id is not None else None
    return Document(id=doc_id, title=title, content=content, author=author, created=created)


@pytest.fixture(name="repo")
def repo_fixture():
    """An empty in-memory store."""
    return MemoryRepo()


@pytest.fixture(name="manager")
def manager_fixture(repo):
    """A DocumentManager over the empty store."""
    return DocumentManager(repo)


@pytest.fixture(name="library")
def library_fixture(manager):
    """Four documents with distinct titles, contents, authors, and creation times, saved in order."""
    manager.load([
        make_doc("java-1", "Java Title", "Content 1", "a1", created=T0 - timedelta(hours=2)),
        make_doc("py-1", "Py Title", "Content 2", "a2", created=T0 - timedelta(hours=1)),
        make_doc("java-2", "JavaScript Guide", "Intro to JS", "a2", created=T0),
        make_doc("go-1", "Go Notes", "Content 3", "a3", created=T0 + timedelta(hours=1)),
    ])
    return manager


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """The make_doc factory, for tests that build their own documents."""
    return make_doc
