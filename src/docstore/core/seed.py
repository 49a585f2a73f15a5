"""Fixture loading: read documents from a YAML or JSON file into Document records"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document


def _entries(data: Any, path: Path) -> list[Any]:
    """Return the list of document entries from a parsed seed file."""
    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid seed file {path}: expected a 'documents' list")
        data = data["documents"] if data["documents"] is not None else []
    if not isinstance(data, list):
        raise ValueError(f"Invalid seed file {path}: expected a list of documents, got {type(data).__name__}")
    return data


def load_documents(path: Path) -> list[Document]:
    """Parse path and validate every entry into a Document, preserving file order."""
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid seed file {path}: {e}") from e

    docs = []
    for i, entry in enumerate(_entries(data, path)):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path}: {e}") from e
    return docs
