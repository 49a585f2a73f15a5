"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.manager import DocumentManager
from docstore.core.seed import load_documents
from docstore.crud.models import Document, SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _manager(settings: Settings) -> DocumentManager:
    """Return a fresh manager holding every document from the configured seed file."""
    if not settings.seed_file:
        _fail("No seed file given. Pass SEED or set DOCSTORE_SEED_FILE.")
    path = Path(settings.seed_file)
    if not path.is_file():
        _fail(f"Seed file not found: {path}")
    try:
        docs = load_documents(path)
    except ValueError as e:
        _fail("Could not load seed file", e)
    manager = DocumentManager()
    manager.load(docs)
    return manager


def _dump(docs: Document | list[Document], indent: int) -> str:
    """Render one document as a JSON object, or a list of them as a JSON array."""
    if isinstance(docs, Document):
        data = docs.model_dump(mode="json")
    else:
        data = [d.model_dump(mode="json") for d in docs]
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def search_cmd(
    seed: Annotated[Optional[str], typer.Argument(help="YAML/JSON file of documents to load")] = None,
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title prefix; repeatable")] = None,
    content_prefix: Annotated[Optional[list[str]], typer.Option("--content-prefix", help="Content prefix; repeatable")] = None,
    author_id: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id; repeatable")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Inclusive ISO-8601 lower bound")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Inclusive ISO-8601 upper bound")] = None,
    ):
    """Load documents and print those matching every given criterion as JSON."""
    settings = _settings(overrides={"seed_file": seed})
    manager = _manager(settings)
    try:
        request = SearchRequest(
            title_prefixes=title_prefix or None,
            contains_contents=content_prefix or None,
            author_ids=author_id or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValueError as e:
        _fail("Invalid search criteria", e)
    typer.echo(_dump(manager.search(request), settings.indent))


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    seed: Annotated[Optional[str], typer.Option("--seed", help="YAML/JSON file of documents to load")] = None,
    ):
    """Load documents and print the one with the given id as JSON."""
    settings = _settings(overrides={"seed_file": seed})
    manager = _manager(settings)
    doc = manager.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(_dump(doc, settings.indent))
