"""Record definitions for documents, authors, and search requests"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so stored and requested timestamps always compare."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


Timestamp = Annotated[datetime, AfterValidator(_as_utc)]


class Record(BaseModel):
    """Base for all records: snake_case attributes, camelCase accepted on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Author(Record):
    """The author of a document, embedded by value"""
    id: Optional[str] = None
    name: Optional[str] = None


class Document(Record):
    """A stored document; id is assigned on first save when missing or empty"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[Timestamp] = Field(default_factory=_utcnow, description="Fixed once the id is first stored")


class SearchRequest(Record):
    """Optional search criteria; an unset or empty field imposes no constraint"""
    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = Field(default=None, description="Matched as content prefixes")
    author_ids: Optional[list[str]] = None
    created_from: Optional[Timestamp] = Field(default=None, description="Inclusive lower bound")
    created_to: Optional[Timestamp] = Field(default=None, description="Inclusive upper bound")
