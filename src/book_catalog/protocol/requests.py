"""Request definitions for the catalog protocol.

Requests are decoded once at the connection boundary into one of five
typed variants. The dispatcher matches on the variant, never on the raw
action string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..models import MAX_ID, BookFields


class Action(str, Enum):
    """All supported actions."""

    GET_BOOKS = "get_books"
    GET_BOOK = "get_book"
    ADD_BOOK = "add_book"
    UPDATE_BOOK = "update_book"
    DELETE_BOOK = "delete_book"


class RequestEnvelope(BaseModel):
    """Raw inbound message shape.

    Example:
        {
            "action": "update_book",
            "id": 1,
            "book": {"title": "Dune", "author": "Herbert", "year": 1965}
        }

    ``id`` and ``book`` are optional at this level; which of them an
    action needs is checked when the envelope becomes a typed request.
    """

    model_config = ConfigDict(strict=True)

    action: str
    id: int | None = Field(default=None, ge=0, le=MAX_ID)
    book: BookFields | None = None


@dataclass(frozen=True)
class GetBooks:
    """List every book."""


@dataclass(frozen=True)
class GetBook:
    book_id: int


@dataclass(frozen=True)
class AddBook:
    fields: BookFields


@dataclass(frozen=True)
class UpdateBook:
    book_id: int
    fields: BookFields


@dataclass(frozen=True)
class DeleteBook:
    book_id: int


Request = GetBooks | GetBook | AddBook | UpdateBook | DeleteBook
