"""Request decoding and reply encoding.

Inbound text is parsed into a typed Request, or fails with a
CatalogError. Outbound replies are JSON for book data and plain text for
status and error messages.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..models import BookFields
from .errors import CatalogError, InvalidJson, InvalidRequest, UnknownAction
from .replies import BookList, Reply, SingleBook, Status
from .requests import (
    Action,
    AddBook,
    DeleteBook,
    GetBook,
    GetBooks,
    Request,
    RequestEnvelope,
    UpdateBook,
)

logger = logging.getLogger(__name__)


def decode_request(raw: str | bytes) -> Request:
    """Parse an inbound message into a typed request.

    Raises:
        InvalidJson: Text is not a JSON object of the expected shape
        UnknownAction: The action tag is not one of the known actions
        InvalidRequest: A field the action requires is absent
    """
    try:
        envelope = RequestEnvelope.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidJson(f"{e.error_count()} validation error(s)") from e

    try:
        action = Action(envelope.action)
    except ValueError as e:
        raise UnknownAction(envelope.action) from e

    match action:
        case Action.GET_BOOKS:
            return GetBooks()

        case Action.GET_BOOK:
            return GetBook(book_id=_require_id(envelope, action))

        case Action.ADD_BOOK:
            return AddBook(fields=_require_book(envelope, action))

        case Action.UPDATE_BOOK:
            return UpdateBook(
                book_id=_require_id(envelope, action),
                fields=_require_book(envelope, action),
            )

        case Action.DELETE_BOOK:
            return DeleteBook(book_id=_require_id(envelope, action))


def _require_id(envelope: RequestEnvelope, action: Action) -> int:
    if envelope.id is None:
        raise InvalidRequest(f"{action.value} requires 'id'")
    return envelope.id


def _require_book(envelope: RequestEnvelope, action: Action) -> BookFields:
    if envelope.book is None:
        raise InvalidRequest(f"{action.value} requires 'book'")
    return envelope.book


def encode_reply(reply: Reply) -> str:
    """Serialize a successful reply to outbound text."""
    try:
        match reply:
            case BookList(books=books):
                return json.dumps([book.to_wire() for book in books], ensure_ascii=False)
            case SingleBook(book=book):
                return json.dumps(book.to_wire(), ensure_ascii=False)
            case Status(message=message):
                return message
            case _:
                raise TypeError(f"Unsupported reply: {type(reply).__name__}")
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to encode reply: {e}")
        return encode_error(InvalidJson(str(e)))


def encode_error(error: CatalogError) -> str:
    """Serialize an error to its client-facing message."""
    return error.message
