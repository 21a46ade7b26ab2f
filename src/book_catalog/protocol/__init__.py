"""Catalog request protocol.

Key concepts:
- Requests: typed variants decoded once from inbound JSON text
- Replies: book data (JSON) or status text
- Errors: CatalogError subclasses, sent back as plain text

Flow per message: decode_request -> ActionDispatcher.dispatch -> encode_reply,
or encode_error when any step raises CatalogError.
"""

from .codec import decode_request, encode_error, encode_reply
from .dispatcher import ActionDispatcher
from .errors import BookNotFound, CatalogError, InvalidJson, InvalidRequest, UnknownAction
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

__all__ = [
    # Requests
    "Action",
    "Request",
    "RequestEnvelope",
    "GetBooks",
    "GetBook",
    "AddBook",
    "UpdateBook",
    "DeleteBook",
    # Replies
    "Reply",
    "BookList",
    "SingleBook",
    "Status",
    # Errors
    "CatalogError",
    "InvalidJson",
    "UnknownAction",
    "InvalidRequest",
    "BookNotFound",
    # Processing
    "ActionDispatcher",
    "decode_request",
    "encode_reply",
    "encode_error",
]
