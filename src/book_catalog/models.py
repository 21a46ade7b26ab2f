"""Catalog data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Wire integers are unsigned: year is 32-bit, ids are 64-bit
MAX_YEAR = 2**32 - 1
MAX_ID = 2**64 - 1


class BookFields(BaseModel):
    """Client-supplied book fields.

    Used as the ``book`` payload of add/update requests. The server owns
    identifiers, so an ``id`` key in the payload is ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    title: str
    author: str
    year: int = Field(ge=0, le=MAX_YEAR)


class Book(BookFields):
    """A stored catalog entry."""

    id: int = Field(ge=0, le=MAX_ID)

    @classmethod
    def from_fields(cls, book_id: int, fields: BookFields) -> Book:
        """Build a stored book from client fields and an assigned id."""
        return cls(id=book_id, **fields.model_dump())

    def to_wire(self) -> dict[str, int | str]:
        """Dict in wire field order: id, title, author, year."""
        return {"id": self.id, "title": self.title, "author": self.author, "year": self.year}
