"""
Pydantic schemas for books and comments.

Request models accept loosely typed bodies (JSON or form fields) and
normalise them: absent, ``null``, empty, ``false`` and ``0`` values
become ``None`` and count as missing; other numbers and ``true`` are
kept as their string form; strings are kept verbatim.  Arrays and
objects are not valid field values and also count as missing.

Response models expose the book id under the ``_id`` key.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator


def normalize_text_field(value: Any) -> Optional[str]:
    """Return ``value`` as a non-empty string, or ``None`` if it is missing."""
    if isinstance(value, bool):
        return "true" if value else None
    if isinstance(value, (int, float)):
        return str(value) if value else None
    if isinstance(value, str):
        return value or None
    return None


class BookCreate(BaseModel):
    """Body of ``POST /api/books``."""

    title: Optional[str] = Field(None, examples=["Moby Dick"])

    @field_validator("title", mode="before")
    @classmethod
    def normalize_title(cls, v):
        return normalize_text_field(v)


class CommentCreate(BaseModel):
    """Body of ``POST /api/books/{id}``."""

    comment: Optional[str] = Field(None, examples=["A whale of a tale"])

    @field_validator("comment", mode="before")
    @classmethod
    def normalize_comment(cls, v):
        return normalize_text_field(v)


class BookCreated(BaseModel):
    """Response of a successful create."""

    id: str = Field(..., serialization_alias="_id")
    title: str


class BookSummary(BookCreated):
    """One entry of the book list."""

    commentcount: int = Field(..., ge=0)


class BookRead(BookCreated):
    """A book with its full comment list."""

    comments: List[str] = Field(default_factory=list)
