"""
Service layer for books and their comments.

``BookService`` implements the six operations of the API on top of the
in-memory store.  Failures are raised as ``ValidationError`` (a required
field is missing) or ``NotFoundError`` (unknown id).  Validation always
happens before the store is touched, so a failed call never changes
anything.
"""

from __future__ import annotations

import logging
from typing import List

from book_store_api.app.core.exceptions import NotFoundError, ValidationError
from book_store_api.app.core.store import Book, get_store
from book_store_api.app.schemas.book import (
    BookCreate,
    BookCreated,
    BookRead,
    BookSummary,
    CommentCreate,
)

logger = logging.getLogger(__name__)

DELETE_SUCCESSFUL = "delete successful"
COMPLETE_DELETE_SUCCESSFUL = "complete delete successful"


class BookService:
    """Service class for managing books."""

    @classmethod
    async def list_books(cls) -> List[BookSummary]:
        """Return every book in insertion order with its comment count."""
        books = get_store().all()
        return [
            BookSummary(id=book.id, title=book.title, commentcount=book.comment_count)
            for book in books
        ]

    @classmethod
    async def create_book(cls, data: BookCreate) -> BookCreated:
        """Store a new book without comments and return its id and title."""
        if not data.title:
            logger.warning("Rejected book creation without a title")
            raise ValidationError.missing_field("title")
        book = get_store().add(data.title)
        logger.info("Created book %s", book.id)
        return BookCreated(id=book.id, title=book.title)

    @classmethod
    async def get_book(cls, book_id: str) -> BookRead:
        book = get_store().get(book_id)
        if book is None:
            logger.warning("Book %s not found", book_id)
            raise NotFoundError()
        return cls._to_book_read(book)

    @classmethod
    async def add_comment(cls, book_id: str, data: CommentCreate) -> BookRead:
        """Append a comment to a book and return the updated book.

        The comment is checked before the id, so an empty comment is
        reported as missing even when the id is unknown.
        """
        if not data.comment:
            logger.warning("Rejected comment without text for book %s", book_id)
            raise ValidationError.missing_field("comment")
        book = get_store().add_comment(book_id, data.comment)
        if book is None:
            logger.warning("Book %s not found", book_id)
            raise NotFoundError()
        logger.info("Added comment to book %s (%d total)", book_id, book.comment_count)
        return cls._to_book_read(book)

    @classmethod
    async def delete_book(cls, book_id: str) -> str:
        if not get_store().remove(book_id):
            logger.warning("Book %s not found", book_id)
            raise NotFoundError()
        logger.info("Deleted book %s", book_id)
        return DELETE_SUCCESSFUL

    @classmethod
    async def delete_all_books(cls) -> str:
        removed = get_store().clear()
        logger.info("Deleted all books (%d removed)", removed)
        return COMPLETE_DELETE_SUCCESSFUL

    @staticmethod
    def _to_book_read(book: Book) -> BookRead:
        return BookRead(id=book.id, title=book.title, comments=list(book.comments))
