"""
In-memory book storage.

``BookStore`` keeps every book in an insertion-ordered dict keyed by
id.  The data lives for the lifetime of the process only; restarting
the service empties it.  This module plays the role a database module
usually plays: ``get_store`` hands out the shared instance and
``reset_store`` replaces it with an empty one.

All access goes through a re-entrant lock.  Handlers running on the
event loop never interleave store access anyway, but sync callers
(worker threads, the test client) must not see a half-applied change.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Book:
    """A stored book.  ``id`` and ``title`` never change after creation."""

    id: str
    title: str
    comments: List[str] = field(default_factory=list)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def copy(self) -> "Book":
        return Book(id=self.id, title=self.title, comments=list(self.comments))


def generate_book_id() -> str:
    return str(uuid.uuid4())


class BookStore:
    """Ordered mapping from book id to :class:`Book`.

    Books handed out are copies; the store alone owns the stored ones.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_book_id) -> None:
        self._books: Dict[str, Book] = {}
        self._lock = threading.RLock()
        self._id_factory = id_factory

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def __contains__(self, book_id: object) -> bool:
        with self._lock:
            return book_id in self._books

    def add(self, title: str) -> Book:
        """Create a book with no comments and append it to the store."""
        with self._lock:
            book_id = self._id_factory()
            while book_id in self._books:
                logger.warning("Book id collision on %s; generating another", book_id)
                book_id = self._id_factory()
            book = Book(id=book_id, title=title)
            self._books[book_id] = book
            return book.copy()

    def get(self, book_id: str) -> Optional[Book]:
        with self._lock:
            book = self._books.get(book_id)
            return book.copy() if book is not None else None

    def add_comment(self, book_id: str, comment: str) -> Optional[Book]:
        """Append ``comment`` to the book's comments.

        Returns the updated book, or ``None`` if ``book_id`` is unknown.
        """
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                return None
            book.comments.append(comment)
            return book.copy()

    def remove(self, book_id: str) -> bool:
        with self._lock:
            return self._books.pop(book_id, None) is not None

    def clear(self) -> int:
        """Remove every book and return how many were removed."""
        with self._lock:
            removed = len(self._books)
            self._books.clear()
            return removed

    def all(self) -> List[Book]:
        """Return the stored books in insertion order."""
        with self._lock:
            return [book.copy() for book in self._books.values()]


_store = BookStore()


def get_store() -> BookStore:
    """Return the process-wide store."""
    return _store


def reset_store() -> BookStore:
    """Replace the process-wide store with an empty one and return it."""
    global _store
    _store = BookStore()
    return _store
