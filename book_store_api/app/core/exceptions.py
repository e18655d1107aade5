"""
Error types raised by the service layer.

Every error carries the exact message returned to clients and the
status code used when strict status codes are enabled.  In the default
mode the message is sent with HTTP 200.
"""

from fastapi import status


class BookStoreError(Exception):
    """Base class for client-facing book store errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookStoreError):
    """A required request field is absent or empty."""

    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def missing_field(cls, name: str) -> "ValidationError":
        return cls(f"missing required field {name}")


class NotFoundError(BookStoreError):
    """No book is stored under the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "no book exists") -> None:
        super().__init__(message)
