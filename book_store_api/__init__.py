"""Book Store API: an in-memory REST service for books and their comments."""

__all__ = []
