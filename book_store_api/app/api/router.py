"""
Top‑level router for the ``/api`` prefix.

When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
