"""Liveness endpoint."""

from typing import Any, Dict

from fastapi import APIRouter

from book_store_api.app.core.store import get_store

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health() -> Dict[str, Any]:
    """Report that the service is up and how many books it holds."""
    return {"status": "ok", "books": len(get_store())}
