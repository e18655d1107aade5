"""
Book endpoints.

These routes expose the book collection under ``/api/books``.  Errors
raised by ``BookService`` are reported in-band: the response body is a
JSON string such as ``"no book exists"`` and the status is 200.  With
``STRICT_STATUS_CODES`` enabled the same body is sent with 400 or 404.

Request bodies are read as JSON when sent as ``application/json`` and
as form fields when sent urlencoded or multipart.  Any other body, or
one that cannot be parsed, is treated as empty, which makes the
required field missing.  Each route also answers with a trailing slash.
"""

import json
import logging
from typing import Any, Dict, List, Union

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from book_store_api.app.core.exceptions import BookStoreError
from book_store_api.app.schemas.book import (
    BookCreate,
    BookCreated,
    BookRead,
    BookSummary,
    CommentCreate,
)
from book_store_api.app.services.book_service import BookService

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

router = APIRouter()


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict, or ``{}`` if there is none."""
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException) as e:
            logger.debug("Ignoring malformed form on %s %s: %s", request.method, request.url.path, e)
            return {}
        return dict(form)
    if media_type != JSON_CONTENT_TYPE:
        return {}
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Ignoring unparsable body on %s %s", request.method, request.url.path)
        return {}
    return payload if isinstance(payload, dict) else {}


def error_response(request: Request, exc: BookStoreError) -> JSONResponse:
    """Render a service error as a JSON string response."""
    strict = request.app.state.settings.strict_status_codes
    status_code = exc.status_code if strict else status.HTTP_200_OK
    return JSONResponse(content=exc.message, status_code=status_code)


@router.get("", response_model=List[BookSummary])
@router.get("/", response_model=List[BookSummary], include_in_schema=False)
async def list_books() -> List[BookSummary]:
    """Return every book with its ``_id``, ``title`` and ``commentcount``."""
    return await BookService.list_books()


@router.post("", response_model=BookCreated)
@router.post("/", response_model=BookCreated, include_in_schema=False)
async def create_book(
    request: Request,
    payload: Dict[str, Any] = Depends(read_payload),
) -> Union[BookCreated, JSONResponse]:
    """Create a book from ``{title}``; answers ``"missing required field title"`` without one."""
    try:
        return await BookService.create_book(BookCreate.model_validate(payload))
    except BookStoreError as e:
        return error_response(request, e)


@router.delete("", response_model=str)
@router.delete("/", response_model=str, include_in_schema=False)
async def delete_all_books() -> str:
    return await BookService.delete_all_books()


@router.get("/{book_id}", response_model=BookRead)
@router.get("/{book_id}/", response_model=BookRead, include_in_schema=False)
async def get_book(request: Request, book_id: str) -> Union[BookRead, JSONResponse]:
    """Return a book with its full comment list, or ``"no book exists"``."""
    try:
        return await BookService.get_book(book_id)
    except BookStoreError as e:
        return error_response(request, e)


@router.post("/{book_id}", response_model=BookRead)
@router.post("/{book_id}/", response_model=BookRead, include_in_schema=False)
async def add_comment(
    request: Request,
    book_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
) -> Union[BookRead, JSONResponse]:
    """Append ``{comment}`` to a book and return the updated book.

    A missing comment is reported before an unknown id.
    """
    try:
        return await BookService.add_comment(book_id, CommentCreate.model_validate(payload))
    except BookStoreError as e:
        return error_response(request, e)


@router.delete("/{book_id}", response_model=str)
@router.delete("/{book_id}/", response_model=str, include_in_schema=False)
async def delete_book(request: Request, book_id: str) -> Union[str, JSONResponse]:
    try:
        return await BookService.delete_book(book_id)
    except BookStoreError as e:
        return error_response(request, e)
