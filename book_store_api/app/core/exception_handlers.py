"""
Application-wide exception handlers.

Book store errors are answered by the endpoints themselves (see
``api.endpoints.books``).  The only handler registered here turns
Starlette's "no route" errors (unknown path, or a known path with an
unsupported method) into a plain-text ``404 Not Found``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_STATUSES = {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code in ROUTE_NOT_FOUND_STATUSES:
        logger.debug("No route for %s %s", request.method, request.url.path)
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


EXCEPTION_HANDLERS = {
    StarletteHTTPException: not_found_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
