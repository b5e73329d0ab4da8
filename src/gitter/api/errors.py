"""Exception handlers rendering every error as plain text."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server error"
METHOD_NOT_ALLOWED = "Method not allowed"
MALFORMED_FORM = "Malformed form parameters"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    """Return the exception detail as a plain-text body."""
    detail = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        detail = METHOD_NOT_ALLOWED
    elif exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        detail = SERVER_ERROR
    return PlainTextResponse(
        str(detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Log the failure in full and hide it from the client."""
    logger.exception("Unhandled error while serving %s", request.url.path)
    return PlainTextResponse(SERVER_ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the plain-text handlers on ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
