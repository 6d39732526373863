"""
Exception handlers producing the API's error envelope.

Every failure is rendered as ``{"success": false, "error": <message>}``.
Outside production an extra ``message`` field carries the underlying
detail (validation errors, exception text) to help debugging.

* ``HTTPException``: raised by routes (404 contact not found) or by
  routing itself (unmatched path, wrong method).
* ``RequestValidationError``: malformed path or query parameters,
  e.g. a non‑numeric contact id or ``limit=abc``.  Reported as 400.
* ``SQLAlchemyError``: store access failure.  Logged, reported as 500.
* Anything else: unexpected fault.  Logged, reported as 500.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .headers import SECURITY_HEADERS

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"
ROUTE_NOT_FOUND = "Route not found"


def error_body(error: str, detail: Optional[str], settings: Settings) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": error}
    if detail and not settings.is_production:
        body["message"] = detail
    return body


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def setup_exception_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        error = str(exc.detail)
        # Routing raises a bare "Not Found" when no path matches.
        if exc.status_code == status.HTTP_404_NOT_FOUND and error == "Not Found":
            error = ROUTE_NOT_FOUND
        return JSONResponse(
            content={"success": False, "error": error},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        detail = _format_validation_errors(exc)
        logger.info("Rejected request %s: %s", request.url.path, detail)
        return JSONResponse(
            content=error_body("Invalid request parameters", detail, settings),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error while serving %s", request.url.path)
        return JSONResponse(
            content=error_body(INTERNAL_ERROR, str(exc), settings),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error while serving %s", request.url.path)
        return JSONResponse(
            content=error_body(INTERNAL_ERROR, str(exc), settings),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=SECURITY_HEADERS,
        )
