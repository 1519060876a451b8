"""
Global exception handlers.

Every error leaves the API as ``{"message": ...}`` so that clients only
need to read one key:

- ``HTTPException`` keeps its status code and uses ``detail`` as the
  message (404 for missing records and countries);
- request validation errors become 400 and carry a field-level
  ``errors`` list;
- anything else becomes 500 without leaking internals.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = _validation_details(exc)
        logger.warning("Validation error on %s: %s", request.url.path, details)
        message = "; ".join(f"{d['field']}: {d['message']}" for d in details) or "Invalid request data"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message, "errors": details},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred"},
        )


def _validation_details(exc: RequestValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
