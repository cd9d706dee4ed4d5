"""Global exception handlers — translate domain errors to HTTP responses.

Each domain exception maps to a specific HTTP status code and the
standard ``{"status": "error", "message": "..."}`` envelope.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from asset_classifier.domain.exceptions import (
    AssetClassifierError,
    AssetSourceError,
    BatchTooLargeError,
    EmptyBatchError,
    RuleTableError,
)

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[AssetClassifierError], int]] = [
    (EmptyBatchError, 422),
    (BatchTooLargeError, 413),
    (AssetSourceError, 404),
    (RuleTableError, 500),
]


def _error_json(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


_Handler = Callable[[Request, Exception], Awaitable[JSONResponse]]


def _domain_handler(status_code: int) -> _Handler:
    """Handler answering a domain error with *status_code* and its message."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_json(status_code, str(exc))

    return handler


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:
        app.add_exception_handler(exc_type, _domain_handler(code))

    # ── Pydantic / FastAPI validation errors ────────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(p) for p in err.get("loc", []))
            messages.append(f"{loc}: {err.get('msg', 'validation error')}")
        return _error_json(422, "; ".join(messages))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception")
        return _error_json(500, "An unexpected error occurred. Please try again later.")
