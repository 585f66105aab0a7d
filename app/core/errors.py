"""Error taxonomy and the FastAPI handlers that render it.

ValidationError and InternalError are surfaced to the caller as
``{"error": ..., "details": ...}``. DeliveryFailure never reaches a handler:
the relay carries it inside a ``Result`` and only logs it.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.logging import get_logger

log = get_logger("errors")


class AppError(Exception):
    """Base for errors rendered straight into an HTTP response."""

    status_code = 500

    def __init__(self, error: str, details: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    """Caller's fault: missing required field or malformed body."""

    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class InternalError(AppError):
    """Collaborator or unexpected failure while handling a request."""

    status_code = 500


class DeliveryFailure(Exception):
    """A relay delivery attempt that timed out, errored or got a non-2xx reply."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


def describe(exc: BaseException) -> str:
    """Best-effort human readable detail for an arbitrary exception."""
    message = str(exc)
    return message if message else exc.__class__.__name__


async def _app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body", "details": details})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error", "details": describe(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
