"""Translation of service failures into HTTP error responses."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from employee_payroll.services.results import Err, ErrorKind, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
}


class PayrollAPIError(Exception):
    """Raised by routes when a service call returned ``Err``."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        self.status_code = STATUS_BY_KIND[kind]
        super().__init__(message)


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise ``PayrollAPIError`` for an ``Err``."""
    if isinstance(result, Err):
        raise PayrollAPIError(result.kind, result.message)
    return result.value


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body shared by every failure."""
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "message": message,
            "status": status_code,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""

    @app.exception_handler(PayrollAPIError)
    async def payroll_error_handler(request: Request, exc: PayrollAPIError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(status.HTTP_400_BAD_REQUEST, f"Invalid request: {fields}")

    # Unclassified failures are reported as 400, not 500.
    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_400_BAD_REQUEST, f"General Exception: {exc}")
