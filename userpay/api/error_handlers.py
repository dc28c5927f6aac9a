"""
Exception-to-response mapping.

Services return Results; controllers call ``Result.unwrap()`` which raises the
carried ``DomainException``. The handlers below turn those into the error body
``{code, message, path, timestamp, errors?}``.
"""
# Standard library imports
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    EntityNotFoundException,
    ErrorCodes,
    ValidationException,
)

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422


# Checked before the class mapping
STATUS_BY_CODE: Dict[str, int] = {
    ErrorCodes.PAYMENT_VALIDATION_ERROR: HTTP_422_UNPROCESSABLE,
    ErrorCodes.LOOKUP_FAILED: status.HTTP_502_BAD_GATEWAY,
}

STATUS_BY_TYPE = (
    (EntityNotFoundException, status.HTTP_404_NOT_FOUND),
    (ConflictException, status.HTTP_409_CONFLICT),
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationException, HTTP_422_UNPROCESSABLE),
)


def status_for(exc: DomainException) -> int:
    """Resolve the HTTP status for a domain exception"""
    if exc.code in STATUS_BY_CODE:
        return STATUS_BY_CODE[exc.code]
    for exc_type, status_code in STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(
    request: Request,
    code: str,
    message: str,
    errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "code": code,
        "message": message,
        "path": request.url.path,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if errors:
        body["errors"] = errors
    return body


def _request_validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    errors = []
    for error in exc.errors():
        # First loc entry is the source ("body", "query", "path")
        location = [str(part) for part in error.get("loc", ())[1:]]
        errors.append({
            "field": ".".join(location) or str(error.get("loc", ("request",))[0]),
            "message": error.get("msg", "Invalid value"),
        })
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """Register the application-wide exception handlers on a FastAPI app"""

    @app.exception_handler(DomainException)
    async def _domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.code} {exc.message}")

        errors = exc.errors if isinstance(exc, ValidationException) else None
        return JSONResponse(
            status_code=status_code,
            content=error_body(request, exc.code, exc.message, errors),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = _request_validation_errors(exc)
        logger.warning(f"{request.method} {request.url.path} invalid request: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(request, ErrorCodes.VALIDATION_ERROR, "Validation failed", errors),
        )

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(request, ErrorCodes.INTERNAL_ERROR, "Internal server error"),
        )
