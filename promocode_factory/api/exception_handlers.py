"""Global exception handlers that map domain exceptions to HTTP responses."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from promocode_factory.errors import (
    INVALID_LIMIT,
    NOT_FOUND,
    PARTNER_INACTIVE,
    InvalidLimitError,
    NotFoundError,
    PartnerInactiveError,
)
from promocode_factory.schemas.error import ErrorResponse


def _error_response(status_code: int, detail: str, code: str) -> JSONResponse:
    """Return a standardized error response with detail and machine-readable code."""
    body = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def partner_inactive_error_handler(
    _request: Request, exc: PartnerInactiveError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        PARTNER_INACTIVE,
    )


def invalid_limit_error_handler(
    _request: Request, exc: InvalidLimitError
) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        str(exc),
        INVALID_LIMIT,
    )


def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return _error_response(
        status.HTTP_404_NOT_FOUND,
        str(exc),
        NOT_FOUND,
    )


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(PartnerInactiveError, partner_inactive_error_handler)
    app.add_exception_handler(InvalidLimitError, invalid_limit_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
