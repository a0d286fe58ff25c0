"""FastAPI exception handlers for converting BookingError to HTTP responses.

The ErrorCode-to-HTTP status mapping follows REST conventions:
- 400 Bad Request: Validation/business rule violations
- 401 Unauthorized: Authentication required or expired
- 403 Forbidden: Authorization failures
- 404 Not Found: Resource not found
- 409 Conflict: Dates taken or payment status moved on
- 500 Internal Server Error: Corrupt stored data

Usage:
    from booking_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from booking_core.models.errors import BookingDataError, BookingError, ErrorCode

logger = logging.getLogger(__name__)

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # Business validation errors -> 400 Bad Request
    ErrorCode.DATE_NOT_SELECTABLE: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_GUEST_COUNT: HTTP_400_BAD_REQUEST,
    ErrorCode.INCOMPLETE_SELECTION: HTTP_400_BAD_REQUEST,
    ErrorCode.RANGE_NOT_SUPPORTED: HTTP_400_BAD_REQUEST,
    # Authentication errors -> 401 Unauthorized
    ErrorCode.AUTH_REQUIRED: HTTP_401_UNAUTHORIZED,
    ErrorCode.SESSION_EXPIRED: HTTP_401_UNAUTHORIZED,
    # Authorization errors -> 403 Forbidden
    ErrorCode.ADMIN_REQUIRED: HTTP_403_FORBIDDEN,
    # Not found errors -> 404 Not Found
    ErrorCode.LISTING_NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorCode.LISTING_NOT_PUBLISHED: HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: HTTP_404_NOT_FOUND,
    # State conflicts -> 409 Conflict
    ErrorCode.DATES_UNAVAILABLE: HTTP_409_CONFLICT,
    ErrorCode.INVALID_PAYMENT_TRANSITION: HTTP_409_CONFLICT,
    # Corrupt stored data -> 500
    ErrorCode.INVALID_BOOKING_RANGE: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 400 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    """Handle BookingError exceptions and convert to JSON response.

    Args:
        request: The incoming request (unused but required by FastAPI)
        exc: The BookingError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    status_code = get_http_status_for_error(exc.code)
    if isinstance(exc, BookingDataError):
        logger.error(
            "Data integrity error on %s %s: %s",
            request.method,
            request.url.path,
            exc.details,
        )

    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(BookingError, booking_error_handler)  # type: ignore[arg-type]
