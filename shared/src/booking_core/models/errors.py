"""Standard error codes for the booking backend.

Every domain failure carries one of these codes so the API layer can map it
to an HTTP status and a consistent JSON body.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes."""

    # Selection and booking errors (ERR_001-ERR_009)
    DATES_UNAVAILABLE = "ERR_001"
    DATE_NOT_SELECTABLE = "ERR_002"
    INVALID_GUEST_COUNT = "ERR_003"
    INCOMPLETE_SELECTION = "ERR_004"
    RANGE_NOT_SUPPORTED = "ERR_005"
    LISTING_NOT_FOUND = "ERR_006"
    LISTING_NOT_PUBLISHED = "ERR_007"
    BOOKING_NOT_FOUND = "ERR_008"
    INVALID_PAYMENT_TRANSITION = "ERR_009"

    # Data integrity error codes (ERR_DATA_001)
    INVALID_BOOKING_RANGE = "ERR_DATA_001"

    # Authentication error codes (ERR_AUTH_001-ERR_AUTH_003)
    AUTH_REQUIRED = "ERR_AUTH_001"
    SESSION_EXPIRED = "ERR_AUTH_002"
    ADMIN_REQUIRED = "ERR_AUTH_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    # Selection and booking errors
    ErrorCode.DATES_UNAVAILABLE: "The selected range overlaps dates that are already booked",
    ErrorCode.DATE_NOT_SELECTABLE: "The selected date cannot be booked",
    ErrorCode.INVALID_GUEST_COUNT: "Number of guests is outside the allowed range",
    ErrorCode.INCOMPLETE_SELECTION: "Select both a check-in and a check-out date",
    ErrorCode.RANGE_NOT_SUPPORTED: "This listing is booked for a single date only",
    ErrorCode.LISTING_NOT_FOUND: "Listing not found",
    ErrorCode.LISTING_NOT_PUBLISHED: "Listing is not open for booking",
    ErrorCode.BOOKING_NOT_FOUND: "Booking not found",
    ErrorCode.INVALID_PAYMENT_TRANSITION: "Payment status cannot change this way",
    # Data integrity errors
    ErrorCode.INVALID_BOOKING_RANGE: "A stored booking ends before it starts",
    # Authentication errors
    ErrorCode.AUTH_REQUIRED: "Authentication required to perform this action",
    ErrorCode.SESSION_EXPIRED: "Authentication session has expired",
    ErrorCode.ADMIN_REQUIRED: "Administrator access required",
}

# Recovery suggestions for clients
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.DATES_UNAVAILABLE: "Pick a range that does not include booked days",
    ErrorCode.DATE_NOT_SELECTABLE: "Pick a future date marked as available",
    ErrorCode.INVALID_GUEST_COUNT: "Choose at least one guest and no more than the maximum",
    ErrorCode.INCOMPLETE_SELECTION: "Click a check-out date to complete the range",
    ErrorCode.RANGE_NOT_SUPPORTED: "Remove the check-out date and book a single day",
    ErrorCode.LISTING_NOT_FOUND: "Verify the listing ID",
    ErrorCode.LISTING_NOT_PUBLISHED: "Choose another listing from the catalog",
    ErrorCode.BOOKING_NOT_FOUND: "Verify the booking ID",
    ErrorCode.INVALID_PAYMENT_TRANSITION: "Reload the booking and check its current payment status",
    ErrorCode.INVALID_BOOKING_RANGE: "Correct the booking's dates in the back office",
    ErrorCode.AUTH_REQUIRED: "Sign in and retry with a bearer token",
    ErrorCode.SESSION_EXPIRED: "Sign in again to refresh the session",
    ErrorCode.ADMIN_REQUIRED: "Sign in with an administrator account",
}


class ErrorResponse(BaseModel):
    """Standard error body returned for domain failures."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised by booking operations.

    Can be caught and converted to an ErrorResponse for API responses.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.details)


class BookingDataError(BookingError):
    """Stored booking data violates an integrity rule."""
