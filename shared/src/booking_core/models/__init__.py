"""Pydantic models for Safari Bookings data entities."""

from .booking import Booking, BookingCreate
from .calendar import CalendarMonth, DayClassification
from .enums import (
    DayTag,
    ListingCategory,
    ListingStatus,
    PaymentPlan,
    PaymentStatus,
    PricingBasis,
    SelectionPhase,
)
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    BookingDataError,
    BookingError,
    ErrorCode,
    ErrorResponse,
)
from .listing import Listing, ListingSummary
from .pricing import PriceQuote
from .selection import DateSelection, SelectionOutcome
from .session import UserSession

__all__ = [
    # Enums
    "DayTag",
    "ListingCategory",
    "ListingStatus",
    "PaymentPlan",
    "PaymentStatus",
    "PricingBasis",
    "SelectionPhase",
    # Listing
    "Listing",
    "ListingSummary",
    # Booking
    "Booking",
    "BookingCreate",
    # Calendar & selection
    "CalendarMonth",
    "DayClassification",
    "DateSelection",
    "SelectionOutcome",
    # Pricing
    "PriceQuote",
    # Session
    "UserSession",
    # Errors
    "BookingDataError",
    "BookingError",
    "ErrorCode",
    "ErrorResponse",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
]
