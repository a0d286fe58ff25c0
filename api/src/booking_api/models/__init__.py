"""API request/response models.

Domain models live in booking_core.models; these only wrap them for the
HTTP layer.
"""

from booking_api.models.availability import BookedDatesResponse, SelectionRequest
from booking_api.models.bookings import BookingListResponse, PaymentStatusUpdateRequest
from booking_api.models.listings import ListingListResponse
from booking_api.models.pricing import QuoteRequest

__all__ = [
    "BookedDatesResponse",
    "BookingListResponse",
    "ListingListResponse",
    "PaymentStatusUpdateRequest",
    "QuoteRequest",
    "SelectionRequest",
]
