"""API models for booking endpoints."""

from pydantic import BaseModel, Field

from booking_core.models.booking import Booking
from booking_core.models.enums import PaymentStatus


class BookingListResponse(BaseModel):
    """A list of bookings with a count."""

    bookings: list[Booking]
    total_count: int = Field(..., ge=0)


class PaymentStatusUpdateRequest(BaseModel):
    """Back-office payment status change."""

    payment_status: PaymentStatus = Field(..., examples=["paid"])
