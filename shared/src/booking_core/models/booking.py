"""Booking models for stored bookings and booking requests."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from .enums import PaymentPlan, PaymentStatus


class Booking(BaseModel):
    """A stored booking for a listing.

    A booking with ``check_out_date`` covers every day from
    ``booking_date`` through ``check_out_date`` inclusive; without it the
    booking occupies ``booking_date`` alone. Amounts are in the base
    currency. Stored dates are not re-validated here so that corrupt
    records can still be read and reported.
    """

    booking_id: str = Field(..., description="Unique booking ID")
    listing_id: str = Field(..., description="Reference to Listing")
    user_id: str = Field(..., description="Hosted-auth user ID of the traveller")
    booking_date: dt.date = Field(..., description="Start date (YYYY-MM-DD)")
    check_out_date: dt.date | None = Field(
        default=None,
        description="Inclusive end date for range bookings (YYYY-MM-DD)",
    )
    guests: int = Field(default=1, ge=1, description="Guests or travellers")
    total_amount: Decimal = Field(..., ge=0, description="Total in base currency")
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING)
    payment_plan: PaymentPlan = Field(default=PaymentPlan.ARRIVAL)
    volunteer_motivation: str | None = None
    volunteer_duration: str | None = None
    created_at: dt.datetime = Field(..., description="Creation timestamp")
    updated_at: dt.datetime | None = None


class BookingCreate(BaseModel):
    """Data required to create a booking."""

    listing_id: str
    booking_date: dt.date
    check_out_date: dt.date | None = None
    guests: int = Field(default=1)
    payment_plan: PaymentPlan = PaymentPlan.ARRIVAL
    volunteer_motivation: str | None = Field(default=None, max_length=2000)
    volunteer_duration: str | None = Field(default=None, max_length=100)

    @model_validator(mode="after")
    def _check_out_after_start(self) -> "BookingCreate":
        if self.check_out_date is not None and self.check_out_date <= self.booking_date:
            raise ValueError("check_out_date must be after booking_date")
        return self
