"""Availability service: booked dates, calendars and date pickers per listing."""

import datetime as dt
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from booking_core.models.booking import Booking
from booking_core.models.calendar import CalendarMonth
from booking_core.models.enums import PaymentPlan, PaymentStatus
from booking_core.models.errors import BookingDataError
from booking_core.models.listing import Listing
from booking_core.models.selection import DateSelection
from booking_core.services.calendar import build_booked_date_set
from booking_core.services.selection import DatePicker
from booking_core.utils.logging import get_logger

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService

logger = get_logger(__name__)


class AvailabilityService:
    """Service for availability checks built on a listing's bookings.

    The booked-date set is rebuilt from a fresh read on every call so a
    stale calendar never outlives a booking change.
    """

    TABLE = "bookings"
    LISTING_INDEX = "listing_id-index"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize availability service.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def get_bookings(self, listing_id: str) -> list[Booking]:
        """Get every booking of a listing, ordered by start date."""
        items = self.db.query_by_gsi(
            table=self.TABLE,
            index_name=self.LISTING_INDEX,
            partition_key_name="listing_id",
            partition_key_value=listing_id,
        )
        bookings = [item_to_booking(item) for item in items]
        return sorted(bookings, key=lambda b: b.booking_date)

    def get_booked_dates(self, listing_id: str) -> set[str]:
        """Get the BookedDateSet of a listing.

        Raises:
            BookingDataError: A stored booking ends before it starts
        """
        bookings = self.get_bookings(listing_id)
        try:
            return build_booked_date_set(bookings)
        except BookingDataError as e:
            logger.error(
                "Corrupt booking data for listing %s: %s",
                listing_id,
                e.details,
                extra={"listing_id": listing_id},
            )
            raise

    def get_date_picker(
        self,
        listing: Listing,
        today: dt.date,
        selection: DateSelection | None = None,
    ) -> DatePicker:
        """Build a DatePicker for a listing from its current bookings."""
        booked = self.get_booked_dates(listing.listing_id)
        return DatePicker(listing, booked, today, selection=selection)

    def get_calendar(
        self,
        listing: Listing,
        year: int,
        month: int,
        today: dt.date,
        selection: DateSelection | None = None,
    ) -> CalendarMonth:
        """Classify every day of a month for a listing."""
        picker = self.get_date_picker(listing, today, selection=selection)
        return picker.calendar(year, month)


def item_to_booking(item: dict[str, Any]) -> Booking:
    """Convert DynamoDB item to Booking model."""
    check_out = item.get("check_out_date")
    updated_at = item.get("updated_at")
    return Booking(
        booking_id=item["booking_id"],
        listing_id=item["listing_id"],
        user_id=item["user_id"],
        booking_date=dt.date.fromisoformat(item["booking_date"]),
        check_out_date=dt.date.fromisoformat(check_out) if check_out else None,
        guests=int(item.get("guests", 1)),
        total_amount=Decimal(str(item["total_amount"])),
        payment_status=PaymentStatus(item.get("payment_status", PaymentStatus.PENDING.value)),
        payment_plan=PaymentPlan(item.get("payment_plan", PaymentPlan.ARRIVAL.value)),
        volunteer_motivation=item.get("volunteer_motivation"),
        volunteer_duration=item.get("volunteer_duration"),
        created_at=dt.datetime.fromisoformat(item["created_at"]),
        updated_at=dt.datetime.fromisoformat(updated_at) if updated_at else None,
    )


def booking_to_item(booking: Booking) -> dict[str, Any]:
    """Convert Booking model to a DynamoDB item."""
    item: dict[str, Any] = {
        "booking_id": booking.booking_id,
        "listing_id": booking.listing_id,
        "user_id": booking.user_id,
        "booking_date": booking.booking_date.isoformat(),
        "guests": booking.guests,
        "total_amount": booking.total_amount,
        "payment_status": booking.payment_status.value,
        "payment_plan": booking.payment_plan.value,
        "created_at": booking.created_at.isoformat(),
    }
    if booking.check_out_date:
        item["check_out_date"] = booking.check_out_date.isoformat()
    if booking.volunteer_motivation:
        item["volunteer_motivation"] = booking.volunteer_motivation
    if booking.volunteer_duration:
        item["volunteer_duration"] = booking.volunteer_duration
    if booking.updated_at:
        item["updated_at"] = booking.updated_at.isoformat()
    return item
