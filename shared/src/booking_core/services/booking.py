"""Booking workflow and back-office payment-status changes."""

import datetime as dt
import uuid
from typing import TYPE_CHECKING

from booking_core import config
from booking_core.models.booking import Booking, BookingCreate
from booking_core.models.enums import PaymentStatus
from booking_core.models.errors import BookingError, ErrorCode
from booking_core.models.listing import Listing
from booking_core.models.selection import DateSelection
from booking_core.services.availability import booking_to_item, item_to_booking
from booking_core.services.pricing import compute_total, quantize_amount
from booking_core.utils.logging import get_logger, log_booking_operation

if TYPE_CHECKING:
    from .availability import AvailabilityService
    from .catalog import ListingService
    from .dynamodb import DynamoDBService

logger = get_logger(__name__)

# Payment statuses back-office staff may move a booking to
ALLOWED_PAYMENT_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset(
        {PaymentStatus.CONFIRMED, PaymentStatus.PARTIAL, PaymentStatus.PAID}
    ),
    PaymentStatus.CONFIRMED: frozenset({PaymentStatus.PARTIAL, PaymentStatus.PAID}),
    PaymentStatus.PARTIAL: frozenset({PaymentStatus.PAID}),
    PaymentStatus.PAID: frozenset(),
}


def can_transition(current: PaymentStatus, new: PaymentStatus) -> bool:
    return new in ALLOWED_PAYMENT_TRANSITIONS[current]


class BookingService:
    """Service for creating bookings and managing their payment status."""

    TABLE = "bookings"
    USER_INDEX = "user_id-index"

    def __init__(
        self,
        db: "DynamoDBService",
        catalog: "ListingService",
        availability: "AvailabilityService",
    ) -> None:
        """Initialize booking service.

        Args:
            db: DynamoDB service instance
            catalog: Listing service instance
            availability: Availability service instance
        """
        self.db = db
        self.catalog = catalog
        self.availability = availability

    def get_bookable_listing(self, listing_id: str) -> Listing:
        """Get a published listing or raise."""
        listing = self.catalog.get_listing(listing_id)
        if listing is None:
            raise BookingError(
                ErrorCode.LISTING_NOT_FOUND, details={"listing_id": listing_id}
            )
        if not listing.is_published:
            raise BookingError(
                ErrorCode.LISTING_NOT_PUBLISHED, details={"listing_id": listing_id}
            )
        return listing

    def create_booking(
        self,
        request: BookingCreate,
        user_id: str,
        today: dt.date,
    ) -> Booking:
        """Validate a selection, price it and store the booking.

        The selection is replayed through the listing's DatePicker so the
        same rules as the calendar apply: every clicked day must be
        selectable and a range may not cross a booked day.

        Args:
            request: Booking request
            user_id: Hosted-auth user ID of the traveller
            today: Current date

        Returns:
            The stored booking, payment status pending

        Raises:
            BookingError: Listing missing or unpublished, invalid guest
                count, incomplete or unsupported range, dates unavailable
        """
        listing = self.get_bookable_listing(request.listing_id)

        max_guests = config.get_max_guests()
        if request.guests < 1 or request.guests > max_guests:
            raise BookingError(
                ErrorCode.INVALID_GUEST_COUNT,
                details={"requested": str(request.guests), "maximum": str(max_guests)},
            )

        if listing.uses_date_range and request.check_out_date is None:
            raise BookingError(
                ErrorCode.INCOMPLETE_SELECTION,
                details={"listing_id": listing.listing_id},
            )
        if not listing.uses_date_range and request.check_out_date is not None:
            raise BookingError(
                ErrorCode.RANGE_NOT_SUPPORTED,
                details={"category": listing.category.value},
            )

        selection = self._replay_selection(listing, request, today)
        total = quantize_amount(compute_total(listing, selection, request.guests))

        booking = Booking(
            booking_id=f"BKG-{uuid.uuid4().hex[:12].upper()}",
            listing_id=listing.listing_id,
            user_id=user_id,
            booking_date=request.booking_date,
            check_out_date=request.check_out_date,
            guests=request.guests,
            total_amount=total,
            payment_status=PaymentStatus.PENDING,
            payment_plan=request.payment_plan,
            volunteer_motivation=request.volunteer_motivation,
            volunteer_duration=request.volunteer_duration,
            created_at=dt.datetime.now(dt.UTC),
        )

        stored = self.db.put_item(
            self.TABLE,
            booking_to_item(booking),
            condition_expression="attribute_not_exists(booking_id)",
        )
        if not stored:
            # Only reachable on a booking_id collision
            raise RuntimeError(f"Booking {booking.booking_id} already exists")

        log_booking_operation(
            logger,
            "create_booking",
            booking_id=booking.booking_id,
            listing_id=listing.listing_id,
            total_amount=booking.total_amount,
            status=booking.payment_status.value,
        )
        return booking

    def _replay_selection(
        self,
        listing: Listing,
        request: BookingCreate,
        today: dt.date,
    ) -> DateSelection:
        picker = self.availability.get_date_picker(listing, today)

        clicks = [request.booking_date]
        if request.check_out_date is not None:
            clicks.append(request.check_out_date)

        for day in clicks:
            outcome = picker.click(day)
            if not outcome.accepted:
                details = {"date": day.isoformat()}
                if outcome.conflicting_dates:
                    details["conflicting_dates"] = ",".join(outcome.conflicting_dates)
                log_booking_operation(
                    logger,
                    "create_booking",
                    listing_id=listing.listing_id,
                    rejected=outcome.error_code.value if outcome.error_code else "unknown",
                    **details,
                )
                raise BookingError(
                    outcome.error_code or ErrorCode.DATES_UNAVAILABLE,
                    details=details,
                )

        return picker.selection

    def get_booking(self, booking_id: str) -> Booking | None:
        """Get a booking by ID."""
        item = self.db.get_item(self.TABLE, {"booking_id": booking_id})
        if not item:
            return None
        return item_to_booking(item)

    def list_user_bookings(self, user_id: str) -> list[Booking]:
        """Get a traveller's bookings, newest first."""
        items = self.db.query_by_gsi(
            table=self.TABLE,
            index_name=self.USER_INDEX,
            partition_key_name="user_id",
            partition_key_value=user_id,
        )
        bookings = [item_to_booking(item) for item in items]
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    def list_bookings(self, listing_id: str | None = None) -> list[Booking]:
        """Get bookings for the back office, newest first."""
        if listing_id:
            bookings = self.availability.get_bookings(listing_id)
        else:
            bookings = [item_to_booking(item) for item in self.db.scan(self.TABLE)]
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    def update_payment_status(
        self,
        booking_id: str,
        new_status: PaymentStatus,
        actor_id: str,
    ) -> Booking:
        """Move a booking to a new payment status.

        The write is conditional on the status read, so two staff members
        changing the same booking cannot both succeed.

        Args:
            booking_id: Booking to update
            new_status: Target payment status
            actor_id: User ID of the staff member

        Returns:
            The updated booking

        Raises:
            BookingError: BOOKING_NOT_FOUND, or INVALID_PAYMENT_TRANSITION
                when the move is not allowed or the status changed meanwhile
        """
        booking = self.get_booking(booking_id)
        if booking is None:
            raise BookingError(
                ErrorCode.BOOKING_NOT_FOUND, details={"booking_id": booking_id}
            )

        current = booking.payment_status
        if not can_transition(current, new_status):
            raise BookingError(
                ErrorCode.INVALID_PAYMENT_TRANSITION,
                details={"from": current.value, "to": new_status.value},
            )

        now = dt.datetime.now(dt.UTC)
        attrs = self.db.update_item(
            table=self.TABLE,
            key={"booking_id": booking_id},
            update_expression="SET #s = :new, updated_at = :now",
            expression_attribute_names={"#s": "payment_status"},
            expression_attribute_values={
                ":new": new_status.value,
                ":current": current.value,
                ":now": now.isoformat(),
            },
            condition_expression="#s = :current",
        )
        if attrs is None:
            raise BookingError(
                ErrorCode.INVALID_PAYMENT_TRANSITION,
                details={
                    "from": current.value,
                    "to": new_status.value,
                    "reason": "concurrent_update",
                },
            )

        log_booking_operation(
            logger,
            "update_payment_status",
            booking_id=booking_id,
            listing_id=booking.listing_id,
            status=new_status.value,
            previous_status=current.value,
            actor_id=actor_id,
        )
        return item_to_booking(attrs)
