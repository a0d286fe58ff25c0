"""Price calculation for selections.

Stays with a complete range are priced per night per guest; tours,
volunteer placements and single-date selections are priced per person.
All amounts stay in the base currency.
"""

from decimal import Decimal

from booking_core import config
from booking_core.models.enums import PricingBasis
from booking_core.models.errors import BookingError, ErrorCode
from booking_core.models.listing import Listing
from booking_core.models.pricing import PriceQuote
from booking_core.models.selection import DateSelection


def count_nights(selection: DateSelection | None) -> int:
    """Whole days between check-in and check-out; 0 unless the range is complete."""
    if selection is None or not selection.is_complete_range:
        return 0
    return (selection.end - selection.start).days  # type: ignore[operator]


def validate_guests(guests: int) -> None:
    """Guests must be a whole number of at least one."""
    if isinstance(guests, bool) or not isinstance(guests, int) or guests < 1:
        raise BookingError(
            ErrorCode.INVALID_GUEST_COUNT,
            details={"requested": str(guests), "minimum": "1"},
        )


def _is_nightly(listing: Listing, selection: DateSelection | None) -> bool:
    return (
        listing.pricing_basis == PricingBasis.PER_NIGHT
        and selection is not None
        and selection.is_complete_range
    )


def compute_total(
    listing: Listing,
    selection: DateSelection | None,
    guests: int,
) -> Decimal:
    """Compute the total payable for a selection.

    Args:
        listing: Listing being booked
        selection: Single date or check-in/check-out range
        guests: Guest or traveller count (>= 1)

    Returns:
        Total in the base currency

    Raises:
        BookingError: INVALID_GUEST_COUNT when guests < 1
    """
    validate_guests(guests)

    if _is_nightly(listing, selection):
        # Floor guards a degenerate zero-night range
        nights = max(1, count_nights(selection))
        return listing.price * nights * guests

    return listing.price * guests


def build_quote(
    listing: Listing,
    selection: DateSelection | None,
    guests: int,
    currency: str | None = None,
) -> PriceQuote:
    """Wrap compute_total in a PriceQuote with the pricing breakdown."""
    total = compute_total(listing, selection, guests)
    nightly = _is_nightly(listing, selection)

    return PriceQuote(
        listing_id=listing.listing_id,
        category=listing.category,
        pricing_basis=listing.pricing_basis if nightly else PricingBasis.PER_PERSON,
        unit_price=listing.price,
        nights=max(1, count_nights(selection)) if nightly else None,
        guests=guests,
        check_in=selection.start if selection else None,
        check_out=selection.end if selection else None,
        total_amount=total,
        currency=currency or config.get_base_currency(),
    )


def quantize_amount(amount: Decimal) -> Decimal:
    """Round an amount to cents for storage."""
    return amount.quantize(Decimal("0.01"))
