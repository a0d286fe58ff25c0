"""Enumeration types for Safari Bookings data models."""

from enum import Enum


class ListingCategory(str, Enum):
    """Kind of bookable product."""

    TOUR = "tour"
    STAY = "stay"
    VOLUNTEER = "volunteer"


class ListingStatus(str, Enum):
    """Publication status of a listing."""

    DRAFT = "draft"
    PUBLISHED = "published"


class PaymentStatus(str, Enum):
    """Payment status for a booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PAID = "paid"
    PARTIAL = "partial"


class PaymentPlan(str, Enum):
    """How the traveller intends to pay."""

    ARRIVAL = "arrival"
    FULL = "full"
    DEPOSIT = "deposit"
    LIPA_MDOGO_MDOGO = "lipa_mdogo_mdogo"  # Instalments


class DayTag(str, Enum):
    """Calendar classification tags. A day may carry several."""

    PAST = "past"
    UNAVAILABLE = "unavailable"
    BOOKED = "booked"
    AVAILABLE = "available"
    SELECTED = "selected"
    IN_RANGE = "in_range"
    TODAY = "today"


class SelectionPhase(str, Enum):
    """Phase of the two-click range selection gesture."""

    EMPTY = "empty"
    START_ONLY = "start_only"
    COMPLETE = "complete"


class PricingBasis(str, Enum):
    """Unit the listing price applies to."""

    PER_NIGHT = "per_night"
    PER_PERSON = "per_person"
