"""Listing model for bookable products."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from .enums import ListingCategory, ListingStatus, PricingBasis


class Listing(BaseModel):
    """A bookable product: a tour, a stay or a volunteer placement.

    Prices are in the base currency. ``availability`` is an optional
    whitelist of ISO dates; when it is missing or empty every future
    date is open.
    """

    listing_id: str = Field(..., description="Unique listing ID")
    title: str = Field(..., min_length=1, description="Display title")
    category: ListingCategory = Field(..., description="Product category")
    price: Decimal = Field(
        ...,
        ge=0,
        description="Nightly rate for stays, per-person price otherwise",
    )
    availability: list[str] | None = Field(
        default=None,
        description="Explicitly available dates (YYYY-MM-DD)",
        examples=[["2025-07-15", "2025-07-16"]],
    )
    status: ListingStatus = Field(default=ListingStatus.DRAFT)
    sub_category: str | None = None
    description: str | None = None
    location: str | None = None

    @field_validator("availability")
    @classmethod
    def _normalize_availability(cls, value: list[str] | None) -> list[str] | None:
        """Reject malformed dates and store them sorted and de-duplicated."""
        if value is None:
            return None
        return sorted({dt.date.fromisoformat(v).isoformat() for v in value})

    @property
    def uses_date_range(self) -> bool:
        """Stays are booked check-in to check-out; everything else per day."""
        return self.category == ListingCategory.STAY

    @property
    def pricing_basis(self) -> PricingBasis:
        """Unit the listing price applies to."""
        if self.category == ListingCategory.STAY:
            return PricingBasis.PER_NIGHT
        return PricingBasis.PER_PERSON

    @property
    def is_published(self) -> bool:
        return self.status == ListingStatus.PUBLISHED


class ListingSummary(BaseModel):
    """Condensed listing for catalog pages."""

    listing_id: str
    title: str
    category: ListingCategory
    price: Decimal
    location: str | None = None

    @classmethod
    def from_listing(cls, listing: Listing) -> "ListingSummary":
        return cls(
            listing_id=listing.listing_id,
            title=listing.title,
            category=listing.category,
            price=listing.price,
            location=listing.location,
        )
