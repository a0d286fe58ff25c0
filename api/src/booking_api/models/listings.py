"""API models for the listing catalog."""

from pydantic import BaseModel, Field

from booking_core.models.listing import ListingSummary


class ListingListResponse(BaseModel):
    """Published listings for a storefront page."""

    listings: list[ListingSummary]
    total_count: int = Field(..., ge=0)
