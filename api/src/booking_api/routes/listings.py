"""Listing catalog endpoints.

Provides REST endpoints for:
- Browsing published listings by category
- Reading a single listing
- Reading the days a listing is already booked
"""

from fastapi import APIRouter, Depends, Query

from booking_api.dependencies import (
    get_availability_service,
    get_listing_service,
    get_published_listing,
)
from booking_api.models.availability import BookedDatesResponse
from booking_api.models.listings import ListingListResponse
from booking_core.models.enums import ListingCategory
from booking_core.models.listing import Listing, ListingSummary
from booking_core.services.availability import AvailabilityService
from booking_core.services.catalog import ListingService

router = APIRouter(tags=["listings"])


@router.get(
    "/listings",
    summary="List published listings",
    description="""
List published tours, stays and volunteer placements.

**Notes:**
- Drafts are never returned
- Prices are in the base currency
""",
    response_model=ListingListResponse,
)
async def list_listings(
    category: ListingCategory | None = Query(
        default=None,
        description="Only return this category",
        examples=["stay"],
    ),
    catalog: ListingService = Depends(get_listing_service),
) -> ListingListResponse:
    """List published listings, optionally for one category."""
    listings = catalog.list_listings(category=category)
    return ListingListResponse(
        listings=[ListingSummary.from_listing(listing) for listing in listings],
        total_count=len(listings),
    )


@router.get(
    "/listings/{listing_id}",
    summary="Get listing",
    response_model=Listing,
    responses={404: {"description": "Listing not found or not published"}},
)
async def get_listing(
    listing: Listing = Depends(get_published_listing),
) -> Listing:
    """Get a published listing with its availability whitelist."""
    return listing


@router.get(
    "/listings/{listing_id}/booked-dates",
    summary="Get booked dates",
    description="""
Get every day already occupied by a booking of this listing.

**Notes:**
- Range bookings occupy their check-out day as well
- Dates are sorted ascending (YYYY-MM-DD)
""",
    response_model=BookedDatesResponse,
    responses={
        404: {"description": "Listing not found or not published"},
        500: {"description": "A stored booking ends before it starts"},
    },
)
async def get_booked_dates(
    listing: Listing = Depends(get_published_listing),
    service: AvailabilityService = Depends(get_availability_service),
) -> BookedDatesResponse:
    """Rebuild and return the listing's booked-date set."""
    dates = sorted(service.get_booked_dates(listing.listing_id))
    return BookedDatesResponse(
        listing_id=listing.listing_id,
        dates=dates,
        count=len(dates),
    )
