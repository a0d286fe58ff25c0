"""FastAPI dependency injection providers for shared services.

Services are created lazily and cached with @lru_cache so every request
reuses the same instances.

Service Dependency Graph:
    DynamoDBService (singleton via get_dynamodb_service)
        ├── ListingService
        ├── AvailabilityService
        └── BookingService (ListingService, AvailabilityService)

Testing:
    Use reset_services() to clear cached instances between tests.
"""

import datetime as dt
from functools import lru_cache

from fastapi import Depends

from booking_core.models.errors import BookingError, ErrorCode
from booking_core.models.listing import Listing
from booking_core.services.availability import AvailabilityService
from booking_core.services.booking import BookingService
from booking_core.services.catalog import ListingService
from booking_core.services.dynamodb import get_dynamodb_service


@lru_cache
def get_listing_service() -> ListingService:
    """Get cached ListingService instance."""
    return ListingService(db=get_dynamodb_service())


@lru_cache
def get_availability_service() -> AvailabilityService:
    """Get cached AvailabilityService instance."""
    return AvailabilityService(db=get_dynamodb_service())


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService instance.

    Returns:
        BookingService configured with all required dependencies.
    """
    return BookingService(
        db=get_dynamodb_service(),
        catalog=get_listing_service(),
        availability=get_availability_service(),
    )


def reset_services() -> None:
    """Clear all cached service instances.

    Also resets the underlying DynamoDB singleton.
    """
    from booking_core.services.dynamodb import reset_dynamodb_service

    get_listing_service.cache_clear()
    get_availability_service.cache_clear()
    get_booking_service.cache_clear()

    reset_dynamodb_service()


def get_today() -> dt.date:
    """Current date for calendar and booking rules. Overridden in tests."""
    return dt.date.today()


def get_published_listing(
    listing_id: str,
    catalog: ListingService = Depends(get_listing_service),
) -> Listing:
    """Resolve the {listing_id} path parameter to a published listing.

    Drafts are hidden from the storefront and reported as not found.
    """
    listing = catalog.get_listing(listing_id)
    if listing is None or not listing.is_published:
        raise BookingError(ErrorCode.LISTING_NOT_FOUND, details={"listing_id": listing_id})
    return listing
