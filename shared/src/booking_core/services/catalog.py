"""Listing catalog backed by the listings table."""

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from boto3.dynamodb.conditions import Attr

from booking_core.models.enums import ListingCategory, ListingStatus
from booking_core.models.listing import Listing

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService


class ListingService:
    """Read access to listings."""

    TABLE = "listings"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize listing service.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def get_listing(self, listing_id: str) -> Listing | None:
        """Get a listing by ID, published or not."""
        item = self.db.get_item(self.TABLE, {"listing_id": listing_id})
        if not item:
            return None
        return self._item_to_listing(item)

    def list_listings(
        self,
        category: ListingCategory | None = None,
        published_only: bool = True,
    ) -> list[Listing]:
        """List listings, optionally filtered by category.

        Args:
            category: Only return this category
            published_only: Skip drafts (storefront view)

        Returns:
            Listings sorted by title
        """
        condition = None
        if category is not None:
            condition = Attr("category").eq(category.value)
        if published_only:
            published = Attr("status").eq(ListingStatus.PUBLISHED.value)
            condition = published if condition is None else condition & published

        items = self.db.scan(self.TABLE, filter_expression=condition)
        listings = [self._item_to_listing(item) for item in items]
        return sorted(listings, key=lambda listing: listing.title)

    def _item_to_listing(self, item: dict[str, Any]) -> Listing:
        """Convert DynamoDB item to Listing model."""
        availability = item.get("availability")
        return Listing(
            listing_id=item["listing_id"],
            title=item["title"],
            category=ListingCategory(item["category"]),
            price=Decimal(str(item["price"])),
            availability=list(availability) if availability else None,
            status=ListingStatus(item.get("status", ListingStatus.DRAFT.value)),
            sub_category=item.get("sub_category"),
            description=item.get("description"),
            location=item.get("location"),
        )
