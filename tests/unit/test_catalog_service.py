"""Tests for ListingService against mocked DynamoDB tables."""

from decimal import Decimal
from typing import Any

from booking_core.models.enums import ListingCategory, ListingStatus
from booking_core.services.catalog import ListingService


class TestListingService:
    """Tests for catalog reads."""

    def test_get_listing(self, seeded_db: Any) -> None:
        listing = ListingService(seeded_db).get_listing("LST-TOUR-001")

        assert listing is not None
        assert listing.category == ListingCategory.TOUR
        assert listing.price == Decimal("250.00")
        assert listing.availability == ["2025-02-10", "2025-02-11", "2025-02-12"]

    def test_get_draft_listing(self, seeded_db: Any) -> None:
        listing = ListingService(seeded_db).get_listing("LST-DRAFT-001")

        assert listing is not None
        assert listing.status == ListingStatus.DRAFT

    def test_get_missing_listing(self, seeded_db: Any) -> None:
        assert ListingService(seeded_db).get_listing("LST-NOPE") is None

    def test_list_published_sorted_by_title(self, seeded_db: Any) -> None:
        listings = ListingService(seeded_db).list_listings()

        assert [listing.title for listing in listings] == [
            "Arusha School Teaching",
            "Kilimanjaro Day Hike",
            "Serengeti Tented Camp",
        ]

    def test_list_by_category(self, seeded_db: Any) -> None:
        listings = ListingService(seeded_db).list_listings(category=ListingCategory.STAY)

        assert [listing.listing_id for listing in listings] == ["LST-STAY-001"]

    def test_list_including_drafts(self, seeded_db: Any) -> None:
        listings = ListingService(seeded_db).list_listings(
            category=ListingCategory.STAY, published_only=False
        )

        assert {listing.listing_id for listing in listings} == {
            "LST-STAY-001",
            "LST-DRAFT-001",
        }
