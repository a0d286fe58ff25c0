"""Pricing endpoint for selection quotes.

Amounts are in the base currency; clients convert for display.
"""

from fastapi import APIRouter, Depends

from booking_api.dependencies import get_published_listing
from booking_api.models.pricing import QuoteRequest
from booking_core.models.listing import Listing
from booking_core.models.pricing import PriceQuote
from booking_core.services.pricing import build_quote

router = APIRouter(tags=["pricing"])


@router.post(
    "/listings/{listing_id}/quote",
    summary="Quote a selection",
    description="""
Calculate the total payable for a selection and party size.

**Notes:**
- Stays with a complete range: price × nights × guests
- Tours, volunteer placements and single dates: price × travellers
- A stay range is billed at least one night
""",
    response_model=PriceQuote,
    responses={
        200: {
            "description": "Quote calculated",
            "content": {
                "application/json": {
                    "example": {
                        "listing_id": "LST-STAY-001",
                        "category": "stay",
                        "pricing_basis": "per_night",
                        "unit_price": "100.00",
                        "nights": 4,
                        "guests": 2,
                        "check_in": "2025-03-01",
                        "check_out": "2025-03-05",
                        "total_amount": "800.00",
                        "currency": "USD",
                    }
                }
            },
        },
        400: {"description": "Guest count below one"},
        404: {"description": "Listing not found or not published"},
    },
)
async def quote_selection(
    body: QuoteRequest,
    listing: Listing = Depends(get_published_listing),
) -> PriceQuote:
    """Price the selection without touching availability."""
    return build_quote(listing, body.selection, body.guests)
