"""Price quote model."""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from .enums import ListingCategory, PricingBasis


class PriceQuote(BaseModel):
    """Breakdown of the total payable for a selection.

    All amounts are in the base currency; display conversion happens
    in the client.
    """

    listing_id: str
    category: ListingCategory
    pricing_basis: PricingBasis
    unit_price: Decimal = Field(..., ge=0, description="Listing price")
    nights: int | None = Field(
        default=None,
        ge=1,
        description="Billed nights for complete stay ranges",
    )
    guests: int = Field(..., ge=1)
    check_in: dt.date | None = None
    check_out: dt.date | None = None
    total_amount: Decimal = Field(..., ge=0)
    currency: str = Field(default="USD", description="Base currency code")
