"""API models for price quotes."""

from pydantic import BaseModel, Field

from booking_core.models.selection import DateSelection


class QuoteRequest(BaseModel):
    """Selection and party size to price."""

    selection: DateSelection = Field(default_factory=DateSelection)
    guests: int = Field(default=1, description="Guests for stays, travellers otherwise")
