"""API models for calendar and selection endpoints."""

import datetime as dt

from pydantic import BaseModel, Field

from booking_core.models.selection import DateSelection


class BookedDatesResponse(BaseModel):
    """Days already taken for a listing."""

    listing_id: str
    dates: list[str] = Field(
        ...,
        description="Booked dates in ascending order (YYYY-MM-DD)",
        examples=[["2025-02-10", "2025-02-11"]],
    )
    count: int = Field(..., ge=0)


class SelectionRequest(BaseModel):
    """One calendar click applied to the client's current selection."""

    selection: DateSelection = Field(
        default_factory=DateSelection,
        description="Selection held by the client before the click",
    )
    date: dt.date = Field(..., description="Clicked day (YYYY-MM-DD)", examples=["2025-03-05"])
