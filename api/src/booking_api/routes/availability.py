"""Availability endpoints for calendars and date selection.

Provides REST endpoints for:
- Monthly calendar views with per-day classification
- Applying a calendar click to the client's current selection

All dates are in YYYY-MM-DD format.
"""

import datetime as dt
import re

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.status import HTTP_400_BAD_REQUEST

from booking_api.dependencies import (
    get_availability_service,
    get_published_listing,
    get_today,
)
from booking_api.models.availability import SelectionRequest
from booking_core.models.calendar import CalendarMonth
from booking_core.models.listing import Listing
from booking_core.models.selection import DateSelection, SelectionOutcome
from booking_core.services.availability import AvailabilityService

router = APIRouter(tags=["availability"])


def _parse_month(month: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month) or raise 400."""
    if not re.match(r"^\d{4}-\d{2}$", month):
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="Invalid month format. Expected YYYY-MM (e.g., 2025-07)",
        )

    year, month_num = map(int, month.split("-"))
    if month_num < 1 or month_num > 12:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="Invalid month: must be between 01 and 12",
        )
    if year < dt.MINYEAR:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail=f"Invalid year: must be {dt.MINYEAR:04d} or later",
        )
    return year, month_num


@router.get(
    "/listings/{listing_id}/calendar/{month}",
    summary="Get monthly calendar",
    description="""
Get every day of a month classified for one listing.

Each day carries tags (`past`, `unavailable`, `booked`, `available`,
`selected`, `in_range`, `today`) and a `selectable` flag. Pass the
client's current selection as `start`/`end` to get selection tags.

**Notes:**
- Month format: YYYY-MM (e.g., 2025-07)
- Past days are never selectable
- Booked beats unavailable when both apply
""",
    response_model=CalendarMonth,
    responses={
        400: {"description": "Invalid month format or selection"},
        404: {"description": "Listing not found or not published"},
    },
)
async def get_calendar(
    month: str,
    start: dt.date | None = Query(default=None, description="Selected or check-in date"),
    end: dt.date | None = Query(default=None, description="Check-out date"),
    listing: Listing = Depends(get_published_listing),
    today: dt.date = Depends(get_today),
    service: AvailabilityService = Depends(get_availability_service),
) -> CalendarMonth:
    """Classify every day of the requested month."""
    year, month_num = _parse_month(month)

    if end is not None and (start is None or end <= start):
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail="end requires a start date before it",
        )

    selection = DateSelection(start=start, end=end) if start else None
    return service.get_calendar(listing, year, month_num, today, selection=selection)


@router.post(
    "/listings/{listing_id}/selection",
    summary="Apply a calendar click",
    description="""
Apply one calendar click to the client's current selection.

Stays use a two-click check-in/check-out gesture; tours and volunteer
placements replace the selected date on every click.

**Notes:**
- Non-selectable days leave the selection unchanged (`ERR_002`)
- A range crossing a booked day is rejected (`ERR_001`) and the
  clicked day becomes the new check-in
- Rejections return 200 with `accepted: false`; they are user choices,
  not request errors
""",
    response_model=SelectionOutcome,
    responses={404: {"description": "Listing not found or not published"}},
)
async def apply_selection(
    body: SelectionRequest,
    listing: Listing = Depends(get_published_listing),
    today: dt.date = Depends(get_today),
    service: AvailabilityService = Depends(get_availability_service),
) -> SelectionOutcome:
    """Rebuild the listing's date picker and apply the click."""
    picker = service.get_date_picker(listing, today, selection=body.selection)
    return picker.click(body.date)
