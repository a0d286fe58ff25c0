"""Booking endpoints for travellers.

Provides REST endpoints for:
- Creating a booking (session required)
- Listing the caller's bookings (session required)

The traveller is identified by the bearer token's sub claim.
"""

import datetime as dt

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from booking_api.dependencies import get_booking_service, get_today
from booking_api.models.bookings import BookingListResponse
from booking_api.security import get_current_session
from booking_core.models.booking import Booking, BookingCreate
from booking_core.models.session import UserSession
from booking_core.services.booking import BookingService

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings",
    summary="Create booking",
    description="""
Create a booking for a published listing.

**Requires a bearer token.**

The dates are validated with the same rules as the calendar and the
total is computed server-side in the base currency.

**Notes:**
- Stays need `booking_date` and `check_out_date`
- Tours and volunteer placements take `booking_date` only
- New bookings start with payment status `pending`
""",
    response_model=Booking,
    status_code=HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid guest count, missing or unsupported check-out"},
        401: {"description": "Bearer token missing or expired"},
        404: {"description": "Listing not found or not published"},
        409: {"description": "Dates already booked"},
    },
)
async def create_booking(
    body: BookingCreate,
    session: UserSession = Depends(get_current_session),
    today: dt.date = Depends(get_today),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    """Create a booking for the signed-in traveller."""
    return service.create_booking(body, user_id=session.user_id, today=today)


@router.get(
    "/bookings/me",
    summary="List my bookings",
    response_model=BookingListResponse,
    responses={401: {"description": "Bearer token missing or expired"}},
)
async def list_my_bookings(
    session: UserSession = Depends(get_current_session),
    service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    """List the caller's bookings, newest first."""
    bookings = service.list_user_bookings(session.user_id)
    return BookingListResponse(bookings=bookings, total_count=len(bookings))
