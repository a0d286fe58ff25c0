"""Back-office booking endpoints.

All routes require a bearer token whose user metadata carries the
``admin`` role.
"""

from fastapi import APIRouter, Depends, Query

from booking_api.dependencies import get_booking_service
from booking_api.models.bookings import BookingListResponse, PaymentStatusUpdateRequest
from booking_api.security import require_admin
from booking_core.models.booking import Booking
from booking_core.models.session import UserSession
from booking_core.services.booking import BookingService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/bookings",
    summary="List bookings",
    response_model=BookingListResponse,
    responses={
        401: {"description": "Bearer token missing or expired"},
        403: {"description": "Caller is not an administrator"},
    },
)
async def list_bookings(
    listing_id: str | None = Query(default=None, description="Only this listing"),
    _admin: UserSession = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
) -> BookingListResponse:
    """List bookings, newest first."""
    bookings = service.list_bookings(listing_id=listing_id)
    return BookingListResponse(bookings=bookings, total_count=len(bookings))


@router.patch(
    "/bookings/{booking_id}/payment-status",
    summary="Update payment status",
    description="""
Move a booking to a new payment status.

**Allowed transitions:**
- pending → confirmed, partial, paid
- confirmed → partial, paid
- partial → paid
- paid is final
""",
    response_model=Booking,
    responses={
        401: {"description": "Bearer token missing or expired"},
        403: {"description": "Caller is not an administrator"},
        404: {"description": "Booking not found"},
        409: {"description": "Transition not allowed or status changed meanwhile"},
    },
)
async def update_payment_status(
    booking_id: str,
    body: PaymentStatusUpdateRequest,
    admin: UserSession = Depends(require_admin),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    """Apply a payment status transition."""
    return service.update_payment_status(
        booking_id, body.payment_status, actor_id=admin.user_id
    )
