"""API routes package.

Routers are organized by domain:

- health: Health check endpoints
- listings: Catalog and booked dates
- availability: Monthly calendars and date selection
- pricing: Selection quotes
- bookings: Traveller bookings
- admin: Back-office booking management

All routers are registered in main.py with /api prefix.
"""

from booking_api.routes.admin import router as admin_router
from booking_api.routes.availability import router as availability_router
from booking_api.routes.bookings import router as bookings_router
from booking_api.routes.health import router as health_router
from booking_api.routes.listings import router as listings_router
from booking_api.routes.pricing import router as pricing_router

__all__ = [
    "admin_router",
    "availability_router",
    "bookings_router",
    "health_router",
    "listings_router",
    "pricing_router",
]
