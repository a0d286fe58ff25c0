"""Backend services for Safari Bookings."""

from .availability import AvailabilityService
from .booking import BookingService
from .catalog import ListingService
from .dynamodb import DynamoDBService, get_dynamodb_service, reset_dynamodb_service
from .pricing import build_quote, compute_total
from .selection import DatePicker, RangeSelection, SingleDateSelection

__all__ = [
    "AvailabilityService",
    "BookingService",
    "DatePicker",
    "DynamoDBService",
    "ListingService",
    "RangeSelection",
    "SingleDateSelection",
    "build_quote",
    "compute_total",
    "get_dynamodb_service",
    "reset_dynamodb_service",
]
