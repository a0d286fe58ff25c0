"""REST API for the Safari Bookings backend."""

__version__ = "0.1.0"
