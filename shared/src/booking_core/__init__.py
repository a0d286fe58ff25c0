"""Shared domain package for the Safari Bookings backend.

Holds the availability & pricing engine, the pydantic data models and the
DynamoDB-backed services used by the REST API.
"""

__version__ = "0.1.0"
