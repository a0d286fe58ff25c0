"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from booking_api import __version__

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict[str, Any]:
    """Report that the API process is up."""
    return {
        "status": "healthy",
        "version": __version__,
        "timestamp": datetime.now(UTC).isoformat(),
    }
