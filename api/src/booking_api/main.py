"""FastAPI application for the Safari Bookings REST API.

This package provides REST endpoints for:
- Health checks
- Listing catalog, calendars and date selection
- Price quotes
- Traveller bookings and back-office payment status
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from booking_api import __version__
from booking_api.exceptions import register_exception_handlers
from booking_api.middleware.correlation import CorrelationIdMiddleware
from booking_api.routes.admin import router as admin_router
from booking_api.routes.availability import router as availability_router
from booking_api.routes.bookings import router as bookings_router
from booking_api.routes.health import router as health_router
from booking_api.routes.listings import router as listings_router
from booking_api.routes.pricing import router as pricing_router
from booking_core import config
from booking_core.utils.logging import configure_logging, get_logger

configure_logging(config.get_log_level())
logger = get_logger(__name__)

app = FastAPI(
    title="Safari Bookings API",
    description="REST API for listing availability, pricing and bookings",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

# Include routers under /api prefix
# This matches CloudFront routing: /api/* → API Gateway
app.include_router(health_router, prefix="/api")
app.include_router(listings_router, prefix="/api")
app.include_router(availability_router, prefix="/api")
app.include_router(pricing_router, prefix="/api")
app.include_router(bookings_router, prefix="/api")
app.include_router(admin_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Root health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "booking-api",
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    logger.info("Starting booking API on %s:%d", host, port)
    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "booking_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["api/src", "shared/src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
