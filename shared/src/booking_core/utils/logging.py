"""Logging for the booking engine, tagged with the request's correlation ID.

CorrelationIdMiddleware stores the X-Correlation-ID header (or a fresh
UUID) for the duration of a request; every record logged through a
``get_logger`` logger carries it, and StructuredFormatter prints it as a
``[cid]`` prefix.

Services log through the two helpers at the bottom of the module, e.g.
once a booking is stored::

    log_booking_operation(
        logger,
        "create_booking",
        booking_id="BKG-7F3A9C21",
        listing_id="LST-STAY-001",
        total_amount=Decimal("600.00"),
        status="pending",
    )

    [3b1f...] 2025-02-01 09:00:00,123 INFO booking_core.services.booking: Booking operation:
    create_booking | booking_id=BKG-7F3A9C21 | listing_id=LST-STAY-001 |
    total_amount=600.00 | status=pending

A refused calendar click goes through ``log_selection_event`` instead.
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

NO_CORRELATION_ID = "no-correlation-id"

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind a correlation ID to the current request, generating one if missing."""
    cid = correlation_id or str(uuid.uuid4())
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the request's correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return True


class StructuredFormatter(logging.Formatter):
    """Prefix formatted records with ``[correlation_id]``."""

    def format(self, record: logging.LogRecord) -> str:
        # Records from loggers without the filter, e.g. botocore
        cid = getattr(record, "correlation_id", None)
        if cid is None:
            cid = record.correlation_id = get_correlation_id() or NO_CORRELATION_ID
        return f"[{cid}] {super().format(record)}"


def get_logger(name: str) -> logging.Logger:
    """Return the named logger with a CorrelationIdFilter attached once."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def configure_logging(level: str = "INFO") -> None:
    """Install a StructuredFormatter handler on the root logger once."""
    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        StructuredFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)


def log_booking_operation(
    logger: logging.Logger,
    operation: str,
    *,
    booking_id: str | None = None,
    listing_id: str | None = None,
    total_amount: Any = None,
    status: str | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a booking operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "create_booking", "update_payment_status")
        booking_id: Booking ID if available
        listing_id: Listing ID if available
        total_amount: Total in base currency if relevant
        status: Payment status
        error: Error message if operation failed
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if booking_id:
        context["booking_id"] = booking_id
    if listing_id:
        context["listing_id"] = listing_id
    if total_amount is not None:
        context["total_amount"] = str(total_amount)
    if status:
        context["status"] = status
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Booking operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error:
        logger.error(message, extra=context)
    else:
        logger.info(message, extra=context)


def log_selection_event(
    logger: logging.Logger,
    event: str,
    *,
    clicked: str,
    start: str | None = None,
    error_code: str | None = None,
    conflicting_dates: list[str] | None = None,
) -> None:
    """Log a calendar selection event.

    Rejections are user mistakes, not faults, so they log at INFO.
    """
    context: dict[str, Any] = {"selection_event": event, "clicked": clicked}
    if start:
        context["start"] = start
    if error_code:
        context["error_code"] = error_code
    if conflicting_dates:
        context["conflicting_dates"] = ",".join(conflicting_dates)

    msg_parts = [f"Selection event: {event}"]
    for key, value in context.items():
        if key != "selection_event":
            msg_parts.append(f"{key}={value}")

    logger.info(" | ".join(msg_parts), extra=context)
