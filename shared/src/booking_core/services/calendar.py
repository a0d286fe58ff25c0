"""Calendar day classification and booked-date expansion.

Everything here is a pure function of its arguments. Callers pass
``today`` explicitly; nothing reads the system clock.

Booked ranges are closed on both ends: a stay from 2025-02-10 to
2025-02-13 occupies 2025-02-13 as well.
"""

import calendar
import datetime as dt
from collections.abc import Collection, Iterable
from typing import Protocol

from booking_core.models.calendar import CalendarMonth, DayClassification
from booking_core.models.enums import DayTag
from booking_core.models.errors import BookingDataError, ErrorCode
from booking_core.models.selection import DateSelection

# Order tags appear in a DayClassification
_TAG_ORDER = list(DayTag)


class BookedPeriod(Protocol):
    """Anything exposing a booking's start and optional inclusive end."""

    @property
    def booking_date(self) -> dt.date: ...

    @property
    def check_out_date(self) -> dt.date | None: ...


def date_range(start: dt.date, end: dt.date) -> list[dt.date]:
    """Generate list of dates from start through end (inclusive)."""
    return [start + dt.timedelta(days=i) for i in range((end - start).days + 1)]


def build_booked_date_set(bookings: Iterable[BookedPeriod]) -> set[str]:
    """Expand bookings into the ISO dates they occupy.

    Args:
        bookings: Bookings of a single listing, in any order

    Returns:
        Set of YYYY-MM-DD strings

    Raises:
        BookingDataError: A booking's check-out date is before its start
    """
    booked: set[str] = set()
    for booking in bookings:
        start = booking.booking_date
        end = booking.check_out_date
        if end is None:
            booked.add(start.isoformat())
            continue
        if end < start:
            raise BookingDataError(
                ErrorCode.INVALID_BOOKING_RANGE,
                details={
                    "booking_id": str(getattr(booking, "booking_id", "unknown")),
                    "booking_date": start.isoformat(),
                    "check_out_date": end.isoformat(),
                },
            )
        booked.update(d.isoformat() for d in date_range(start, end))
    return booked


def find_booked_days(
    start: dt.date,
    end: dt.date,
    booked_dates: Collection[str],
) -> list[str]:
    """Return the days of [start, end] that are already booked, in order."""
    return [
        d.isoformat() for d in date_range(start, end) if d.isoformat() in booked_dates
    ]


def classify_day(
    day: dt.date,
    today: dt.date,
    availability: Collection[str] | None,
    booked_dates: Collection[str],
    selection: DateSelection | None = None,
) -> DayClassification:
    """Classify a calendar day for rendering and selectability.

    Precedence: past days are never selectable; otherwise booked beats
    unavailable; a day excluded by neither is available. An empty or
    missing availability list opens every date.

    Args:
        day: Day to classify
        today: Current date, supplied by the caller
        availability: Listing's whitelist of ISO dates, if any
        booked_dates: BookedDateSet of the listing
        selection: Current selection, for selected/in_range tags

    Returns:
        DayClassification with tags and selectability
    """
    key = day.isoformat()
    tags: set[DayTag] = set()

    if day < today:
        tags.add(DayTag.PAST)
    elif key in booked_dates:
        tags.add(DayTag.BOOKED)
    elif availability and key not in availability:
        tags.add(DayTag.UNAVAILABLE)
    else:
        tags.add(DayTag.AVAILABLE)

    if day == today:
        tags.add(DayTag.TODAY)

    if selection is not None and selection.start is not None:
        if day == selection.start or day == selection.end:
            tags.add(DayTag.SELECTED)
        elif selection.end is not None and selection.start < day < selection.end:
            tags.add(DayTag.IN_RANGE)

    return DayClassification(
        date=day,
        tags=[tag for tag in _TAG_ORDER if tag in tags],
        selectable=DayTag.AVAILABLE in tags,
    )


def classify_month(
    year: int,
    month: int,
    today: dt.date,
    availability: Collection[str] | None,
    booked_dates: Collection[str],
    selection: DateSelection | None = None,
) -> CalendarMonth:
    """Classify every day of a month and count days per status."""
    _, last_day = calendar.monthrange(year, month)
    days = [
        classify_day(
            dt.date(year, month, day_num), today, availability, booked_dates, selection
        )
        for day_num in range(1, last_day + 1)
    ]

    return CalendarMonth(
        month=f"{year:04d}-{month:02d}",
        days=days,
        available_count=sum(1 for d in days if d.has(DayTag.AVAILABLE)),
        booked_count=sum(1 for d in days if d.has(DayTag.BOOKED)),
        unavailable_count=sum(1 for d in days if d.has(DayTag.UNAVAILABLE)),
        past_count=sum(1 for d in days if d.has(DayTag.PAST)),
    )
