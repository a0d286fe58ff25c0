"""Unit tests for booked-date expansion."""

from datetime import date
from typing import NamedTuple

import pytest

from booking_core.models.errors import BookingDataError, ErrorCode
from booking_core.services.calendar import (
    build_booked_date_set,
    date_range,
    find_booked_days,
)


class Period(NamedTuple):
    booking_id: str
    booking_date: date
    check_out_date: date | None


class TestDateRange:
    """Tests for inclusive date ranges."""

    def test_includes_both_ends(self) -> None:
        days = date_range(date(2025, 2, 10), date(2025, 2, 13))

        assert days[0] == date(2025, 2, 10)
        assert days[-1] == date(2025, 2, 13)
        assert len(days) == 4

    def test_same_day_is_one_day(self) -> None:
        assert date_range(date(2025, 2, 10), date(2025, 2, 10)) == [date(2025, 2, 10)]

    def test_crosses_month_boundary(self) -> None:
        days = date_range(date(2025, 2, 27), date(2025, 3, 2))

        assert [d.isoformat() for d in days] == [
            "2025-02-27",
            "2025-02-28",
            "2025-03-01",
            "2025-03-02",
        ]


class TestBuildBookedDateSet:
    """Tests for build_booked_date_set."""

    def test_range_booking_is_inclusive_of_checkout(self) -> None:
        """A Feb 10-13 stay occupies four days."""
        booked = build_booked_date_set(
            [Period("BKG-1", date(2025, 2, 10), date(2025, 2, 13))]
        )

        assert booked == {"2025-02-10", "2025-02-11", "2025-02-12", "2025-02-13"}

    def test_single_date_booking(self) -> None:
        booked = build_booked_date_set([Period("BKG-1", date(2025, 2, 10), None)])

        assert booked == {"2025-02-10"}

    def test_no_bookings(self) -> None:
        assert build_booked_date_set([]) == set()

    def test_overlapping_bookings_are_unioned(self) -> None:
        booked = build_booked_date_set(
            [
                Period("BKG-1", date(2025, 2, 10), date(2025, 2, 12)),
                Period("BKG-2", date(2025, 2, 12), date(2025, 2, 14)),
            ]
        )

        assert len(booked) == 5

    def test_order_independent(self) -> None:
        bookings = [
            Period("BKG-1", date(2025, 3, 1), date(2025, 3, 3)),
            Period("BKG-2", date(2025, 2, 10), None),
            Period("BKG-3", date(2025, 2, 20), date(2025, 2, 21)),
        ]

        assert build_booked_date_set(bookings) == build_booked_date_set(
            list(reversed(bookings))
        )

    def test_end_before_start_raises(self) -> None:
        """Stored data with check-out before start is a data-integrity error."""
        with pytest.raises(BookingDataError) as exc_info:
            build_booked_date_set(
                [Period("BKG-BAD", date(2025, 2, 13), date(2025, 2, 10))]
            )

        assert exc_info.value.code == ErrorCode.INVALID_BOOKING_RANGE
        assert exc_info.value.details["booking_id"] == "BKG-BAD"


class TestFindBookedDays:
    """Tests for find_booked_days."""

    def test_returns_conflicts_in_order(self) -> None:
        booked = {"2025-03-04", "2025-03-03", "2025-03-10"}

        assert find_booked_days(date(2025, 3, 1), date(2025, 3, 5), booked) == [
            "2025-03-03",
            "2025-03-04",
        ]

    def test_no_conflicts(self) -> None:
        assert find_booked_days(date(2025, 3, 1), date(2025, 3, 5), {"2025-03-06"}) == []
