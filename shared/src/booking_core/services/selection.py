"""Calendar selection state for a listing-detail view.

RangeSelection drives the two-click check-in/check-out gesture used for
stays; SingleDateSelection replaces the chosen date on every click.
DatePicker ties a selector to one listing, checks each click against the
day classifier first and renders months and quotes for the current
selection.
"""

import datetime as dt
from collections.abc import Collection

from booking_core.models.calendar import CalendarMonth, DayClassification
from booking_core.models.enums import SelectionPhase
from booking_core.models.errors import ERROR_MESSAGES, ErrorCode
from booking_core.models.listing import Listing
from booking_core.models.pricing import PriceQuote
from booking_core.models.selection import DateSelection, SelectionOutcome
from booking_core.services.calendar import classify_day, classify_month, find_booked_days
from booking_core.services.pricing import build_quote
from booking_core.utils.logging import get_logger, log_selection_event

logger = get_logger(__name__)


class RangeSelection:
    """Two-click range selection: empty -> start_only -> complete.

    Only knows about booked dates; callers are expected to refuse
    non-selectable days before calling ``click``.
    """

    def __init__(
        self,
        booked_dates: Collection[str] = frozenset(),
        start: dt.date | None = None,
        end: dt.date | None = None,
    ) -> None:
        self.booked_dates = frozenset(booked_dates)
        self.start = start
        self.end = end if start is not None else None

    @property
    def phase(self) -> SelectionPhase:
        if self.start is None:
            return SelectionPhase.EMPTY
        if self.end is None:
            return SelectionPhase.START_ONLY
        return SelectionPhase.COMPLETE

    @property
    def selection(self) -> DateSelection:
        return DateSelection(start=self.start, end=self.end)

    def reset(self) -> None:
        self.start = None
        self.end = None

    def click(self, day: dt.date) -> SelectionOutcome:
        """Apply one click.

        From empty or complete the day starts a new range. From start_only
        a day on or before the start restarts the range there; a later day
        completes it unless a booked day lies in between, in which case
        the range is rejected and the clicked day becomes the new start.
        """
        if self.phase != SelectionPhase.START_ONLY or day <= self.start:  # type: ignore[operator]
            self._restart(day)
            return self._outcome(accepted=True)

        conflicts = find_booked_days(self.start, day, self.booked_dates)  # type: ignore[arg-type]
        if conflicts:
            log_selection_event(
                logger,
                "range_rejected",
                clicked=day.isoformat(),
                start=self.start.isoformat(),  # type: ignore[union-attr]
                error_code=ErrorCode.DATES_UNAVAILABLE.value,
                conflicting_dates=conflicts,
            )
            self._restart(day)
            return self._outcome(
                accepted=False,
                error_code=ErrorCode.DATES_UNAVAILABLE,
                conflicting_dates=conflicts,
            )

        self.end = day
        return self._outcome(accepted=True)

    def _restart(self, day: dt.date) -> None:
        self.start = day
        self.end = None

    def _outcome(
        self,
        accepted: bool,
        error_code: ErrorCode | None = None,
        conflicting_dates: list[str] | None = None,
    ) -> SelectionOutcome:
        return SelectionOutcome(
            accepted=accepted,
            selection=self.selection,
            phase=self.phase,
            error_code=error_code,
            message=ERROR_MESSAGES[error_code] if error_code else None,
            conflicting_dates=conflicting_dates or [],
        )


class SingleDateSelection:
    """Single-day selection for tours and volunteer placements."""

    def __init__(self, start: dt.date | None = None) -> None:
        self.start = start

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.EMPTY if self.start is None else SelectionPhase.START_ONLY

    @property
    def selection(self) -> DateSelection:
        return DateSelection(start=self.start)

    def reset(self) -> None:
        self.start = None

    def click(self, day: dt.date) -> SelectionOutcome:
        self.start = day
        return SelectionOutcome(accepted=True, selection=self.selection, phase=self.phase)


class DatePicker:
    """Selection state for one listing-detail view.

    Built from data fetched ahead of time; rebuild it when the listing's
    bookings change.
    """

    def __init__(
        self,
        listing: Listing,
        booked_dates: Collection[str],
        today: dt.date,
        selection: DateSelection | None = None,
    ) -> None:
        self.listing = listing
        self.today = today
        self.booked_dates = frozenset(booked_dates)
        self.availability = frozenset(listing.availability or ())

        start, end = self._restore(selection)
        self._selector: RangeSelection | SingleDateSelection
        if listing.uses_date_range:
            self._selector = RangeSelection(self.booked_dates, start=start, end=end)
        else:
            self._selector = SingleDateSelection(start=start)

    def _restore(
        self, selection: DateSelection | None
    ) -> tuple[dt.date | None, dt.date | None]:
        """Keep only the part of a client-held selection that is still valid.

        A start that is no longer selectable drops the whole selection; an
        end that is not selectable or spans a booked day drops the end.
        """
        if selection is None or selection.start is None:
            return None, None

        start, end = selection.start, selection.end
        if not self._selectable(start):
            log_selection_event(
                logger,
                "selection_dropped",
                clicked=start.isoformat(),
                error_code=ErrorCode.DATE_NOT_SELECTABLE.value,
            )
            return None, None

        if end is not None and (
            not self._selectable(end) or find_booked_days(start, end, self.booked_dates)
        ):
            log_selection_event(
                logger,
                "check_out_dropped",
                clicked=end.isoformat(),
                start=start.isoformat(),
                error_code=ErrorCode.DATES_UNAVAILABLE.value,
            )
            end = None
        return start, end

    def _selectable(self, day: dt.date) -> bool:
        return classify_day(day, self.today, self.availability, self.booked_dates).selectable

    @property
    def selection(self) -> DateSelection:
        return self._selector.selection

    @property
    def phase(self) -> SelectionPhase:
        return self._selector.phase

    def classify(self, day: dt.date) -> DayClassification:
        return classify_day(
            day, self.today, self.availability, self.booked_dates, self.selection
        )

    def calendar(self, year: int, month: int) -> CalendarMonth:
        return classify_month(
            year, month, self.today, self.availability, self.booked_dates, self.selection
        )

    def click(self, day: dt.date) -> SelectionOutcome:
        """Apply a click if the day is selectable; otherwise leave state unchanged."""
        classification = self.classify(day)
        if not classification.selectable:
            log_selection_event(
                logger,
                "date_refused",
                clicked=day.isoformat(),
                error_code=ErrorCode.DATE_NOT_SELECTABLE.value,
            )
            return SelectionOutcome(
                accepted=False,
                selection=self.selection,
                phase=self.phase,
                error_code=ErrorCode.DATE_NOT_SELECTABLE,
                message=ERROR_MESSAGES[ErrorCode.DATE_NOT_SELECTABLE],
            )
        return self._selector.click(day)

    def reset(self) -> None:
        self._selector.reset()

    def quote(self, guests: int, currency: str | None = None) -> PriceQuote:
        return build_quote(self.listing, self.selection, guests, currency)
