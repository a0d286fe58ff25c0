"""Date selection models used by the calendar and price quotes."""

import datetime as dt

from pydantic import BaseModel, Field, model_validator

from .enums import SelectionPhase
from .errors import ErrorCode


class DateSelection(BaseModel):
    """A traveller's in-progress date choice. Never persisted.

    ``start`` alone is a single date (or a range waiting for its end);
    ``start`` and ``end`` together form a complete range.
    """

    start: dt.date | None = Field(default=None, description="Selected or check-in date")
    end: dt.date | None = Field(default=None, description="Check-out date")

    @model_validator(mode="after")
    def _validate_order(self) -> "DateSelection":
        if self.end is not None:
            if self.start is None:
                raise ValueError("end requires start")
            if self.end <= self.start:
                raise ValueError("end must be after start")
        return self

    @property
    def phase(self) -> SelectionPhase:
        if self.start is None:
            return SelectionPhase.EMPTY
        if self.end is None:
            return SelectionPhase.START_ONLY
        return SelectionPhase.COMPLETE

    @property
    def is_complete_range(self) -> bool:
        return self.phase == SelectionPhase.COMPLETE


class SelectionOutcome(BaseModel):
    """Result of applying one calendar click to a selection.

    ``accepted`` is False when the click was refused (state unchanged) or
    when the proposed range was rejected and the selection restarted.
    """

    accepted: bool
    selection: DateSelection
    phase: SelectionPhase
    error_code: ErrorCode | None = None
    message: str | None = None
    conflicting_dates: list[str] = Field(default_factory=list)
