"""Calendar classification models."""

import datetime as dt

from pydantic import BaseModel, Field

from .enums import DayTag


class DayClassification(BaseModel):
    """Tags and selectability of a single calendar day."""

    date: dt.date = Field(..., description="Calendar date (YYYY-MM-DD)")
    tags: list[DayTag] = Field(
        ...,
        description="Classification tags, e.g. ['available', 'today']",
    )
    selectable: bool = Field(..., description="Whether the day may be clicked")

    def has(self, tag: DayTag) -> bool:
        return tag in self.tags


class CalendarMonth(BaseModel):
    """Every day of a month classified for one listing."""

    month: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Month in YYYY-MM format",
        examples=["2025-07"],
    )
    days: list[DayClassification]
    available_count: int = Field(..., ge=0)
    booked_count: int = Field(..., ge=0)
    unavailable_count: int = Field(..., ge=0)
    past_count: int = Field(..., ge=0)
