"""Domain models for Hebrew calendar queries."""

from __future__ import annotations

from .enums import CalendarSystem, EventCategory, EventType
from .models import (
    CalendarEvent,
    ConversionResult,
    HebrewDate,
    HolidayFlags,
    HolidayListing,
    HolidayMatch,
    HolidaySearch,
    Location,
)
from .months import month_name

__all__ = [
    "CalendarEvent",
    "CalendarSystem",
    "ConversionResult",
    "EventCategory",
    "EventType",
    "HebrewDate",
    "HolidayFlags",
    "HolidayListing",
    "HolidayMatch",
    "HolidaySearch",
    "Location",
    "month_name",
]
