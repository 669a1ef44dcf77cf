from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Tuple

from .enums import CalendarSystem, EventCategory, EventType


@dataclass(frozen=True, slots=True)
class HebrewDate:
    year: int
    month: int
    day: int
    month_name: str

    def __str__(self) -> str:
        return f"{self.day} {self.month_name} {self.year}"


@dataclass(frozen=True, slots=True)
class Location:
    name: str
    latitude: float
    longitude: float
    timezone: str


@dataclass(frozen=True, slots=True)
class CalendarEvent:
    """A single calendar occurrence as produced by a calendar math provider.

    ``event_time`` is only set for timed events (candle lighting, havdalah,
    fast start and end); ``havdalah_mins`` only for havdalah.
    """

    title: str
    date: date
    hebrew: HebrewDate
    categories: Tuple[EventCategory, ...]
    description: str
    url: Optional[str] = None
    memo: Optional[str] = None
    event_time: Optional[datetime] = None
    havdalah_mins: Optional[int] = None

    def render(self) -> str:
        return self.title

    def has_category(self, *categories: EventCategory) -> bool:
        return any(category in self.categories for category in categories)

    @property
    def has_clock_time(self) -> bool:
        return self.event_time is not None

    @property
    def has_havdalah_minutes(self) -> bool:
        return self.havdalah_mins is not None

    @property
    def absolute_day(self) -> int:
        return self.date.toordinal()

    @property
    def category_label(self) -> str:
        return ", ".join(category.value for category in self.categories)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    input_date: str
    source: CalendarSystem
    civil: date
    hebrew: HebrewDate
    is_leap_year: bool
    days_in_month: int
    season: str
    parsha: Optional[str] = None

    @property
    def target(self) -> CalendarSystem:
        if self.source is CalendarSystem.GREGORIAN:
            return CalendarSystem.HEBREW
        return CalendarSystem.GREGORIAN

    @property
    def absolute_day(self) -> int:
        return self.civil.toordinal()

    @property
    def is_rosh_chodesh(self) -> bool:
        return self.hebrew.day == 1 or (self.hebrew.day == 30 and self.days_in_month == 30)


@dataclass(frozen=True, slots=True)
class HolidayFlags:
    is_holiday: bool
    is_candle_lighting: bool
    is_havdalah: bool
    is_rosh_chodesh: bool
    is_modern_holiday: bool
    is_minor_holiday: bool
    is_major_holiday: bool
    is_fast: bool


@dataclass(frozen=True, slots=True)
class HolidayMatch:
    event: CalendarEvent
    event_type: Optional[EventType]
    flags: HolidayFlags
    location: Location


@dataclass(frozen=True, slots=True)
class HolidaySearch:
    year: int
    search_term: str
    location: Location
    holidays: List[HolidayMatch] = field(default_factory=list)
    related_zmanim: List[CalendarEvent] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class HolidayListing:
    year: int
    holidays: List[CalendarEvent] = field(default_factory=list)
