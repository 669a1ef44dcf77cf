from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol, Tuple

from ..domain import CalendarEvent, HebrewDate, Location


@dataclass(frozen=True)
class CalendarOptions:
    """Which events a calendar request should produce.

    Either ``year`` (a civil year) or ``start`` must be given; ``end``
    defaults to ``start``. Timed events need both ``candlelighting`` and a
    ``location``.
    """

    year: Optional[int] = None
    start: Optional[date] = None
    end: Optional[date] = None
    candlelighting: bool = False
    location: Optional[Location] = None
    candle_mins: int = 18
    havdalah_mins: int = 42
    sedrot: bool = False
    omer: bool = False
    molad: bool = False

    def civil_range(self) -> Tuple[date, date]:
        if self.year is not None:
            return date(self.year, 1, 1), date(self.year, 12, 31)
        if self.start is None:
            raise ValueError("CalendarOptions needs either a year or a start date")
        end = self.end or self.start
        if end < self.start:
            raise ValueError("CalendarOptions end date precedes start date")
        return self.start, end


class CalendarMathProvider(Protocol):
    def to_hebrew(self, civil: date) -> HebrewDate:
        ...

    def to_civil(self, year: int, month: int, day: int) -> date:
        ...

    def is_leap_year(self, year: int) -> bool:
        ...

    def days_in_month(self, year: int, month: int) -> int:
        ...

    def calendar(self, options: CalendarOptions) -> List[CalendarEvent]:
        ...
