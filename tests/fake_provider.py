"""
In-memory calendar math provider for testing.

Serves a fixed list of events and can be told to fail, so engine error
paths can be exercised without pyluach or astral.
"""

from datetime import date, datetime
from typing import List, Optional

from luach_agent.domain import CalendarEvent, EventCategory, HebrewDate


def hebrew(day: int = 1, month: int = 7, year: int = 5785, name: str = "Tishrei") -> HebrewDate:
    return HebrewDate(year=year, month=month, day=day, month_name=name)


def make_event(
    title: str,
    on: date,
    *categories: EventCategory,
    description: Optional[str] = None,
    event_time: Optional[datetime] = None,
    havdalah_mins: Optional[int] = None,
) -> CalendarEvent:
    return CalendarEvent(
        title=title,
        date=on,
        hebrew=hebrew(),
        categories=tuple(categories),
        description=description or title,
        event_time=event_time,
        havdalah_mins=havdalah_mins,
    )


class FakeProvider:
    """Duck-type stand-in for PyluachProvider."""

    def __init__(
        self,
        events: Optional[List[CalendarEvent]] = None,
        *,
        fail_calendar: bool = False,
        fail_conversion: bool = False,
    ) -> None:
        self.events = list(events or [])
        self.fail_calendar = fail_calendar
        self.fail_conversion = fail_conversion
        self.requests = []

    def to_hebrew(self, civil: date) -> HebrewDate:
        if self.fail_conversion:
            raise RuntimeError("conversion backend unavailable")
        return hebrew(day=min(civil.day, 29))

    def to_civil(self, year: int, month: int, day: int) -> date:
        if self.fail_conversion:
            raise RuntimeError("conversion backend unavailable")
        return date(2024, 10, day)

    def is_leap_year(self, year: int) -> bool:
        return False

    def days_in_month(self, year: int, month: int) -> int:
        return 30

    def calendar(self, options) -> List[CalendarEvent]:
        self.requests.append(options)
        if self.fail_calendar:
            raise RuntimeError("calendar backend unavailable")
        return list(self.events)
