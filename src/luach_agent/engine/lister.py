from __future__ import annotations

import logging

from ..domain import HolidayListing
from ..provider import CalendarMathProvider, CalendarOptions
from .results import ErrorKind, QueryFailure, QueryResult, QuerySuccess

logger = logging.getLogger(__name__)


class HolidayLister:
    def __init__(self, provider: CalendarMathProvider) -> None:
        self.provider = provider

    def list(self, year: int) -> QueryResult[HolidayListing]:
        """Every calendar event of the civil ``year``, ordered by civil date."""

        try:
            events = self.provider.calendar(CalendarOptions(year=year))
        except Exception as exc:  # noqa: BLE001
            logger.exception("Holiday listing failed for %s", year)
            return QueryFailure(ErrorKind.PROVIDER_FAILURE, f"Error listing holidays: {exc}")
        ordered = sorted(events, key=lambda event: event.date)
        return QuerySuccess(HolidayListing(year=year, holidays=ordered))
