from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..domain import CalendarSystem, ConversionResult, EventCategory, HebrewDate
from ..domain.months import ADAR, ADAR_II
from ..provider import CalendarMathProvider, CalendarOptions
from .parsing import next_sabbath, parse_civil_date, parse_hebrew_date, resolve_month, season_for_month
from .results import CalendarQueryError, ErrorKind, QueryFailure, QueryResult, QuerySuccess

logger = logging.getLogger(__name__)


class DateConverter:
    """Convert single dates between the Gregorian and Hebrew calendars."""

    def __init__(self, provider: CalendarMathProvider) -> None:
        self.provider = provider

    def convert(
        self,
        input_date: str,
        direction: Union[CalendarSystem, str],
    ) -> QueryResult[ConversionResult]:
        try:
            source = CalendarSystem(direction)
            if source is CalendarSystem.GREGORIAN:
                result = self._from_gregorian(input_date)
            else:
                result = self._from_hebrew(input_date)
        except CalendarQueryError as exc:
            logger.info("Rejected %s date %r: %s", direction, input_date, exc.message)
            return exc.as_failure()
        except Exception as exc:  # noqa: BLE001
            logger.exception("Date conversion failed for %r", input_date)
            return QueryFailure(ErrorKind.PROVIDER_FAILURE, f"Error converting date: {exc}")
        return QuerySuccess(result)

    def _from_gregorian(self, input_date: str) -> ConversionResult:
        civil = parse_civil_date(input_date)
        if civil is None:
            raise CalendarQueryError(
                ErrorKind.INVALID_CIVIL_DATE,
                f"Invalid Gregorian date format: {input_date}. Please use YYYY-MM-DD format.",
            )
        hebrew = self.provider.to_hebrew(civil)
        return self._build(input_date, CalendarSystem.GREGORIAN, civil, hebrew)

    def _from_hebrew(self, input_date: str) -> ConversionResult:
        parts = parse_hebrew_date(input_date)
        if parts is None:
            raise CalendarQueryError(
                ErrorKind.INVALID_HEBREW_DATE,
                f'Invalid Hebrew date format: {input_date}. Please use formats like "15 Tishrei 5785" or "15/1/5785".',
            )
        # The provider raises ValueError for years, months or days it cannot represent.
        try:
            leap = self.provider.is_leap_year(parts.year)
            month = resolve_month(parts.month, leap=leap)
            last_month = ADAR_II if leap else ADAR
            if month is None or not 1 <= month <= last_month:
                raise CalendarQueryError(
                    ErrorKind.INVALID_HEBREW_DATE,
                    f"Invalid Hebrew month in {input_date}: {parts.month} does not exist in {parts.year}.",
                )
            days = self.provider.days_in_month(parts.year, month)
            if not 1 <= parts.day <= days:
                raise CalendarQueryError(
                    ErrorKind.INVALID_HEBREW_DATE,
                    f"Invalid Hebrew date {input_date}: day {parts.day} is outside 1-{days} for that month.",
                )
            civil = self.provider.to_civil(parts.year, month, parts.day)
        except ValueError as exc:
            raise CalendarQueryError(ErrorKind.INVALID_HEBREW_DATE, f"Invalid Hebrew date {input_date}: {exc}") from exc
        hebrew = self.provider.to_hebrew(civil)
        return self._build(input_date, CalendarSystem.HEBREW, civil, hebrew)

    def _build(self, input_date: str, source: CalendarSystem, civil: date, hebrew: HebrewDate) -> ConversionResult:
        return ConversionResult(
            input_date=input_date,
            source=source,
            civil=civil,
            hebrew=hebrew,
            is_leap_year=self.provider.is_leap_year(hebrew.year),
            days_in_month=self.provider.days_in_month(hebrew.year, hebrew.month),
            season=season_for_month(hebrew.month),
            parsha=self._weekly_parsha(civil),
        )

    def _weekly_parsha(self, civil: date) -> Optional[str]:
        sabbath = next_sabbath(civil)
        try:
            events = self.provider.calendar(CalendarOptions(start=sabbath, end=sabbath, sedrot=True))
        except Exception:  # noqa: BLE001
            logger.warning("Weekly portion lookup failed for %s", sabbath, exc_info=True)
            return None
        for event in events:
            if event.has_category(EventCategory.PARASHAT):
                return event.render()
        return None
