"""Deterministic calendar query engine."""

from __future__ import annotations

from .converter import DateConverter
from .finder import HOLIDAY_ALIASES, HolidayFinder
from .lister import HolidayLister
from .results import CalendarQueryError, ErrorKind, QueryFailure, QueryResult, QuerySuccess

__all__ = [
    "CalendarQueryError",
    "DateConverter",
    "ErrorKind",
    "HOLIDAY_ALIASES",
    "HolidayFinder",
    "HolidayLister",
    "QueryFailure",
    "QueryResult",
    "QuerySuccess",
]
