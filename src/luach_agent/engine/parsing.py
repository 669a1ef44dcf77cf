"""Parsing and formatting helpers shared by the query engine."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import NamedTuple, Optional, Union

from ..domain.months import ADAR, ADAR_II

_NUMERIC_PATTERN = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})")
_TEXT_PATTERN = re.compile(
    r"(\d{1,2})(?:st|nd|rd|th)?\s+(?:of\s+)?"
    r"([A-Za-z']+(?:\s+(?:I{1,2}|[12]|aleph|alef|beis|bet|sheni))?)\s+(\d{4})",
    re.IGNORECASE,
)

_MONTH_ALIASES = {
    "nissan": 1,
    "nisan": 1,
    "iyar": 2,
    "iyyar": 2,
    "sivan": 3,
    "tammuz": 4,
    "tamuz": 4,
    "av": 5,
    "ab": 5,
    "elul": 6,
    "tishrei": 7,
    "tishri": 7,
    "cheshvan": 8,
    "heshvan": 8,
    "chesvan": 8,
    "marcheshvan": 8,
    "kislev": 9,
    "kislew": 9,
    "teves": 10,
    "tevet": 10,
    "teveth": 10,
    "shvat": 11,
    "shevat": 11,
    "shevet": 11,
    "adar": ADAR,
    "adari": ADAR,
    "adar1": ADAR,
    "adaraleph": ADAR,
    "adaralef": ADAR,
    "adarii": ADAR_II,
    "adar2": ADAR_II,
    "adarbeis": ADAR_II,
    "adarbet": ADAR_II,
    "adarsheni": ADAR_II,
}

# Month ranges per season, keyed by the Nissan-first month number.
_SEASONS = (
    (range(1, 4), "Winter"),
    (range(4, 7), "Spring"),
    (range(7, 10), "Summer"),
)

SATURDAY = 5


class HebrewDateParts(NamedTuple):
    day: int
    month: Union[int, str]
    year: int


def parse_hebrew_date(text: str) -> Optional[HebrewDateParts]:
    """Parse ``15/1/5785``, ``15-1-5785``, ``15 Tishrei 5785`` or ``15th of Tishrei 5785``.

    Returns ``None`` when neither shape matches.
    """

    if not text:
        return None
    numeric = _NUMERIC_PATTERN.search(text)
    if numeric:
        return HebrewDateParts(int(numeric.group(1)), int(numeric.group(2)), int(numeric.group(3)))
    textual = _TEXT_PATTERN.search(text)
    if textual:
        return HebrewDateParts(int(textual.group(1)), textual.group(2), int(textual.group(3)))
    return None


def resolve_month(month: Union[int, str], *, leap: bool) -> Optional[int]:
    """Map a month index or name onto the Nissan-first numbering for a given year."""

    if isinstance(month, int):
        return month
    key = re.sub(r"[^a-z0-9]", "", month.lower())
    if key == "adar":
        # A bare Adar in a leap year is the Adar of Purim.
        return ADAR_II if leap else ADAR
    number = _MONTH_ALIASES.get(key)
    if number == ADAR_II and not leap:
        return ADAR
    return number


def parse_civil_date(text: str) -> Optional[date]:
    try:
        return date.fromisoformat(text.strip())
    except (AttributeError, ValueError):
        return None


def season_for_month(month: int) -> str:
    for months, season in _SEASONS:
        if month in months:
            return season
    return "Fall"


def next_sabbath(civil: date) -> date:
    return civil + timedelta(days=(SATURDAY - civil.weekday()) % 7)


def format_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d} {'PM' if moment.hour >= 12 else 'AM'}"


def format_long_date(civil: date) -> str:
    return f"{civil:%A}, {civil:%B} {civil.day}, {civil.year}"


def format_short_date(civil: date) -> str:
    return f"{civil:%b} {civil.day}"


def weekday_name(civil: date) -> str:
    return f"{civil:%A}"
