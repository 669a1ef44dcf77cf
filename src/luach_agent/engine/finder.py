from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Mapping, Optional

from ..domain import CalendarEvent, EventCategory, EventType, HolidayFlags, HolidayMatch, HolidaySearch, Location
from ..provider import CalendarMathProvider, CalendarOptions
from .results import ErrorKind, QueryFailure, QueryResult, QuerySuccess

logger = logging.getLogger(__name__)

# Common spellings mapped onto the provider's transliteration. Keys are
# compared with punctuation and whitespace removed.
HOLIDAY_ALIASES: Dict[str, str] = {
    "passover": "pesach",
    "pesah": "pesach",
    "roshhashanah": "rosh hashana",
    "roshhashonah": "rosh hashana",
    "jewishnewyear": "rosh hashana",
    "yomkipur": "yom kippur",
    "dayofatonement": "yom kippur",
    "sukkot": "succos",
    "sukkos": "succos",
    "succot": "succos",
    "tabernacles": "succos",
    "sheminiatzeret": "shmini atzeres",
    "sheminiatzeres": "shmini atzeres",
    "shminiatzeret": "shmini atzeres",
    "simchattorah": "simchas torah",
    "simhattorah": "simchas torah",
    "hanukkah": "chanuka",
    "hanukah": "chanuka",
    "chanukah": "chanuka",
    "chanukkah": "chanuka",
    "tubishvat": "tu b'shvat",
    "tubshevat": "tu b'shvat",
    "shavuot": "shavuos",
    "pentecost": "shavuos",
    "lagbaomer": "lag ba'omer",
    "lagbomer": "lag ba'omer",
    "tishabav": "9 of av",
    "tishabeav": "9 of av",
    "ninthofav": "9 of av",
    "tuba'av": "tu b'av",
    "tubeav": "tu b'av",
    "fastofgedaliah": "tzom gedalia",
    "tzomgedaliah": "tzom gedalia",
    "fastofesther": "taanis esther",
    "taanitesther": "taanis esther",
    "asarabtevet": "10 of teves",
    "tenthoftevet": "10 of teves",
    "shivaasarbetammuz": "17 of tamuz",
    "seventeenthoftammuz": "17 of tamuz",
    "yomhaatzmaut": "yom haatzma'ut",
    "israelindependenceday": "yom haatzma'ut",
    "holocaustremembranceday": "yom hashoah",
    "jerusalemday": "yom yerushalayim",
    "roshchodeshtevet": "rosh chodesh teves",
    "roshhodesh": "rosh chodesh",
    "newmonth": "rosh chodesh",
}

_ZMANIM_CATEGORIES = (EventCategory.CANDLES, EventCategory.HAVDALAH, EventCategory.ZMANIM)


def _compact(text: str) -> str:
    return re.sub(r"[^a-z0-9]", "", text.lower())


def search_terms(holiday_name: str, aliases: Mapping[str, str] = HOLIDAY_ALIASES) -> List[str]:
    """Lower-cased search terms: the name itself followed by any alias expansions."""

    base = holiday_name.strip().lower()
    if not base:
        return []
    compact = _compact(base)
    terms = [base]
    for variant, canonical in aliases.items():
        if _compact(variant) in compact and canonical not in terms:
            terms.append(canonical)
    return terms


def matches(event: CalendarEvent, terms: Iterable[str]) -> bool:
    """Loose bidirectional substring match against the rendered name and description.

    A term matches when it is contained in the event text or contains it, so
    both partial ("Rosh") and superset ("Rosh Hashana 5785 evening") queries
    hit. Short terms can match many events.
    """

    candidates = [text for text in (event.render().lower(), event.description.lower()) if text]
    return any(term in text or text in term for term in terms for text in candidates)


def classify(event: CalendarEvent) -> Optional[EventType]:
    if event.has_category(EventCategory.CANDLES):
        return EventType.CANDLE_LIGHTING
    if event.has_category(EventCategory.HAVDALAH):
        return EventType.HAVDALAH
    if event.has_category(EventCategory.HOLIDAY):
        return EventType.HOLIDAY
    # Providers without structured categories still name these in the description.
    if "Candle lighting" in event.description:
        return EventType.CANDLE_LIGHTING
    if "Havdalah" in event.description:
        return EventType.HAVDALAH
    return None


def flags_for(event: CalendarEvent, event_type: Optional[EventType]) -> HolidayFlags:
    return HolidayFlags(
        is_holiday=event.has_category(EventCategory.HOLIDAY),
        is_candle_lighting=event_type is EventType.CANDLE_LIGHTING,
        is_havdalah=event_type is EventType.HAVDALAH,
        is_rosh_chodesh=event.has_category(EventCategory.ROSH_CHODESH),
        is_modern_holiday=event.has_category(EventCategory.MODERN),
        is_minor_holiday=event.has_category(EventCategory.MINOR),
        is_major_holiday=event.has_category(EventCategory.MAJOR),
        is_fast=event.has_category(EventCategory.FAST),
    )


class HolidayFinder:
    def __init__(
        self,
        provider: CalendarMathProvider,
        location: Location,
        *,
        candle_mins: int = 18,
        havdalah_mins: int = 42,
        zmanim_window_days: int = 2,
        aliases: Mapping[str, str] = HOLIDAY_ALIASES,
    ) -> None:
        self.provider = provider
        self.location = location
        self.candle_mins = candle_mins
        self.havdalah_mins = havdalah_mins
        self.zmanim_window_days = zmanim_window_days
        self.aliases = aliases

    def find(self, year: int, holiday_name: str) -> QueryResult[HolidaySearch]:
        terms = search_terms(holiday_name, self.aliases)
        if not terms:
            return self._no_match(year, holiday_name)

        try:
            events = self.provider.calendar(
                CalendarOptions(
                    year=year,
                    candlelighting=True,
                    location=self.location,
                    candle_mins=self.candle_mins,
                    havdalah_mins=self.havdalah_mins,
                    sedrot=True,
                    omer=True,
                    molad=True,
                )
            )
            matched = [event for event in events if matches(event, terms)]
            if not matched:
                return self._no_match(year, holiday_name)
            holidays = [self._to_match(event) for event in matched]
            related = self._related_zmanim(events, matched)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Holiday lookup failed for %r in %s", holiday_name, year)
            return QueryFailure(ErrorKind.PROVIDER_FAILURE, f"Error finding holiday: {exc}")

        logger.debug("Matched %d events and %d zmanim for %r", len(holidays), len(related), holiday_name)
        return QuerySuccess(
            HolidaySearch(
                year=year,
                search_term=holiday_name,
                location=self.location,
                holidays=holidays,
                related_zmanim=related,
            )
        )

    def _no_match(self, year: int, holiday_name: str) -> QueryFailure:
        return QueryFailure(
            ErrorKind.NO_MATCH_FOUND,
            f'No holiday found matching "{holiday_name}" in {year}. '
            "Try using the listJewishHolidays tool to see all available holidays.",
        )

    def _to_match(self, event: CalendarEvent) -> HolidayMatch:
        event_type = classify(event)
        return HolidayMatch(
            event=event,
            event_type=event_type,
            flags=flags_for(event, event_type),
            location=self.location,
        )

    def _related_zmanim(self, events: List[CalendarEvent], matched: List[CalendarEvent]) -> List[CalendarEvent]:
        anchors = {event.absolute_day for event in matched}
        window = self.zmanim_window_days
        return [
            event
            for event in events
            if event.has_category(*_ZMANIM_CATEGORIES)
            and any(abs(event.absolute_day - anchor) <= window for anchor in anchors)
        ]
