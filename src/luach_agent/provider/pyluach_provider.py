from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple
from zoneinfo import ZoneInfo

from astral import LocationInfo
from astral.sun import dawn, dusk, sunset
from pyluach import dates, hebrewcal, parshios

from ..domain import CalendarEvent, EventCategory, HebrewDate, Location, month_name
from ..domain.months import ADAR, ADAR_II, TISHREI
from .base import CalendarOptions

logger = logging.getLogger(__name__)

MAJOR_FESTIVALS = frozenset(
    {"Rosh Hashana", "Yom Kippur", "Succos", "Shmini Atzeres", "Simchas Torah", "Pesach", "Shavuos"}
)
EREV_FESTIVALS = frozenset({"Rosh Hashana", "Yom Kippur", "Succos", "Pesach", "Shavuos", "Purim"})
# Israeli national days are computed here; pyluach names are only used to skip duplicates.
_MODERN_FESTIVALS = frozenset({"yom hashoah", "yom hazikaron", "yom haatzmaut", "yom yerushalayim"})
# Festival days (diaspora) that are full yom tov; the rest are chol hamoed.
_YOM_TOV_DAYS = {"Pesach": {1, 2, 7, 8}, "Succos": {1, 2}}

_ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Shabbos")

MONDAY = 0
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6

DAWN_DEPRESSION = 16.1
NIGHTFALL_DEPRESSION = 8.5

AV = 5
TISHA_BAV = "9 of Av"


def _date_range(start: date, end: date) -> Iterable[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def _ordinal(value: int) -> str:
    if 10 <= value % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def _short_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d}{'pm' if moment.hour >= 12 else 'am'}"


def _round_minute(moment: datetime) -> datetime:
    return (moment + timedelta(seconds=30)).replace(second=0, microsecond=0)


def _civil(year: int, month: int, day: int) -> date:
    return dates.HebrewDate(year, month, day).to_pydate()


def _on_or_before_shabbat(target: date) -> date:
    return target - timedelta(days=(target.weekday() - SATURDAY) % 7)


def _modern_days(year: int) -> Dict[date, Tuple[str, str]]:
    """Israeli national days of Hebrew ``year``, moved off the days around Shabbat."""

    days: Dict[date, Tuple[str, str]] = {}
    if year >= 5708:
        atzmaut = _civil(year, 2, 5)
        if atzmaut.weekday() == FRIDAY:
            atzmaut -= timedelta(days=1)
        elif atzmaut.weekday() == SATURDAY:
            atzmaut -= timedelta(days=2)
        elif atzmaut.weekday() == MONDAY and year >= 5764:
            atzmaut += timedelta(days=1)
        days[atzmaut - timedelta(days=1)] = ("Yom HaZikaron", "יום הזיכרון")
        days[atzmaut] = ("Yom HaAtzma'ut", "יום העצמאות")
    if year >= 5711:
        shoah = _civil(year, 1, 27)
        if shoah.weekday() == FRIDAY:
            shoah -= timedelta(days=1)
        elif shoah.weekday() == SUNDAY:
            shoah += timedelta(days=1)
        days[shoah] = ("Yom HaShoah", "יום השואה")
    if year >= 5728:
        days[_civil(year, 2, 28)] = ("Yom Yerushalayim", "יום ירושלים")
    return days


def _special_shabbatot(year: int, leap: bool) -> Dict[date, str]:
    purim_month = ADAR_II if leap else ADAR
    hachodesh = _on_or_before_shabbat(_civil(year, 1, 1))
    return {
        _on_or_before_shabbat(_civil(year, TISHREI, 9)): "Shabbat Shuva",
        _on_or_before_shabbat(_civil(year, purim_month, 1)): "Shabbat Shekalim",
        _on_or_before_shabbat(_civil(year, purim_month, 13)): "Shabbat Zachor",
        hachodesh - timedelta(days=7): "Shabbat Parah",
        hachodesh: "Shabbat HaChodesh",
        _on_or_before_shabbat(_civil(year, 1, 14)): "Shabbat HaGadol",
        _on_or_before_shabbat(_civil(year, AV, 9)): "Shabbat Chazon",
        _on_or_before_shabbat(_civil(year, AV, 16)): "Shabbat Nachamu",
    }


class _DayTable:
    """Lazily computed pyluach lookups for one calendar request."""

    def __init__(self) -> None:
        self._hebrew: Dict[date, dates.HebrewDate] = {}
        self._festival: Dict[date, Optional[str]] = {}
        self._modern: Dict[int, Dict[date, Tuple[str, str]]] = {}
        self._shabbatot: Dict[int, Dict[date, str]] = {}

    def hebrew(self, civil: date) -> dates.HebrewDate:
        hd = self._hebrew.get(civil)
        if hd is None:
            hd = dates.HebrewDate.from_pydate(civil)
            self._hebrew[civil] = hd
        return hd

    def festival(self, civil: date) -> Optional[str]:
        if civil not in self._festival:
            self._festival[civil] = self.hebrew(civil).festival(include_working_days=True)
        return self._festival[civil]

    def modern(self, civil: date) -> Optional[Tuple[str, str]]:
        year = self.hebrew(civil).year
        if year not in self._modern:
            self._modern[year] = _modern_days(year)
        return self._modern[year].get(civil)

    def special_shabbat(self, civil: date) -> Optional[str]:
        if civil.weekday() != SATURDAY:
            return None
        hd = self.hebrew(civil)
        if hd.year not in self._shabbatot:
            self._shabbatot[hd.year] = _special_shabbatot(hd.year, bool(hebrewcal.Year(hd.year).leap))
        name = self._shabbatot[hd.year].get(civil)
        if name is None and parshios.getparsha_string(hd) == "Beshalach":
            return "Shabbat Shirah"
        return name

    def festival_day(self, civil: date) -> int:
        name = self.festival(civil)
        count = 1
        while name and self.festival(civil - timedelta(days=count)) == name:
            count += 1
        return count

    def is_multi_day(self, civil: date) -> bool:
        name = self.festival(civil)
        if not name:
            return False
        return name in (self.festival(civil - timedelta(days=1)), self.festival(civil + timedelta(days=1)))

    def is_yom_tov(self, civil: date) -> bool:
        name = self.festival(civil)
        if name not in MAJOR_FESTIVALS:
            return False
        allowed = _YOM_TOV_DAYS.get(name)
        return allowed is None or self.festival_day(civil) in allowed


class _Zmanim:
    def __init__(self, location: Location) -> None:
        self.tz = ZoneInfo(location.timezone)
        self.observer = LocationInfo(
            name=location.name,
            region="",
            timezone=location.timezone,
            latitude=location.latitude,
            longitude=location.longitude,
        ).observer

    def sunset(self, civil: date) -> datetime:
        return sunset(self.observer, date=civil, tzinfo=self.tz)

    def dawn(self, civil: date) -> datetime:
        return dawn(self.observer, date=civil, depression=DAWN_DEPRESSION, tzinfo=self.tz)

    def nightfall(self, civil: date) -> datetime:
        return dusk(self.observer, date=civil, depression=NIGHTFALL_DEPRESSION, tzinfo=self.tz)


class PyluachProvider:
    """Calendar math backed by pyluach (dates, holidays, parsha) and astral (sun times)."""

    def to_hebrew(self, civil: date) -> HebrewDate:
        return self._hebrew(dates.HebrewDate.from_pydate(civil))

    def to_civil(self, year: int, month: int, day: int) -> date:
        return dates.HebrewDate(year, month, day).to_pydate()

    def is_leap_year(self, year: int) -> bool:
        return bool(hebrewcal.Year(year).leap)

    def days_in_month(self, year: int, month: int) -> int:
        try:
            dates.HebrewDate(year, month, 30)
        except ValueError:
            return 29
        return 30

    def calendar(self, options: CalendarOptions) -> List[CalendarEvent]:
        start, end = options.civil_range()
        table = _DayTable()
        zmanim = _Zmanim(options.location) if options.candlelighting and options.location else None
        logger.debug("Building calendar %s..%s (zmanim=%s)", start, end, zmanim is not None)

        events: List[CalendarEvent] = []
        for civil in _date_range(start, end):
            hebrew = self._hebrew(table.hebrew(civil))
            events.extend(self._holiday_events(table, civil, hebrew))
            if options.omer:
                events.extend(self._omer_events(civil, hebrew))
            if civil.weekday() == SATURDAY:
                if options.sedrot:
                    events.extend(self._parsha_events(table, civil, hebrew))
                if options.molad:
                    events.extend(self._molad_events(table, civil, hebrew))
            if zmanim is not None:
                events.extend(self._timed_events(table, zmanim, options, civil, hebrew))
        return events

    # ------------------------------------------------------------------ helpers

    def _hebrew(self, hd: dates.HebrewDate) -> HebrewDate:
        leap = self.is_leap_year(hd.year)
        return HebrewDate(year=hd.year, month=hd.month, day=hd.day, month_name=month_name(hd.month, leap=leap))

    def _holiday_events(self, table: _DayTable, civil: date, hebrew: HebrewDate) -> List[CalendarEvent]:
        events: List[CalendarEvent] = []
        tomorrow = civil + timedelta(days=1)
        upcoming = table.festival(tomorrow)
        festival = table.festival(civil)

        if upcoming in EREV_FESTIVALS and upcoming != festival:
            title = f"Erev {upcoming}"
            events.append(
                CalendarEvent(
                    title=title,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HOLIDAY, EventCategory.EREV),
                    description=title,
                )
            )

        if festival and festival.lower().replace("'", "") not in _MODERN_FESTIVALS:
            hd = table.hebrew(civil)
            title = self._festival_title(table, civil, festival, hebrew)
            events.append(
                CalendarEvent(
                    title=title,
                    date=civil,
                    hebrew=hebrew,
                    categories=self._festival_categories(table, civil, festival),
                    description=title,
                    memo=hd.festival(hebrew=True, include_working_days=True),
                )
            )

        hd = table.hebrew(civil)
        fast = hd.fast_day()
        if fast:
            events.append(
                CalendarEvent(
                    title=fast,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HOLIDAY, EventCategory.FAST),
                    description=fast,
                    memo=hd.fast_day(hebrew=True),
                )
            )
        if table.hebrew(tomorrow).fast_day() == TISHA_BAV:
            events.append(
                CalendarEvent(
                    title="Erev Tish'a B'Av",
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HOLIDAY, EventCategory.EREV),
                    description=f"Erev {TISHA_BAV}",
                )
            )

        modern = table.modern(civil)
        if modern:
            title, memo = modern
            events.append(
                CalendarEvent(
                    title=title,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HOLIDAY, EventCategory.MODERN),
                    description=title,
                    memo=memo,
                )
            )

        special = table.special_shabbat(civil)
        if special:
            events.append(
                CalendarEvent(
                    title=special,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HOLIDAY, EventCategory.SHABBAT),
                    description=special,
                )
            )

        if hebrew.day == 30 or (hebrew.day == 1 and hebrew.month != TISHREI):
            new_month = self._hebrew(table.hebrew(tomorrow)).month_name if hebrew.day == 30 else hebrew.month_name
            title = f"Rosh Chodesh {new_month}"
            events.append(
                CalendarEvent(
                    title=title,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.ROSH_CHODESH,),
                    description=title,
                )
            )
        return events

    def _festival_title(self, table: _DayTable, civil: date, festival: str, hebrew: HebrewDate) -> str:
        day = table.festival_day(civil)
        if festival == "Rosh Hashana" and day == 1:
            return f"Rosh Hashana {hebrew.year}"
        if festival == "Chanuka":
            return f"Chanuka: Day {day}"
        if table.is_multi_day(civil) and day <= len(_ROMAN):
            return f"{festival} {_ROMAN[day - 1]}"
        return festival

    def _festival_categories(self, table: _DayTable, civil: date, festival: str) -> tuple:
        if festival in MAJOR_FESTIVALS:
            if table.is_yom_tov(civil):
                return (EventCategory.HOLIDAY, EventCategory.MAJOR)
            return (EventCategory.HOLIDAY, EventCategory.MAJOR, EventCategory.CHOLHAMOED)
        return (EventCategory.HOLIDAY, EventCategory.MINOR)

    def _omer_events(self, civil: date, hebrew: HebrewDate) -> List[CalendarEvent]:
        first_day = dates.HebrewDate(hebrew.year, 1, 16).to_pydate()
        count = (civil - first_day).days + 1
        if not 1 <= count <= 49:
            return []
        title = f"{_ordinal(count)} day of the Omer"
        return [
            CalendarEvent(
                title=title,
                date=civil,
                hebrew=hebrew,
                categories=(EventCategory.OMER,),
                description="Omer count",
            )
        ]

    def _parsha_events(self, table: _DayTable, civil: date, hebrew: HebrewDate) -> List[CalendarEvent]:
        name = parshios.getparsha_string(table.hebrew(civil))
        if not name:
            return []
        title = f"Parashat {name}"
        return [
            CalendarEvent(
                title=title,
                date=civil,
                hebrew=hebrew,
                categories=(EventCategory.PARASHAT,),
                description=title,
            )
        ]

    def _molad_events(self, table: _DayTable, civil: date, hebrew: HebrewDate) -> List[CalendarEvent]:
        # Announced on the last Shabbat of the month, never on Rosh Chodesh itself.
        if not 23 <= hebrew.day <= 29:
            return []
        for offset in range(1, 8):
            upcoming = table.hebrew(civil + timedelta(days=offset))
            if upcoming.day != 1 or upcoming.month == TISHREI:
                continue
            announcement = hebrewcal.Month(upcoming.year, upcoming.month).molad_announcement()
            name = self._hebrew(upcoming).month_name
            title = (
                f"Molad {name}: {_WEEKDAYS[announcement['weekday'] - 1]}, "
                f"{announcement['minutes']} minutes and {announcement['parts']} chalakim after {announcement['hour']}:00"
            )
            return [
                CalendarEvent(
                    title=title,
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.MOLAD,),
                    description=f"Molad {name}",
                )
            ]
        return []

    def _timed_events(
        self,
        table: _DayTable,
        zmanim: _Zmanim,
        options: CalendarOptions,
        civil: date,
        hebrew: HebrewDate,
    ) -> List[CalendarEvent]:
        events: List[CalendarEvent] = []
        tomorrow = civil + timedelta(days=1)
        holy_today = civil.weekday() == SATURDAY or table.is_yom_tov(civil)
        holy_tomorrow = civil.weekday() == FRIDAY or table.is_yom_tov(tomorrow)

        if holy_tomorrow:
            if holy_today and civil.weekday() != FRIDAY:
                moment = zmanim.sunset(civil) + timedelta(minutes=options.havdalah_mins)
            else:
                moment = zmanim.sunset(civil) - timedelta(minutes=options.candle_mins)
            events.append(self._timed("Candle lighting", civil, hebrew, _round_minute(moment), (EventCategory.CANDLES,)))
        elif holy_today:
            moment = _round_minute(zmanim.sunset(civil) + timedelta(minutes=options.havdalah_mins))
            events.append(
                CalendarEvent(
                    title=f"Havdalah ({options.havdalah_mins} min): {_short_time(moment)}",
                    date=civil,
                    hebrew=hebrew,
                    categories=(EventCategory.HAVDALAH,),
                    description="Havdalah",
                    event_time=moment,
                    havdalah_mins=options.havdalah_mins,
                )
            )

        fast = table.hebrew(civil).fast_day()
        if table.hebrew(tomorrow).fast_day() == "9 of Av":
            moment = _round_minute(zmanim.sunset(civil))
            events.append(self._timed("Fast begins", civil, hebrew, moment, (EventCategory.ZMANIM,)))
        if fast:
            if fast != "9 of Av":
                moment = _round_minute(zmanim.dawn(civil))
                events.append(self._timed("Fast begins", civil, hebrew, moment, (EventCategory.ZMANIM,)))
            moment = _round_minute(zmanim.nightfall(civil))
            events.append(self._timed("Fast ends", civil, hebrew, moment, (EventCategory.ZMANIM,)))
        return events

    def _timed(
        self,
        description: str,
        civil: date,
        hebrew: HebrewDate,
        moment: datetime,
        categories: tuple,
    ) -> CalendarEvent:
        return CalendarEvent(
            title=f"{description}: {_short_time(moment)}",
            date=civil,
            hebrew=hebrew,
            categories=categories,
            description=description,
            event_time=moment,
        )
