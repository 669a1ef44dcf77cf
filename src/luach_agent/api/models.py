from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..domain import CalendarEvent, ConversionResult, EventType, HolidayListing, HolidayMatch, HolidaySearch, Location
from ..engine.parsing import format_long_date, format_short_date, format_time, weekday_name


class Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    def to_json(self) -> Dict[str, Any]:
        # Optional detail fields are only emitted when they were set.
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class GregorianDatePayload(Payload):
    formatted: str
    iso: str
    day_of_week: str


class HebrewDatePayload(Payload):
    formatted: str
    hebrew_year: int
    hebrew_month: str
    hebrew_day: int
    day_of_week: str
    is_leap_year: bool
    days_in_month: int


class AdditionalInfoPayload(Payload):
    absolute_day: int
    is_rosh_chodesh: bool
    season: str
    parsha: Optional[str]


class ConversionPayload(Payload):
    success: bool
    input_date: str
    input_calendar: str
    output_calendar: str
    gregorian_date: GregorianDatePayload
    hebrew_date: HebrewDatePayload
    additional_info: AdditionalInfoPayload

    @classmethod
    def from_domain(cls, result: ConversionResult) -> "ConversionPayload":
        civil = result.civil
        return cls(
            success=True,
            input_date=result.input_date,
            input_calendar=result.source.value,
            output_calendar=result.target.value,
            gregorian_date=GregorianDatePayload(
                formatted=format_long_date(civil),
                iso=civil.isoformat(),
                day_of_week=weekday_name(civil),
            ),
            hebrew_date=HebrewDatePayload(
                formatted=str(result.hebrew),
                hebrew_year=result.hebrew.year,
                hebrew_month=result.hebrew.month_name,
                hebrew_day=result.hebrew.day,
                day_of_week=weekday_name(civil),
                is_leap_year=result.is_leap_year,
                days_in_month=result.days_in_month,
            ),
            additional_info=AdditionalInfoPayload(
                absolute_day=result.absolute_day,
                is_rosh_chodesh=result.is_rosh_chodesh,
                season=result.season,
                parsha=result.parsha,
            ),
        )


class LocationPayload(Payload):
    name: str
    latitude: float
    longitude: float
    timezone: str

    @classmethod
    def from_domain(cls, location: Location) -> "LocationPayload":
        return cls(
            name=location.name,
            latitude=location.latitude,
            longitude=location.longitude,
            timezone=location.timezone,
        )


class HolidayFlagsPayload(Payload):
    is_holiday: bool
    is_candle_lighting: bool
    is_havdalah: bool
    is_rosh_chodesh: bool
    is_modern_holiday: bool
    is_minor_holiday: bool
    is_major_holiday: bool
    is_fast: bool


class HolidayPayload(Payload):
    name: str
    gregorian_date: str
    hebrew_date: str
    hebrew_year: int
    category: str
    description: str
    url: Optional[str]
    memo: Optional[str]
    event_time: Optional[str] = None
    candle_lighting_time: Optional[str] = None
    havdalah_time: Optional[str] = None
    havdalah_mins: Optional[int] = None
    fast_begin_time: Optional[str] = None
    fast_end_time: Optional[str] = None
    location: LocationPayload
    event_type: Optional[str] = None
    flags: HolidayFlagsPayload

    @classmethod
    def from_domain(cls, match: HolidayMatch) -> "HolidayPayload":
        event = match.event
        fields: Dict[str, Any] = {
            "name": event.render(),
            "gregorian_date": format_long_date(event.date),
            "hebrew_date": str(event.hebrew),
            "hebrew_year": event.hebrew.year,
            "category": event.category_label,
            "description": event.description,
            "url": event.url,
            "memo": event.memo,
            "location": LocationPayload.from_domain(match.location),
            "flags": HolidayFlagsPayload(
                is_holiday=match.flags.is_holiday,
                is_candle_lighting=match.flags.is_candle_lighting,
                is_havdalah=match.flags.is_havdalah,
                is_rosh_chodesh=match.flags.is_rosh_chodesh,
                is_modern_holiday=match.flags.is_modern_holiday,
                is_minor_holiday=match.flags.is_minor_holiday,
                is_major_holiday=match.flags.is_major_holiday,
                is_fast=match.flags.is_fast,
            ),
        }
        if event.event_time is not None:
            clock = format_time(event.event_time)
            fields["event_time"] = clock
            if match.event_type is EventType.CANDLE_LIGHTING:
                fields["candle_lighting_time"] = clock
            elif match.event_type is EventType.HAVDALAH:
                fields["havdalah_time"] = clock
                fields["havdalah_mins"] = event.havdalah_mins
            elif "Fast begins" in event.description:
                fields["fast_begin_time"] = clock
            elif "Fast ends" in event.description:
                fields["fast_end_time"] = clock
        if match.event_type is not None:
            fields["event_type"] = match.event_type.value
        return cls(**fields)


class ZmanimPayload(Payload):
    name: str
    gregorian_date: str
    hebrew_date: str
    category: str
    description: str
    time: Optional[str] = None
    event_time: Optional[str] = None
    havdalah_mins: Optional[int] = None

    @classmethod
    def from_domain(cls, event: CalendarEvent) -> "ZmanimPayload":
        fields: Dict[str, Any] = {
            "name": event.render(),
            "gregorian_date": format_long_date(event.date),
            "hebrew_date": str(event.hebrew),
            "category": event.category_label,
            "description": event.description,
        }
        if event.event_time is not None:
            fields["time"] = format_time(event.event_time)
            fields["event_time"] = event.event_time.isoformat()
        if event.has_havdalah_minutes:
            fields["havdalah_mins"] = event.havdalah_mins
        return cls(**fields)


class HolidaySearchPayload(Payload):
    found: bool
    year: int
    search_term: str
    holidays: List[HolidayPayload]
    related_zmanim: List[ZmanimPayload]
    zmanim_count: int
    location_note: str

    @classmethod
    def from_domain(cls, search: HolidaySearch) -> "HolidaySearchPayload":
        zmanim = [ZmanimPayload.from_domain(event) for event in search.related_zmanim]
        return cls(
            found=True,
            year=search.year,
            search_term=search.search_term,
            holidays=[HolidayPayload.from_domain(match) for match in search.holidays],
            related_zmanim=zmanim,
            zmanim_count=len(zmanim),
            location_note=f"Times calculated for {search.location.name}. Actual times may vary by location.",
        )


class ListedHolidayPayload(Payload):
    name: str
    gregorian_date: str
    iso_date: str
    hebrew_date: str
    category: str


class HolidayListPayload(Payload):
    year: int
    total_holidays: int
    holidays: List[ListedHolidayPayload]

    @classmethod
    def from_domain(cls, listing: HolidayListing) -> "HolidayListPayload":
        holidays = [
            ListedHolidayPayload(
                name=event.render(),
                gregorian_date=format_short_date(event.date),
                iso_date=event.date.isoformat(),
                hebrew_date=str(event.hebrew),
                category=event.category_label,
            )
            for event in listing.holidays
        ]
        return cls(year=listing.year, total_holidays=len(holidays), holidays=holidays)
