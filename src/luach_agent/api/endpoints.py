from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, Literal

from pydantic import Field

from ..domain import CalendarSystem
from ..engine import ErrorKind, QueryFailure
from .models import ConversionPayload, HolidayListPayload, HolidaySearchPayload
from .registry import register_api
from .state import api_state


@register_api(
    "todaysDate",
    description="Find out what date is right now",
    category="clock",
    tags=("read",),
)
def todays_date() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@register_api(
    "convertDate",
    description=(
        "Convert dates between Gregorian and Hebrew calendars. Supports both directions with comprehensive "
        "date information including parsha, seasons, and Jewish calendar details."
    ),
    category="conversion",
    tags=("read", "hebrew", "gregorian"),
)
def convert_date(
    inputDate: Annotated[  # noqa: N803
        str,
        Field(
            description=(
                "The date to convert. For Gregorian: use YYYY-MM-DD format (e.g., '2024-10-03'). "
                "For Hebrew: use formats like '15 Tishrei 5785' or '15/1/5785'"
            )
        ),
    ],
    fromCalendar: Annotated[  # noqa: N803
        Literal["gregorian", "hebrew"],
        Field(
            description=(
                "The source calendar system - 'gregorian' to convert from Gregorian to Hebrew, "
                "'hebrew' to convert from Hebrew to Gregorian"
            )
        ),
    ],
) -> Dict[str, Any]:
    result = api_state.converter.convert(inputDate, CalendarSystem(fromCalendar))
    if isinstance(result, QueryFailure):
        return {"success": False, **result.to_dict()}
    return ConversionPayload.from_domain(result.value).to_json()


@register_api(
    "findJewishHoliday",
    description=(
        "Find a specific Jewish holiday by name and year, returns all the information about the holiday "
        "including candle lighting time and zmanim"
    ),
    category="holidays",
    tags=("read", "zmanim"),
)
def find_jewish_holiday(
    year: Annotated[int, Field(description="The year to search for the holiday (Gregorian year)")],
    holidayName: Annotated[  # noqa: N803
        str,
        Field(
            description="The name of the Jewish holiday to find (e.g., 'Rosh Hashana', 'Yom Kippur', 'Passover')"
        ),
    ],
) -> Dict[str, Any]:
    result = api_state.finder.find(year, holidayName)
    if isinstance(result, QueryFailure):
        if result.kind is ErrorKind.NO_MATCH_FOUND:
            return {"found": False, "message": result.message, "errorType": result.kind.value}
        return {"found": False, **result.to_dict()}
    return HolidaySearchPayload.from_domain(result.value).to_json()


@register_api(
    "listJewishHolidays",
    description="List all Jewish holidays for a given year",
    category="holidays",
    tags=("read",),
)
def list_jewish_holidays(
    year: Annotated[int, Field(description="The year to get holidays for (Gregorian year)")],
) -> Dict[str, Any]:
    result = api_state.lister.list(year)
    if isinstance(result, QueryFailure):
        return result.to_dict()
    return HolidayListPayload.from_domain(result.value).to_json()
