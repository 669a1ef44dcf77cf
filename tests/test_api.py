"""
Tool adapter tests: registry schema plus the four calendar tools.
"""

from datetime import date, datetime

import pytest

from luach_agent.api import call_api, get_api_functions

TOOL_NAMES = {"todaysDate", "convertDate", "findJewishHoliday", "listJewishHolidays"}


def _tool(name):
    return next(func for func in get_api_functions() if func.name == name)


def test_only_calendar_tools_are_registered():
    assert {func.name for func in get_api_functions()} == TOOL_NAMES


def test_convert_date_schema():
    schema = _tool("convertDate").as_tool()["function"]["parameters"]

    assert schema["required"] == ["inputDate", "fromCalendar"]
    assert schema["properties"]["fromCalendar"]["enum"] == ["gregorian", "hebrew"]
    assert schema["properties"]["inputDate"]["type"] == "string"
    assert "YYYY-MM-DD" in schema["properties"]["inputDate"]["description"]


def test_year_parameters_are_integers():
    for name in ("findJewishHoliday", "listJewishHolidays"):
        assert _tool(name).parameter_schema["properties"]["year"]["type"] == "integer"


def test_todays_date_is_utc_iso():
    value = call_api("todaysDate")

    assert value.endswith("Z")
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0


def test_convert_gregorian():
    result = call_api("convertDate", inputDate="2024-10-03", fromCalendar="gregorian")

    assert result["success"] is True
    assert result["inputCalendar"] == "gregorian"
    assert result["outputCalendar"] == "hebrew"
    assert result["hebrewDate"]["hebrewYear"] == 5785
    assert result["hebrewDate"]["hebrewMonth"] == "Tishrei"
    assert result["gregorianDate"]["formatted"] == "Thursday, October 3, 2024"
    assert result["additionalInfo"]["season"] in {"Winter", "Spring", "Summer", "Fall"}
    assert result["additionalInfo"]["isRoshChodesh"] is True


def test_convert_hebrew():
    result = call_api("convertDate", inputDate="15 Nissan 5784", fromCalendar="hebrew")

    assert result["success"] is True
    assert result["gregorianDate"]["iso"] == "2024-04-23"


def test_convert_invalid_inputs():
    civil = call_api("convertDate", inputDate="2024-13-45", fromCalendar="gregorian")
    assert civil == {"success": False, "error": civil["error"], "errorType": "InvalidCivilDate"}
    assert "YYYY-MM-DD" in civil["error"]

    hebrew = call_api("convertDate", inputDate="40 Tishrei 5785", fromCalendar="hebrew")
    assert hebrew["success"] is False
    assert hebrew["errorType"] == "InvalidHebrewDate"


def test_bad_arguments_raise_value_error():
    with pytest.raises(ValueError):
        call_api("convertDate", inputDate="2024-10-03", fromCalendar="julian")
    with pytest.raises(ValueError):
        call_api("listJewishHolidays", year="next year")


def test_unknown_tool_raises_key_error():
    with pytest.raises(KeyError):
        call_api("getWeather")


def test_find_passover():
    result = call_api("findJewishHoliday", year=2024, holidayName="Passover")

    assert result["found"] is True
    assert result["searchTerm"] == "Passover"
    assert any("Nissan" in holiday["hebrewDate"] for holiday in result["holidays"])
    assert all("url" in holiday and "memo" in holiday for holiday in result["holidays"])
    assert result["zmanimCount"] == len(result["relatedZmanim"])
    assert result["locationNote"].startswith("Times calculated for ")

    candles = [entry for entry in result["relatedZmanim"] if entry["category"] == "candles"]
    assert candles
    days = {date.fromisoformat(entry["eventTime"][:10]) for entry in candles}
    assert days & {date(2024, 4, day) for day in range(21, 26)}


def test_find_unknown_holiday():
    result = call_api("findJewishHoliday", year=2024, holidayName="Festival of Nothing")

    assert result["found"] is False
    assert result["errorType"] == "NoMatchFound"
    assert "listJewishHolidays" in result["message"]


def test_list_holidays_sorted():
    result = call_api("listJewishHolidays", year=2024)

    iso_dates = [holiday["isoDate"] for holiday in result["holidays"]]
    assert result["year"] == 2024
    assert result["totalHolidays"] == len(iso_dates) > 0
    assert iso_dates == sorted(iso_dates)
    assert set(result["holidays"][0]) == {"name", "gregorianDate", "isoDate", "hebrewDate", "category"}


def test_find_modern_holiday():
    result = call_api("findJewishHoliday", year=2024, holidayName="Yom Ha'atzmaut")

    assert result["found"] is True
    holiday = result["holidays"][0]
    assert holiday["name"] == "Yom HaAtzma'ut"
    assert holiday["gregorianDate"] == "Tuesday, May 14, 2024"
    assert holiday["category"] == "holiday, modern"
    assert holiday["flags"]["isModernHoliday"] is True


def test_bare_adar_in_leap_year_is_purim():
    result = call_api("convertDate", inputDate="14 Adar 5784", fromCalendar="hebrew")

    assert result["gregorianDate"]["iso"] == "2024-03-24"
    assert result["hebrewDate"]["hebrewMonth"] == "Adar II"
