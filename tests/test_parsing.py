"""
Unit tests for the shared parsing and formatting helpers.
"""

from datetime import date, datetime

import pytest

from luach_agent.engine.parsing import (
    HebrewDateParts,
    format_long_date,
    format_short_date,
    format_time,
    next_sabbath,
    parse_civil_date,
    parse_hebrew_date,
    resolve_month,
    season_for_month,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("15/1/5785", HebrewDateParts(15, 1, 5785)),
        ("15-7-5785", HebrewDateParts(15, 7, 5785)),
        ("15 Tishrei 5785", HebrewDateParts(15, "Tishrei", 5785)),
        ("15th of Tishrei 5785", HebrewDateParts(15, "Tishrei", 5785)),
        ("1st Nissan 5784", HebrewDateParts(1, "Nissan", 5784)),
        ("3 Adar II 5784", HebrewDateParts(3, "Adar II", 5784)),
        ("6 Adar I 5784", HebrewDateParts(6, "Adar I", 5784)),
    ],
)
def test_parse_hebrew_date_shapes(text, expected):
    assert parse_hebrew_date(text) == expected


@pytest.mark.parametrize("text", ["", "not a date", "Tishrei 5785", "15 Tishrei", "2024-10-03"])
def test_parse_hebrew_date_rejects_other_text(text):
    assert parse_hebrew_date(text) is None


def test_resolve_month_names_and_variants():
    assert resolve_month("Tishrei", leap=False) == 7
    assert resolve_month("tishri", leap=False) == 7
    assert resolve_month("Nisan", leap=True) == 1
    assert resolve_month("Tevet", leap=False) == 10
    assert resolve_month("Adar I", leap=True) == 12
    assert resolve_month("Adar II", leap=True) == 13
    assert resolve_month(5, leap=False) == 5
    assert resolve_month("Smarch", leap=False) is None


def test_resolve_month_folds_adar_ii_in_common_year():
    assert resolve_month("Adar II", leap=False) == 12


def test_parse_civil_date():
    assert parse_civil_date("2024-10-03") == date(2024, 10, 3)
    assert parse_civil_date(" 2024-10-03 ") == date(2024, 10, 3)
    assert parse_civil_date("2024-02-30") is None
    assert parse_civil_date("not-a-date") is None


@pytest.mark.parametrize(
    "month, season",
    [(1, "Winter"), (3, "Winter"), (4, "Spring"), (6, "Spring"), (7, "Summer"), (9, "Summer"), (10, "Fall"), (13, "Fall")],
)
def test_season_table(month, season):
    assert season_for_month(month) == season


def test_next_sabbath_is_inclusive():
    assert next_sabbath(date(2024, 10, 3)) == date(2024, 10, 5)
    assert next_sabbath(date(2024, 10, 5)) == date(2024, 10, 5)
    assert next_sabbath(date(2024, 10, 6)) == date(2024, 10, 12)


def test_format_time_is_twelve_hour():
    assert format_time(datetime(2024, 4, 22, 19, 18)) == "7:18 PM"
    assert format_time(datetime(2024, 4, 22, 0, 5)) == "12:05 AM"
    assert format_time(datetime(2024, 4, 22, 12, 0)) == "12:00 PM"
    assert format_time(datetime(2024, 4, 22, 9, 7)) == "9:07 AM"


def test_date_formats():
    assert format_long_date(date(2024, 4, 22)) == "Monday, April 22, 2024"
    assert format_short_date(date(2024, 4, 22)) == "Apr 22"


@pytest.mark.parametrize(
    "name, leap, expected",
    [
        ("Adar", True, 13),
        ("Adar", False, 12),
        ("Adar I", True, 12),
        ("Adar 1", True, 12),
        ("Adar Aleph", True, 12),
        ("Adar Beis", True, 13),
    ],
)
def test_resolve_bare_adar_follows_purim(name, leap, expected):
    assert resolve_month(name, leap=leap) == expected
