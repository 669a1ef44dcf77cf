"""
Tests for the pyluach/astral-backed calendar math provider.
"""

from datetime import date

import pytest

from luach_agent.domain import EventCategory
from luach_agent.provider import CalendarOptions


def _by_title(events):
    return {event.render(): event for event in events}


def test_conversions(provider):
    hebrew = provider.to_hebrew(date(2024, 10, 3))

    assert (hebrew.year, hebrew.month, hebrew.day) == (5785, 7, 1)
    assert hebrew.month_name == "Tishrei"
    assert provider.to_civil(5784, 1, 15) == date(2024, 4, 23)
    assert provider.is_leap_year(5784) is True
    assert provider.is_leap_year(5785) is False
    assert provider.days_in_month(5785, 7) == 30
    assert provider.days_in_month(5785, 6) == 29


def test_invalid_hebrew_day_raises(provider):
    with pytest.raises(ValueError):
        provider.to_civil(5785, 7, 40)


def test_options_need_year_or_start():
    with pytest.raises(ValueError):
        CalendarOptions().civil_range()
    assert CalendarOptions(start=date(2024, 1, 5)).civil_range() == (date(2024, 1, 5), date(2024, 1, 5))


def test_year_calendar_holidays(provider):
    events = _by_title(provider.calendar(CalendarOptions(year=2024)))

    assert events["Erev Pesach"].date == date(2024, 4, 22)
    pesach = events["Pesach I"]
    assert pesach.date == date(2024, 4, 23)
    assert pesach.has_category(EventCategory.MAJOR)
    assert not pesach.has_category(EventCategory.CHOLHAMOED)
    assert events["Pesach III"].has_category(EventCategory.CHOLHAMOED)
    assert events["Rosh Hashana 5785"].date == date(2024, 10, 3)
    assert events["Yom Kippur"].date == date(2024, 10, 12)


def test_shabbat_candles_and_havdalah(provider, location):
    events = provider.calendar(
        CalendarOptions(start=date(2024, 4, 19), end=date(2024, 4, 20), candlelighting=True, location=location)
    )

    candles = [event for event in events if event.has_category(EventCategory.CANDLES)]
    havdalah = [event for event in events if event.has_category(EventCategory.HAVDALAH)]
    assert len(candles) == 1 and candles[0].date == date(2024, 4, 19)
    assert candles[0].event_time.hour == 19
    assert str(candles[0].event_time.tzinfo) == "America/New_York"
    assert len(havdalah) == 1 and havdalah[0].date == date(2024, 4, 20)
    assert havdalah[0].havdalah_mins == 42
    assert havdalah[0].event_time.hour == 20


def test_no_timed_events_without_location(provider):
    events = provider.calendar(CalendarOptions(start=date(2024, 4, 19), end=date(2024, 4, 20), candlelighting=True))

    assert not any(event.has_clock_time for event in events)


def test_weekly_portion_on_sabbath(provider):
    events = provider.calendar(CalendarOptions(start=date(2024, 10, 5), sedrot=True))

    portions = [event for event in events if event.has_category(EventCategory.PARASHAT)]
    assert len(portions) == 1
    assert portions[0].render().startswith("Parashat ")


def test_omer_count(provider):
    events = provider.calendar(CalendarOptions(start=date(2024, 4, 24), end=date(2024, 4, 25), omer=True))

    omer = [event.render() for event in events if event.has_category(EventCategory.OMER)]
    assert omer == ["1st day of the Omer", "2nd day of the Omer"]


def test_rosh_chodesh(provider):
    events = _by_title(provider.calendar(CalendarOptions(start=date(2024, 11, 1), end=date(2024, 11, 2))))

    assert events["Rosh Chodesh Cheshvan"].has_category(EventCategory.ROSH_CHODESH)


def test_israeli_national_days_2024(provider):
    events = provider.calendar(CalendarOptions(year=2024))

    modern = {event.render(): event.date for event in events if event.has_category(EventCategory.MODERN)}
    assert modern == {
        "Yom HaShoah": date(2024, 5, 6),
        "Yom HaZikaron": date(2024, 5, 13),
        "Yom HaAtzma'ut": date(2024, 5, 14),
        "Yom Yerushalayim": date(2024, 6, 5),
    }


def test_special_shabbatot_2024(provider):
    events = provider.calendar(CalendarOptions(year=2024))

    special = {event.render(): event.date for event in events if event.has_category(EventCategory.SHABBAT)}
    assert special["Shabbat Shekalim"] == date(2024, 3, 9)
    assert special["Shabbat Zachor"] == date(2024, 3, 23)
    assert special["Shabbat Parah"] == date(2024, 3, 30)
    assert special["Shabbat HaChodesh"] == date(2024, 4, 6)
    assert special["Shabbat HaGadol"] == date(2024, 4, 20)
    assert special["Shabbat Chazon"] == date(2024, 8, 10)
    assert special["Shabbat Nachamu"] == date(2024, 8, 17)
    assert special["Shabbat Shuva"] == date(2024, 10, 5)
    assert special["Shabbat Shirah"].month == 1
    assert all(day.weekday() == 5 for day in special.values())


def test_erev_purim_and_tisha_bav(provider):
    events = _by_title(provider.calendar(CalendarOptions(year=2024)))

    assert events["Erev Purim"].date == date(2024, 3, 23)
    assert events["Erev Tish'a B'Av"].date == date(2024, 8, 12)
    assert events["Erev Tish'a B'Av"].has_category(EventCategory.EREV)


def test_molad_announced_only_on_shabbat_before_new_month(provider):
    events = provider.calendar(CalendarOptions(start=date(2024, 6, 29), end=date(2024, 7, 6), molad=True))

    molad = [event for event in events if event.has_category(EventCategory.MOLAD)]
    assert [event.date for event in molad] == [date(2024, 6, 29)]
    assert molad[0].render().startswith("Molad Tammuz: ")
