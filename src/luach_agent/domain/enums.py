from __future__ import annotations

from enum import Enum


class CalendarSystem(str, Enum):
    GREGORIAN = "gregorian"
    HEBREW = "hebrew"


class EventCategory(str, Enum):
    HOLIDAY = "holiday"
    MAJOR = "major"
    MINOR = "minor"
    MODERN = "modern"
    FAST = "fast"
    EREV = "erev"
    CHOLHAMOED = "cholhamoed"
    ROSH_CHODESH = "roshchodesh"
    PARASHAT = "parashat"
    OMER = "omer"
    MOLAD = "molad"
    CANDLES = "candles"
    HAVDALAH = "havdalah"
    ZMANIM = "zmanim"
    SHABBAT = "shabbat"


class EventType(str, Enum):
    CANDLE_LIGHTING = "candle_lighting"
    HAVDALAH = "havdalah"
    HOLIDAY = "holiday"
