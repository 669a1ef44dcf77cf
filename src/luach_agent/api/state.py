from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..engine import DateConverter, HolidayFinder, HolidayLister
from ..provider import CalendarMathProvider, PyluachProvider


@dataclass(slots=True)
class ApiState:
    settings: AppSettings = field(default_factory=get_settings)
    provider: CalendarMathProvider = field(default_factory=PyluachProvider)
    converter: DateConverter = field(init=False)
    finder: HolidayFinder = field(init=False)
    lister: HolidayLister = field(init=False)

    def __post_init__(self) -> None:
        zmanim = self.settings.zmanim
        self.converter = DateConverter(self.provider)
        self.finder = HolidayFinder(
            self.provider,
            self.settings.location.to_location(),
            candle_mins=zmanim.candle_mins,
            havdalah_mins=zmanim.havdalah_mins,
            zmanim_window_days=zmanim.window_days,
        )
        self.lister = HolidayLister(self.provider)


api_state = ApiState()
