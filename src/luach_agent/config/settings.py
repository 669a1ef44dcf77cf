from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from ..domain import Location

load_dotenv()


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    temperature: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class LocationSettings:
    name: str
    latitude: float
    longitude: float
    timezone: str

    def to_location(self) -> Location:
        return Location(
            name=self.name,
            latitude=self.latitude,
            longitude=self.longitude,
            timezone=self.timezone,
        )


@dataclass(frozen=True)
class ZmanimSettings:
    candle_mins: int
    havdalah_mins: int
    window_days: int


@dataclass(frozen=True)
class ChatSettings:
    max_steps: int


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    location: LocationSettings
    zmanim: ZmanimSettings
    chat: ChatSettings


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        base_url=os.getenv("OPENAI_BASE_URL"),
        organization=os.getenv("OPENAI_ORG"),
        project=os.getenv("OPENAI_PROJECT"),
        temperature=_float_from_env("LUACH_CHAT_TEMPERATURE", 0.2),
    )

    location = LocationSettings(
        name=os.getenv("LUACH_LOCATION_NAME", "New York"),
        latitude=_float_from_env("LUACH_LATITUDE", 40.71427),
        longitude=_float_from_env("LUACH_LONGITUDE", -74.00597),
        timezone=os.getenv("LUACH_TIMEZONE", "America/New_York"),
    )

    zmanim = ZmanimSettings(
        candle_mins=_int_from_env("LUACH_CANDLE_MINUTES", 18),
        havdalah_mins=_int_from_env("LUACH_HAVDALAH_MINUTES", 42),
        window_days=_int_from_env("LUACH_ZMANIM_WINDOW_DAYS", 2),
    )

    chat = ChatSettings(max_steps=_int_from_env("LUACH_CHAT_MAX_STEPS", 10))

    return AppSettings(llm=llm, location=location, zmanim=zmanim, chat=chat)
