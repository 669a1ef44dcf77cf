"""
Shared pytest fixtures for the calendar engine tests.
"""

from datetime import date

import pytest

from luach_agent.config import AppSettings, ChatSettings, LlmSettings, LocationSettings, ZmanimSettings
from luach_agent.domain import Location
from luach_agent.provider import PyluachProvider

NEW_YORK = Location(name="New York", latitude=40.71427, longitude=-74.00597, timezone="America/New_York")


@pytest.fixture(scope="session")
def provider():
    return PyluachProvider()


@pytest.fixture
def location():
    return NEW_YORK


@pytest.fixture
def settings():
    return AppSettings(
        llm=LlmSettings(
            api_key="test-key",
            model="test-model",
            base_url=None,
            organization=None,
            project=None,
            temperature=0.0,
        ),
        location=LocationSettings(
            name=NEW_YORK.name,
            latitude=NEW_YORK.latitude,
            longitude=NEW_YORK.longitude,
            timezone=NEW_YORK.timezone,
        ),
        zmanim=ZmanimSettings(candle_mins=18, havdalah_mins=42, window_days=2),
        chat=ChatSettings(max_steps=10),
    )


@pytest.fixture
def seder_night():
    return date(2024, 4, 22)
