"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, ChatSettings, LlmSettings, LocationSettings, ZmanimSettings, get_settings

__all__ = ["AppSettings", "ChatSettings", "LlmSettings", "LocationSettings", "ZmanimSettings", "get_settings"]
