"""Calendar math providers consumed by the query engine."""

from __future__ import annotations

from .base import CalendarMathProvider, CalendarOptions
from .pyluach_provider import PyluachProvider

__all__ = ["CalendarMathProvider", "CalendarOptions", "PyluachProvider"]
