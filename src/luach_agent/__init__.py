"""Hebrew calendar query engine and tool-calling assistant."""

from __future__ import annotations

from .cli import main as main

__all__ = ["main"]
