"""Network surfaces exposing the calendar tools."""
