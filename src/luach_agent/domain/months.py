from __future__ import annotations

# Month numbering starts at Nissan; Adar II only exists in leap years.
MONTH_NAMES = {
    1: "Nissan",
    2: "Iyar",
    3: "Sivan",
    4: "Tammuz",
    5: "Av",
    6: "Elul",
    7: "Tishrei",
    8: "Cheshvan",
    9: "Kislev",
    10: "Teves",
    11: "Shvat",
    12: "Adar",
    13: "Adar II",
}

TISHREI = 7
ADAR = 12
ADAR_II = 13


def month_name(month: int, *, leap: bool = False) -> str:
    if month == ADAR and leap:
        return "Adar I"
    try:
        return MONTH_NAMES[month]
    except KeyError as exc:
        raise ValueError(f"Unknown Hebrew month: {month}") from exc
