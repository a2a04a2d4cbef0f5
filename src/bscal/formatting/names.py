from __future__ import annotations
from typing import Tuple

# Baisakh .. Chaitra
MONTH_NAMES_EN: Tuple[str, ...] = (
    "Baisakh", "Jestha", "Asar", "Shrawan", "Bhadra", "Aswin",
    "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
)
MONTH_NAMES_NP: Tuple[str, ...] = (
    "बैशाख", "जेठ", "असार", "श्रावण", "भाद्र", "आश्विन",
    "कार्तिक", "मंसिर", "पौष", "माघ", "फाल्गुन", "चैत्र",
)

# Sunday first, as on Nepali wall calendars
WEEKDAY_NAMES_EN: Tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
WEEKDAY_NAMES_NP: Tuple[str, ...] = (
    "आइतबार", "सोमबार", "मंगलबार", "बुधबार", "बिहिबार", "शुक्रबार", "शनिबार",
)

BS_LABEL = ("BS", "बि.सं.")
AD_LABEL = ("AD", "ई.सं.")


def month_name(month: int, *, local: bool = False) -> str:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    return (MONTH_NAMES_NP if local else MONTH_NAMES_EN)[month - 1]


def weekday_name(weekday: int, *, local: bool = False) -> str:
    """weekday: 0=Sunday..6=Saturday."""
    return (WEEKDAY_NAMES_NP if local else WEEKDAY_NAMES_EN)[weekday % 7]
