# -*- coding: utf-8 -*-
"""Age and TDEE from the profile block."""

from __future__ import annotations

from datetime import date
from typing import Optional

from dateutil import parser as dateparser

from ..sheets.records import round_half_up

# Fixed activity multiplier on top of the Mifflin-St Jeor BMR; not configurable.
ACTIVITY_MULTIPLIER = 1.9


def parse_dob(dob: str) -> Optional[date]:
    """``DD/MM/YYYY`` when the text contains '/', otherwise any format dateutil understands."""
    text = (dob or "").strip()
    if not text:
        return None
    if "/" in text:
        parts = text.split("/")
        if len(parts) == 3:
            try:
                day, month, year = (int(p) for p in parts)
                return date(year, month, day)
            except ValueError:
                return None
    try:
        return dateparser.parse(text).date()
    except (ValueError, OverflowError):
        return None


def calculate_age(dob: str, today: Optional[date] = None) -> Optional[int]:
    birth = parse_dob(dob)
    if birth is None:
        return None
    today = today or date.today()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1
    return age


def calculate_bmr(weight_kg: float, height_cm: float, age: int) -> float:
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + 5


def calculate_tdee(weight_kg: float, height_cm: float, age: int) -> int:
    bmr = calculate_bmr(weight_kg, height_cm, age)
    return int(round_half_up(bmr * ACTIVITY_MULTIPLIER))
