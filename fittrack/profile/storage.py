# -*- coding: utf-8 -*-
"""Profile sheet: A1:B4 header block, D:F weight log ``[date, weight, tdee]``."""

from __future__ import annotations

from typing import Any, List, Optional

from ..config import settings
from ..sheets.a1 import a1
from ..sheets.client import SheetsBackend, get_sheets
from ..sheets.records import format_number, parse_float
from .metrics import calculate_age, calculate_tdee
from .models import Profile, ProfileResponse, WeightEntry

PROFILE_FIELDS = ("name", "dob", "goal_weight", "height")


def _value(rows: List[List[str]], index: int) -> str:
    if index < len(rows) and len(rows[index]) > 1:
        return str(rows[index][1]).strip()
    return ""


def get_weight_history(sheets: SheetsBackend | None = None) -> List[WeightEntry]:
    backend = sheets or get_sheets()
    rows = backend.get(a1(settings.profile_sheet, "D2:F"))
    history: List[WeightEntry] = []
    for row in rows:
        cells = list(row) + [""] * (3 - len(row))
        if not str(cells[0]).strip():
            continue
        history.append(WeightEntry(date=str(cells[0]), weight=str(cells[1]), tdee=str(cells[2])))
    return history


def latest_tdee(history: List[WeightEntry]) -> Optional[float]:
    """Most recent non-empty TDEE, scanning the log from the end."""
    for entry in reversed(history):
        value = parse_float(entry.tdee)
        if value is not None and str(entry.tdee).strip():
            return value
    return None


def get_profile_data(sheets: SheetsBackend | None = None) -> ProfileResponse:
    backend = sheets or get_sheets()
    block = backend.get(a1(settings.profile_sheet, "A1:B4"))
    values = {field: _value(block, i) for i, field in enumerate(PROFILE_FIELDS)}
    history = get_weight_history(backend)
    profile = Profile(
        **values,
        age=calculate_age(values["dob"]),
        current_tdee=latest_tdee(history),
    )
    return ProfileResponse(profile=profile, weight_history=history)


def estimate_tdee(profile: Profile, weight_kg: float) -> Optional[int]:
    height_cm = parse_float(profile.height)
    if profile.age is None or height_cm is None:
        return None
    return calculate_tdee(weight_kg, height_cm, profile.age)


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, float):
        return format_number(value)
    return value


def save_weight_entry(date: str, weight: Any, tdee: Any, sheets: SheetsBackend | None = None) -> Optional[int]:
    backend = sheets or get_sheets()
    return backend.append(
        a1(settings.profile_sheet, "D:F"),
        [[date, _cell(weight), _cell(tdee)]],
    )
