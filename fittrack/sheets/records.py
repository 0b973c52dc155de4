# -*- coding: utf-8 -*-
"""Cell record codecs.

Two composite records are packed into single spreadsheet cells:

* set record: ``<weight>/<sets>/<reps>`` (exactly 3 parts)
* meal record: ``<name>/<calories>/<protein>/<carbs>/<fat>`` (exactly 5 parts)

Cells with any other number of parts are not records; decoders return ``None``
and callers skip them.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

SET_RECORD_PARTS = 3
MEAL_RECORD_PARTS = 5

_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_float(value: Any) -> Optional[float]:
    """Lenient float parse: numbers pass through, strings use their numeric prefix."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    m = _FLOAT_PREFIX_RE.match(str(value))
    if not m:
        return None
    try:
        return float(m.group(1))
    except ValueError:
        return None


def first_number(text: Any) -> Optional[float]:
    """First contiguous digit run (optional decimal part) anywhere in ``text``.

    ``"5:30/km"`` yields 5.0: only the part before the colon is captured.
    """
    if text is None:
        return None
    m = _LEADING_NUMBER_RE.search(str(text))
    return float(m.group(0)) if m else None


def round_half_up(value: float, ndigits: int = 0) -> float:
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def sanitize_number(value: Any) -> float:
    parsed = parse_float(value)
    if parsed is None or not math.isfinite(parsed):
        return 0.0
    return parsed


def sanitize_macro(value: Any) -> float:
    """Non-negative, one decimal place."""
    return round_half_up(max(0.0, sanitize_number(value)), 1)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _component(value: Any) -> str:
    if value is None:
        return "0"
    if isinstance(value, float):
        return format_number(value)
    text = str(value).strip()
    return text or "0"


@dataclass(frozen=True)
class SetRecord:
    weight: float
    sets: float
    reps: float

    @property
    def is_empty(self) -> bool:
        return self.weight == 0 and self.sets == 0 and self.reps == 0


def encode_set_record(weight: Any, sets: Any, reps: Any) -> str:
    return "/".join(_component(v) for v in (weight, sets, reps))


def decode_set_record(text: Any) -> Optional[SetRecord]:
    if not isinstance(text, str):
        return None
    parts = text.split("/")
    if len(parts) != SET_RECORD_PARTS:
        return None
    weight, sets, reps = (sanitize_number(p) for p in parts)
    return SetRecord(weight=weight, sets=sets, reps=reps)


@dataclass(frozen=True)
class MealRecord:
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float

    def as_dict(self) -> dict:
        return {
            "name": self.name,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }


def encode_meal(meal: Any) -> str:
    """Accepts a mapping or any object with name/calories/protein/carbs/fat."""
    def pick(key: str) -> Any:
        if isinstance(meal, dict):
            return meal.get(key)
        return getattr(meal, key, None)

    name = str(pick("name") or "").strip().replace("/", "-")
    numbers = [
        format_number(sanitize_macro(pick(key)))
        for key in ("calories", "protein", "carbs", "fat")
    ]
    return "/".join([name, *numbers])


def decode_meal(text: Any) -> Optional[MealRecord]:
    if not isinstance(text, str):
        return None
    parts = text.split("/")
    if len(parts) != MEAL_RECORD_PARTS:
        return None
    name, calories, protein, carbs, fat = parts
    return MealRecord(
        name=name.strip(),
        calories=sanitize_macro(calories),
        protein=sanitize_macro(protein),
        carbs=sanitize_macro(carbs),
        fat=sanitize_macro(fat),
    )
