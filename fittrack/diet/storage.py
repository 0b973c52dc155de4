# -*- coding: utf-8 -*-
"""Diet — Food and Deficit sheets.

Food: one row per day, ``YYYY-MM-DD`` in column A, one encoded meal per
following cell. Deficit: one row per day ``[date, totalCalories, deficit]``,
rewritten in place on every change.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from dateutil import parser as dateparser

from ..config import settings
from ..profile.storage import get_weight_history, latest_tdee
from ..sheets.a1 import a1, column_letters
from ..sheets.client import SheetsBackend, get_sheets
from ..sheets.locks import sheet_locks
from ..sheets.records import decode_meal, encode_meal, round_half_up, sanitize_number
from .models import DeficitEntry, DeficitStats

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 90


def today_str() -> str:
    if settings.timezone:
        return datetime.now(ZoneInfo(settings.timezone)).date().isoformat()
    return date.today().isoformat()


def _number(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


def _find_day_row(backend: SheetsBackend, sheet: str, last_col: str, day: str) -> Tuple[Optional[int], List[str]]:
    rows = backend.get(a1(sheet, f"A:{last_col}"))
    for i, row in enumerate(rows):
        if row and str(row[0]).strip() == day:
            return i + 1, row
    return None, []


def get_todays_meals(sheets: SheetsBackend | None = None) -> Dict[str, Any]:
    backend = sheets or get_sheets()
    day = today_str()
    _, row = _find_day_row(backend, settings.food_sheet, "ZZ", day)
    meals = []
    for cell in row[1:]:
        if not str(cell).strip():
            continue
        record = decode_meal(cell)
        if record is None:
            logger.warning("skipping malformed meal cell on %s: %r", day, cell)
            continue
        meals.append(record.as_dict())
    return {"date": day, "meals": meals}


def add_meal(meal: Any, sheets: SheetsBackend | None = None) -> Dict[str, float]:
    """Store one meal in today's Food row, then refresh today's deficit."""
    backend = sheets or get_sheets()
    day = today_str()
    encoded = encode_meal(meal)
    with sheet_locks.hold(("food", day)):
        row_number, row = _find_day_row(backend, settings.food_sheet, "ZZ", day)
        if row_number is None:
            backend.append(a1(settings.food_sheet, "A:B"), [[day, encoded]])
        else:
            free = next((i for i in range(1, len(row)) if not str(row[i]).strip()), max(len(row), 1))
            cell = f"{column_letters(free)}{row_number}"
            backend.update(a1(settings.food_sheet, cell), [[encoded]])
    return update_deficit(backend)


def update_deficit(sheets: SheetsBackend | None = None) -> Dict[str, float]:
    backend = sheets or get_sheets()
    day = today_str()
    # Meals are read under the lock so the last writer sees every earlier meal.
    with sheet_locks.hold(("deficit", day)):
        today = get_todays_meals(backend)
        total = round_half_up(sum(m["calories"] for m in today["meals"]), 1)
        tdee = latest_tdee(get_weight_history(backend))
        if tdee is None:
            tdee = settings.default_tdee
        deficit = round_half_up(tdee - total, 1)

        row_number, _ = _find_day_row(backend, settings.deficit_sheet, "C", day)
        if row_number is None:
            backend.append(a1(settings.deficit_sheet, "A:C"), [[day, _number(total), _number(deficit)]])
        else:
            backend.update(
                a1(settings.deficit_sheet, f"B{row_number}:C{row_number}"),
                [[_number(total), _number(deficit)]],
            )
    return {"total_calories": total, "deficit": deficit, "tdee": tdee}


def _parse_day(text: Any) -> Optional[date]:
    raw = str(text or "").strip()
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return dateparser.parse(raw).date()
    except (ValueError, OverflowError):
        return None


def get_deficit_history(limit: int = DEFAULT_HISTORY_LIMIT, sheets: SheetsBackend | None = None) -> List[DeficitEntry]:
    """Deficit rows sorted by date value (not sheet order), most recent ``limit``."""
    if limit <= 0:
        return []
    backend = sheets or get_sheets()
    rows = backend.get(a1(settings.deficit_sheet, "A:C"))
    dated: List[Tuple[date, DeficitEntry]] = []
    for row in rows:
        if not row:
            continue
        day = _parse_day(row[0])
        if day is None:
            continue
        cells = list(row) + [""] * (3 - len(row))
        dated.append(
            (
                day,
                DeficitEntry(
                    date=str(row[0]).strip(),
                    total_calories=sanitize_number(cells[1]),
                    deficit=sanitize_number(cells[2]),
                ),
            )
        )
    dated.sort(key=lambda pair: pair[0])
    return [entry for _, entry in dated[-limit:]]


def summarize_deficits(history: List[DeficitEntry]) -> Optional[DeficitStats]:
    if not history:
        return None
    values = [entry.deficit for entry in history]
    return DeficitStats(average=sum(values) / len(values), max=max(values), min=min(values))
