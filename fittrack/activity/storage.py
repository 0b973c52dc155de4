# -*- coding: utf-8 -*-
"""Calendar activity aggregation over workout and run sheets."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Set

from dateutil import parser as dateparser

from ..config import settings
from ..sheets.a1 import a1
from ..sheets.client import SheetsBackend, get_sheets
from ..workout.storage import LAST_SESSION_COLUMN

logger = logging.getLogger(__name__)


def parse_label_date(label: str) -> Optional[date]:
    """Best-effort date from a free-text session label, e.g. 'Oct 18, 2026, 07:30 AM'."""
    text = (label or "").strip()
    if not text:
        return None
    try:
        return dateparser.parse(text).date()
    except (ValueError, OverflowError):
        return None


def _collect(labels: Iterable[str], into: Set[str]) -> None:
    for label in labels:
        day = parse_label_date(str(label))
        if day is not None:
            into.add(day.isoformat())


def is_workout_sheet(name: str, categories: Iterable[str]) -> bool:
    lowered = name.lower()
    return any(category.lower() in lowered for category in categories)


def get_calendar_activities(sheets: SheetsBackend | None = None) -> dict:
    backend = sheets or get_sheets()
    titles = backend.sheet_titles()

    workout_dates: Set[str] = set()
    for name in titles:
        if not is_workout_sheet(name, settings.workout_categories):
            continue
        header_rows = backend.get(a1(name, f"B1:{LAST_SESSION_COLUMN}1"))
        _collect(header_rows[0] if header_rows else [], workout_dates)

    run_dates: Set[str] = set()
    if settings.run_sheet in titles:
        run_rows = backend.get(a1(settings.run_sheet, "A2:A"))
    else:
        logger.warning("no %r sheet, calendar shows workouts only", settings.run_sheet)
        run_rows = []
    _collect((row[0] for row in run_rows if row), run_dates)

    return {"workout_dates": sorted(workout_dates), "run_dates": sorted(run_dates)}
