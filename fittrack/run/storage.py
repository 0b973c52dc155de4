# -*- coding: utf-8 -*-
"""Run sheet: header row, then ``[session, distance, duration, pace, cadence]`` rows."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..config import settings
from ..sheets.a1 import a1
from ..sheets.client import SheetsBackend, get_sheets
from ..sheets.records import first_number, format_number, parse_float, round_half_up
from .models import RunStatsResponse

RUN_FIELDS = ("session", "distance", "duration", "pace", "cadence")
NOT_AVAILABLE = "N/A"


def get_run_sessions(sheets: SheetsBackend | None = None) -> Dict[str, Any]:
    backend = sheets or get_sheets()
    rows = backend.get(a1(settings.run_sheet, "A:E"))
    headers = rows[0] if rows else []
    return {"headers": headers, "sessions": rows[1:]}


def _cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, float):
        return format_number(value)
    return value


def save_run_session(record: Dict[str, Any], sheets: SheetsBackend | None = None) -> Optional[int]:
    backend = sheets or get_sheets()
    row = [_cell(record.get(field)) for field in RUN_FIELDS]
    return backend.append(a1(settings.run_sheet, "A:E"), [row])


def compute_run_stats(sessions: List[List[Any]]) -> RunStatsResponse:
    total_distance = 0.0
    total_runs = 0
    paces: List[float] = []
    cadences: List[float] = []

    # Every data row is a run, blank rows included.
    for row in sessions:
        total_runs += 1
        cells = list(row) + [""] * (len(RUN_FIELDS) - len(row))
        distance = parse_float(cells[1])
        if distance is not None:
            total_distance += distance
        pace = first_number(cells[3])
        if pace is not None:
            paces.append(pace)
        cadence = first_number(cells[4])
        if cadence is not None:
            cadences.append(cadence)

    avg_pace = f"{round_half_up(sum(paces) / len(paces), 2):.2f}" if paces else NOT_AVAILABLE
    avg_cadence: int | str = (
        int(round_half_up(sum(cadences) / len(cadences))) if cadences else NOT_AVAILABLE
    )
    return RunStatsResponse(
        total_distance=f"{round_half_up(total_distance, 1):.1f}",
        total_runs=total_runs,
        avg_pace=avg_pace,
        avg_cadence=avg_cadence,
    )


def get_run_stats(sheets: SheetsBackend | None = None) -> RunStatsResponse:
    return compute_run_stats(get_run_sessions(sheets)["sessions"])
