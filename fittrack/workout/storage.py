# -*- coding: utf-8 -*-
"""Workout sheets: column A = exercises, one column per session from B."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..sheets.a1 import a1, column_index, column_letters, is_column
from ..sheets.client import SheetsBackend, get_sheets
from ..sheets.locks import sheet_locks
from ..sheets.records import SetRecord, decode_set_record, encode_set_record, round_half_up
from .models import ExerciseStat, SetInput

logger = logging.getLogger(__name__)

# Session columns start at B (index 1); ZZ bounds the scan like the sheet template.
FIRST_SESSION_COLUMN = 1
LAST_SESSION_COLUMN = "ZZ"
MAX_EXERCISE_ROW = 100


def list_workout_sheet_names(
    keyword: Optional[str] = None,
    sheets: SheetsBackend | None = None,
) -> List[str]:
    backend = sheets or get_sheets()
    names = backend.sheet_titles()
    if not keyword:
        return names
    needle = keyword.lower()
    return [n for n in names if needle in n.lower()]


def _exercise_rows(sheet_name: str, backend: SheetsBackend) -> List[Tuple[str, int]]:
    """(name, 1-based row) for every non-empty exercise cell in column A."""
    column = backend.get(a1(sheet_name, f"A2:A{MAX_EXERCISE_ROW}"))
    out: List[Tuple[str, int]] = []
    for offset, row in enumerate(column):
        name = (row[0] if row else "").strip()
        if name:
            out.append((name, offset + 2))
    return out


def get_workout_definition(sheet_name: str, sheets: SheetsBackend | None = None) -> Dict[str, Any]:
    backend = sheets or get_sheets()
    exercises = _exercise_rows(sheet_name, backend)
    session_matrix = backend.get(a1(sheet_name, f"B1:{LAST_SESSION_COLUMN}{MAX_EXERCISE_ROW}"))
    return {
        "exercise_names": [name for name, _ in exercises],
        "session_matrix": session_matrix,
    }


def encode_cell(cell: Any) -> str:
    """Normalize one per-exercise entry of a save request to cell text."""
    if cell is None:
        return ""
    if isinstance(cell, SetInput):
        cell = cell.model_dump()
    if isinstance(cell, dict):
        values = [cell.get(k) for k in ("weight", "sets", "reps")]
        if all(v is None or str(v).strip() == "" for v in values):
            return ""
        return encode_set_record(*values)
    if isinstance(cell, (list, tuple)):
        return encode_cell(cell[0] if cell else None)
    return str(cell).strip()


def resolve_session_column(
    sheet_name: str,
    session_label: str,
    existing_column: Optional[str] = None,
    sheets: SheetsBackend | None = None,
) -> str:
    if existing_column:
        if not is_column(existing_column):
            raise ValueError(f"Invalid column reference: {existing_column!r}")
        return existing_column.upper()

    backend = sheets or get_sheets()
    header_rows = backend.get(a1(sheet_name, f"B1:{LAST_SESSION_COLUMN}1"))
    headers = header_rows[0] if header_rows else []
    for offset, label in enumerate(headers):
        if label == session_label:
            return column_letters(FIRST_SESSION_COLUMN + offset)
    return column_letters(FIRST_SESSION_COLUMN + len(headers))


def save_workout_session(
    sheet_name: str,
    session_label: str,
    records: Sequence[Any],
    existing_column: Optional[str] = None,
    sheets: SheetsBackend | None = None,
) -> str:
    """Write one session column and return its letters.

    The column comes from ``existing_column`` when the caller already owns one,
    else from the row-1 label match, else the next free column. Passing the
    returned letters back lets a client save one exercise at a time.
    """
    backend = sheets or get_sheets()
    with sheet_locks.hold(("workout-session", sheet_name)):
        column = resolve_session_column(sheet_name, session_label, existing_column, sheets=backend)
        if column_index(column) < FIRST_SESSION_COLUMN:
            raise ValueError("Session columns start at B; column A holds exercise names")
        values = [[session_label]] + [[encode_cell(cell)] for cell in records]
        backend.update(a1(sheet_name, f"{column}1:{column}{len(values)}"), values)
    logger.info("saved session %r to %s!%s (%d exercises)", session_label, sheet_name, column, len(records))
    return column


def _summarize(values: List[float]) -> Tuple[float, float, int]:
    if not values:
        return 0, 0, 0
    avg = int(round_half_up(sum(values) / len(values)))
    return max(values), min(values), avg


def exercise_stat(name: str, cells: Sequence[Any]) -> ExerciseStat:
    records: List[SetRecord] = []
    for cell in cells:
        record = decode_set_record(cell)
        if record is None or record.is_empty:
            continue
        records.append(record)

    max_w, min_w, avg_w = _summarize([r.weight for r in records])
    max_s, min_s, avg_s = _summarize([r.sets for r in records])
    max_r, min_r, avg_r = _summarize([r.reps for r in records])
    return ExerciseStat(
        exercise=name,
        max_weight=max_w,
        min_weight=min_w,
        avg_weight=avg_w,
        max_sets=max_s,
        min_sets=min_s,
        avg_sets=avg_s,
        max_reps=max_r,
        min_reps=min_r,
        avg_reps=avg_r,
        total_sessions=len(records),
    )


def get_workout_exercise_stats(sheet_name: str, sheets: SheetsBackend | None = None) -> List[ExerciseStat]:
    backend = sheets or get_sheets()
    exercises = _exercise_rows(sheet_name, backend)
    matrix = backend.get(a1(sheet_name, f"B1:{LAST_SESSION_COLUMN}{MAX_EXERCISE_ROW}"))

    stats: List[ExerciseStat] = []
    for name, row_number in exercises:
        idx = row_number - 1
        cells = matrix[idx] if idx < len(matrix) else []
        stats.append(exercise_stat(name, cells))
    return stats
