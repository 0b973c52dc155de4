# -*- coding: utf-8 -*-
"""In-process sheet store with the same range semantics as Google Sheets.

Used by the test-suite and for local development without credentials
(``FITTRACK_SHEETS_BACKEND=memory``).
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from .a1 import GridRange, parse_range
from .client import SheetsBackend, SheetsError, Values
from .records import format_number


def _render(value: Any) -> str:
    # Mirrors the FORMATTED_VALUE render option: everything comes back as text.
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def _trim_row(row: List[str]) -> List[str]:
    end = len(row)
    while end and row[end - 1] == "":
        end -= 1
    return row[:end]


class MemorySheets(SheetsBackend):
    def __init__(self, sheets: Optional[Dict[str, Values]] = None) -> None:
        self._lock = threading.Lock()
        self._sheets: Dict[str, List[List[Any]]] = {}
        for name, rows in (sheets or {}).items():
            self.add_sheet(name, rows)

    @classmethod
    def from_json_file(cls, path: Path) -> "MemorySheets":
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SheetsError(f"Failed to load sheet seed {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise SheetsError(f"Sheet seed {path} must be an object of sheet name -> rows")
        return cls(raw)

    def add_sheet(self, name: str, rows: Optional[Values] = None) -> None:
        with self._lock:
            self._sheets[name] = [list(r) for r in (rows or [])]

    def rows(self, name: str) -> Values:
        """Rendered snapshot of a whole sheet (test helper)."""
        with self._lock:
            grid = self._grid(name)
            return [_trim_row([_render(v) for v in row]) for row in grid]

    def _grid(self, name: str) -> List[List[Any]]:
        grid = self._sheets.get(name)
        if grid is None:
            raise SheetsError(f"Unable to parse range: unknown sheet {name!r}")
        return grid

    def _resolve(self, range_name: str) -> tuple[List[List[Any]], GridRange]:
        try:
            rng = parse_range(range_name)
        except ValueError as exc:
            raise SheetsError(f"Unable to parse range: {range_name}") from exc
        return self._grid(rng.sheet), rng

    @staticmethod
    def _ensure(grid: List[List[Any]], row: int, col: int) -> None:
        while len(grid) <= row:
            grid.append([])
        cells = grid[row]
        while len(cells) <= col:
            cells.append("")

    def sheet_titles(self) -> List[str]:
        with self._lock:
            return list(self._sheets.keys())

    def get(self, range_name: str) -> Values:
        with self._lock:
            grid, rng = self._resolve(range_name)
            last_row = len(grid) - 1 if rng.end_row is None else min(rng.end_row, len(grid) - 1)
            out: Values = []
            for r in range(rng.start_row, last_row + 1):
                cells = grid[r]
                last_col = len(cells) - 1 if rng.end_col is None else min(rng.end_col, len(cells) - 1)
                out.append(_trim_row([_render(cells[c]) for c in range(rng.start_col, last_col + 1)]))
            while out and not out[-1]:
                out.pop()
            return out

    def update(self, range_name: str, values: Values) -> None:
        with self._lock:
            grid, rng = self._resolve(range_name)
            for dr, row in enumerate(values):
                for dc, value in enumerate(row):
                    r, c = rng.start_row + dr, rng.start_col + dc
                    self._ensure(grid, r, c)
                    grid[r][c] = value

    def append(self, range_name: str, values: Values) -> Optional[int]:
        with self._lock:
            grid, rng = self._resolve(range_name)
            last = rng.start_row - 1
            for r in range(rng.start_row, len(grid)):
                cells = grid[r]
                end_col = len(cells) - 1 if rng.end_col is None else min(rng.end_col, len(cells) - 1)
                if any(_render(cells[c]) != "" for c in range(rng.start_col, end_col + 1)):
                    last = r
            target = last + 1
            for dr, row in enumerate(values):
                for dc, value in enumerate(row):
                    r, c = target + dr, rng.start_col + dc
                    self._ensure(grid, r, c)
                    grid[r][c] = value
            return target + 1
