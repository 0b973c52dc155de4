# -*- coding: utf-8 -*-
"""A1-notation helpers shared by the sheet backends and the domain storage."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

_COLUMN_RE = re.compile(r"^[A-Za-z]+$")
_CELL_RE = re.compile(r"^([A-Za-z]*)(\d*)$")


def column_letters(index: int) -> str:
    """0 -> 'A', 25 -> 'Z', 26 -> 'AA'."""
    if index < 0:
        raise ValueError(f"Column index must be >= 0, got {index}")
    letters = ""
    n = index + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def column_index(letters: str) -> int:
    """'A' -> 0, 'AA' -> 26."""
    if not is_column(letters):
        raise ValueError(f"Not a column reference: {letters!r}")
    n = 0
    for ch in letters.upper():
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n - 1


def is_column(value: object) -> bool:
    return isinstance(value, str) and bool(_COLUMN_RE.match(value))


def quote_sheet(name: str) -> str:
    escaped = name.replace("'", "''")
    return f"'{escaped}'"


def a1(sheet: str, cells: str) -> str:
    return f"{quote_sheet(sheet)}!{cells}"


@dataclass(frozen=True)
class GridRange:
    """Zero-based, inclusive bounds; ``None`` means open-ended."""

    sheet: str
    start_col: int
    start_row: int
    end_col: Optional[int]
    end_row: Optional[int]


def _split_sheet(range_name: str) -> tuple[str, str]:
    if range_name.startswith("'"):
        i = 1
        out = []
        while i < len(range_name):
            ch = range_name[i]
            if ch == "'":
                if i + 1 < len(range_name) and range_name[i + 1] == "'":
                    out.append("'")
                    i += 2
                    continue
                break
            out.append(ch)
            i += 1
        rest = range_name[i + 1 :]
        if not rest.startswith("!"):
            return "".join(out), ""
        return "".join(out), rest[1:]
    if "!" in range_name:
        sheet, cells = range_name.split("!", 1)
        return sheet, cells
    return range_name, ""


def _parse_cell(ref: str) -> tuple[Optional[int], Optional[int]]:
    m = _CELL_RE.match(ref.strip())
    if not m:
        raise ValueError(f"Invalid cell reference: {ref!r}")
    letters, digits = m.groups()
    col = column_index(letters) if letters else None
    row = int(digits) - 1 if digits else None
    return col, row


def parse_range(range_name: str) -> GridRange:
    sheet, cells = _split_sheet(range_name)
    if not cells:
        return GridRange(sheet, 0, 0, None, None)
    if ":" in cells:
        start_ref, end_ref = cells.split(":", 1)
    else:
        start_ref, end_ref = cells, cells
    start_col, start_row = _parse_cell(start_ref)
    end_col, end_row = _parse_cell(end_ref)
    if ":" not in cells:
        # Single cell like "B7" or a bare column/row.
        end_col = start_col
        end_row = start_row
    return GridRange(
        sheet=sheet,
        start_col=start_col or 0,
        start_row=start_row or 0,
        end_col=end_col,
        end_row=end_row,
    )


def first_row_of(updated_range: str) -> Optional[int]:
    """Extract the 1-based first row from e.g. ``'Run'!A12:E12``."""
    _, cells = _split_sheet(updated_range or "")
    m = re.match(r"^[A-Za-z]*(\d+)", cells)
    return int(m.group(1)) if m else None
