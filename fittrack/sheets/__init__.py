# -*- coding: utf-8 -*-
"""Spreadsheet access layer and cell record codecs."""

from .client import SheetsBackend, SheetsError, get_sheets, set_sheets
from .memory import MemorySheets

__all__ = ["SheetsBackend", "SheetsError", "MemorySheets", "get_sheets", "set_sheets"]
