# -*- coding: utf-8 -*-
"""Spreadsheet access layer: Google Sheets v4 behind a small interface."""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..config import settings
from .a1 import first_row_of

logger = logging.getLogger(__name__)

Values = List[List[Any]]


class SheetsError(RuntimeError):
    """Any failure talking to the sheet store (auth, unknown sheet, quota...)."""


class SheetsBackend:
    """get / update / append on A1 ranges, plus listing the tables."""

    def sheet_titles(self) -> List[str]:
        raise NotImplementedError

    def get(self, range_name: str) -> Values:
        raise NotImplementedError

    def update(self, range_name: str, values: Values) -> None:
        raise NotImplementedError

    def append(self, range_name: str, values: Values) -> Optional[int]:
        """Append after the last populated row; return the first row written (1-based)."""
        raise NotImplementedError


class GoogleSheetsBackend(SheetsBackend):
    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(self, spreadsheet_id: str, credentials: Credentials) -> None:
        self.spreadsheet_id = spreadsheet_id
        self.service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        self.sheet = self.service.spreadsheets()

    @classmethod
    def from_settings(cls) -> "GoogleSheetsBackend":
        if not settings.google_sheet_id:
            raise SheetsError("GOOGLE_SHEET_ID not set")
        try:
            if settings.google_service_account_json:
                credentials = Credentials.from_service_account_file(
                    str(settings.google_service_account_json), scopes=cls.SCOPES
                )
            else:
                if not settings.google_service_account_email or not settings.google_private_key:
                    raise SheetsError(
                        "GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY must be set"
                    )
                credentials = Credentials.from_service_account_info(
                    {
                        "client_email": settings.google_service_account_email,
                        "private_key": settings.google_private_key,
                        "token_uri": "https://oauth2.googleapis.com/token",
                    },
                    scopes=cls.SCOPES,
                )
        except (GoogleAuthError, ValueError, OSError) as exc:
            raise SheetsError(f"Invalid Google credentials: {exc}") from exc
        return cls(settings.google_sheet_id, credentials)

    def _execute(self, request: Any, action: str) -> dict:
        try:
            return request.execute()
        except HttpError as exc:
            logger.error("sheets %s failed: %s", action, exc)
            raise SheetsError(f"Sheets {action} failed: {exc}") from exc
        except (GoogleAuthError, OSError) as exc:
            logger.error("sheets %s failed: %s", action, exc)
            raise SheetsError(f"Sheets {action} failed: {exc}") from exc

    def sheet_titles(self) -> List[str]:
        result = self._execute(
            self.sheet.get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties.title"),
            "list",
        )
        return [s["properties"]["title"] for s in result.get("sheets", [])]

    def get(self, range_name: str) -> Values:
        result = self._execute(
            self.sheet.values().get(spreadsheetId=self.spreadsheet_id, range=range_name),
            "get",
        )
        return result.get("values", [])

    def update(self, range_name: str, values: Values) -> None:
        # RAW keeps "12/10/2025" or "100/3/10" from being reinterpreted as dates.
        self._execute(
            self.sheet.values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": values},
            ),
            "update",
        )

    def append(self, range_name: str, values: Values) -> Optional[int]:
        result = self._execute(
            self.sheet.values().append(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                insertDataOption="INSERT_ROWS",
                body={"values": values},
            ),
            "append",
        )
        updated_range = (result.get("updates") or {}).get("updatedRange") or ""
        return first_row_of(updated_range)


_backend: Optional[SheetsBackend] = None
_backend_guard = threading.Lock()


def _create_backend() -> SheetsBackend:
    if settings.sheets_backend == "memory":
        from .memory import MemorySheets

        if settings.memory_seed:
            return MemorySheets.from_json_file(settings.memory_seed)
        return MemorySheets()
    if settings.sheets_backend == "google":
        return GoogleSheetsBackend.from_settings()
    raise SheetsError(f"Unknown sheets backend: {settings.sheets_backend}")


def get_sheets() -> SheetsBackend:
    global _backend
    with _backend_guard:
        if _backend is None:
            _backend = _create_backend()
        return _backend


def set_sheets(backend: Optional[SheetsBackend]) -> None:
    """Swap the process-wide backend (``None`` forces re-creation on next use)."""
    global _backend
    with _backend_guard:
        _backend = backend
