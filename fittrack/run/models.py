# -*- coding: utf-8 -*-
"""Run — Pydantic models."""

from __future__ import annotations

from typing import List, Optional, Union

from ..schemas import CamelModel

RunField = Optional[Union[str, float]]


class RunSessionRequest(CamelModel):
    session: Optional[str] = None
    distance: RunField = None
    duration: RunField = None
    pace: RunField = None
    cadence: RunField = None


class RunSessionsResponse(CamelModel):
    headers: List[str]
    sessions: List[List[str]]


class RunSavedResponse(CamelModel):
    success: bool = True
    row: Optional[int] = None


class RunStatsResponse(CamelModel):
    total_distance: str
    total_runs: int
    avg_pace: str
    avg_cadence: Union[int, str]
