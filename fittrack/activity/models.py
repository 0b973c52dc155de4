# -*- coding: utf-8 -*-
"""Calendar — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import Field

from ..schemas import CamelModel


class CalendarActivitiesResponse(CamelModel):
    workout_dates: List[str] = Field(default_factory=list, description="YYYY-MM-DD")
    run_dates: List[str] = Field(default_factory=list, description="YYYY-MM-DD")
