# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from ..schemas import CamelModel


class Profile(CamelModel):
    name: str = ""
    dob: str = Field("", description="DD/MM/YYYY")
    goal_weight: str = ""
    height: str = Field("", description="cm")
    age: Optional[int] = None
    current_tdee: Optional[float] = None


class WeightEntry(CamelModel):
    date: str
    weight: str = ""
    tdee: str = ""


class ProfileResponse(CamelModel):
    profile: Profile
    weight_history: List[WeightEntry]


class WeightEntryRequest(CamelModel):
    date: Optional[str] = None
    weight: Optional[Union[float, str]] = None
    tdee: Optional[Union[float, str]] = None


class WeightSavedResponse(CamelModel):
    success: bool = True
    row: Optional[int] = None
