# -*- coding: utf-8 -*-
"""Diet — Pydantic models."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from ..schemas import CamelModel

Number = Optional[Union[float, str]]


class Meal(CamelModel):
    name: str
    calories: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fat: float = Field(0.0, ge=0)


class TodaysMealsResponse(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD")
    meals: List[Meal] = []


class AddMealRequest(CamelModel):
    name: Optional[str] = None
    calories: Number = None
    protein: Number = None
    carbs: Number = None
    fat: Number = None


class AddMealResponse(CamelModel):
    success: bool = True


class DeficitResponse(CamelModel):
    total_calories: float
    deficit: float
    tdee: float


class DeficitEntry(CamelModel):
    date: str
    total_calories: float
    deficit: float


class DeficitStats(CamelModel):
    average: float
    max: float
    min: float


class DeficitHistoryResponse(CamelModel):
    history: List[DeficitEntry] = []
    stats: Optional[DeficitStats] = None


class AnalyzeImageRequest(CamelModel):
    image_base64: Optional[str] = Field(None, description="Base64 image, optionally a data URL")
    mime_type: Optional[str] = Field(None, description="e.g. image/jpeg")


class AnalyzeImageResponse(CamelModel):
    success: bool = True
    meal: Meal
