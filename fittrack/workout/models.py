# -*- coding: utf-8 -*-
"""Workout — Pydantic models."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from ..schemas import CamelModel


class SetInput(CamelModel):
    weight: Optional[Union[float, str]] = None
    sets: Optional[Union[float, str]] = None
    reps: Optional[Union[float, str]] = None


# Accepted per-exercise shapes: "100/3/10", ["100/3/10"] (legacy client), or a SetInput.
WorkoutCell = Union[SetInput, List[Optional[str]], str, None]


class SheetNamesResponse(CamelModel):
    sheet_names: List[str]


class WorkoutDefinitionResponse(CamelModel):
    workouts: List[str] = Field(..., description="Exercise names, column A")
    session_data: List[List[str]] = Field(..., description="Raw B1:ZZ100 matrix, row 1 = session labels")


class SaveSessionRequest(CamelModel):
    sheet_name: Optional[str] = None
    session_name: Optional[str] = None
    workout_data: Optional[List[WorkoutCell]] = None
    existing_column: Optional[str] = Field(None, description="Column letters returned by a previous save")


class SaveSessionResponse(CamelModel):
    success: bool = True
    column: str


class ExerciseStat(CamelModel):
    exercise: str
    max_weight: float = 0
    min_weight: float = 0
    avg_weight: int = 0
    max_sets: float = 0
    min_sets: float = 0
    avg_sets: int = 0
    max_reps: float = 0
    min_reps: float = 0
    avg_reps: int = 0
    total_sessions: int = 0


class WorkoutSheetsResponse(CamelModel):
    sheets: List[str]


class ExerciseStatsResponse(CamelModel):
    exercise_stats: List[ExerciseStat]
