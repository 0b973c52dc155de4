# -*- coding: utf-8 -*-
"""Workout — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response

from ..errors import backend_failure, error_detail
from .models import (
    ExerciseStatsResponse,
    SaveSessionRequest,
    SaveSessionResponse,
    SheetNamesResponse,
    WorkoutDefinitionResponse,
    WorkoutSheetsResponse,
)
from .storage import (
    get_workout_definition,
    get_workout_exercise_stats,
    list_workout_sheet_names,
    save_workout_session,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/workout", tags=["Workout"])
history_router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("/sheets", response_model=SheetNamesResponse, summary="All sheet names")
def sheet_names():
    try:
        names = list_workout_sheet_names()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch sheet names", exc) from exc
    return SheetNamesResponse(sheet_names=names)


@router.get("/workouts", response_model=WorkoutDefinitionResponse, summary="Exercises and sessions of a workout sheet")
def workouts(sheet_name: str | None = Query(default=None, alias="sheetName")):
    if not sheet_name:
        raise HTTPException(status_code=400, detail="Sheet name is required")
    try:
        data = get_workout_definition(sheet_name)
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch workouts", exc) from exc
    return WorkoutDefinitionResponse(workouts=data["exercise_names"], session_data=data["session_matrix"])


@router.post("/session", response_model=SaveSessionResponse, summary="Create or update a session column")
def save_session(request: SaveSessionRequest):
    if not request.sheet_name or not request.session_name or request.workout_data is None:
        raise HTTPException(status_code=400, detail="Missing required fields")
    try:
        column = save_workout_session(
            request.sheet_name,
            request.session_name,
            request.workout_data,
            existing_column=request.existing_column,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=error_detail(str(exc))) from exc
    except Exception as exc:
        raise backend_failure(logger, "Failed to save session", exc) from exc
    return SaveSessionResponse(success=True, column=column)


@history_router.get(
    "/workouts",
    response_model=WorkoutSheetsResponse | ExerciseStatsResponse,
    summary="Workout sheets of a category, or per-exercise stats of one sheet",
)
def workout_history(
    response: Response,
    category: str | None = Query(default=None),
    sheet: str | None = Query(default=None),
):
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"

    if category and sheet:
        raise HTTPException(status_code=400, detail="Use either category or sheet, not both")
    if not category and not sheet:
        raise HTTPException(status_code=400, detail="Missing category or sheet parameter")
    try:
        if sheet:
            return ExerciseStatsResponse(exercise_stats=get_workout_exercise_stats(sheet))
        return WorkoutSheetsResponse(sheets=list_workout_sheet_names(category))
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch workout data", exc) from exc
