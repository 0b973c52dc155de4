# -*- coding: utf-8 -*-
"""Run — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..errors import backend_failure
from .models import RunSavedResponse, RunSessionRequest, RunSessionsResponse, RunStatsResponse
from .storage import get_run_sessions, get_run_stats, save_run_session

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/run", tags=["Run"])
history_router = APIRouter(prefix="/api/history", tags=["History"])


@router.get("", response_model=RunSessionsResponse, summary="All run sessions")
def list_runs():
    try:
        data = get_run_sessions()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch run sessions", exc) from exc
    return RunSessionsResponse(**data)


@router.post("", response_model=RunSavedResponse, summary="Append a run session")
def create_run(request: RunSessionRequest):
    if not request.session:
        raise HTTPException(status_code=400, detail="Session name is required")
    try:
        row = save_run_session(request.model_dump())
    except Exception as exc:
        raise backend_failure(logger, "Failed to save run session", exc) from exc
    return RunSavedResponse(success=True, row=row)


@history_router.get("/runs", response_model=RunStatsResponse, summary="Totals and averages over all runs")
def run_stats():
    try:
        return get_run_stats()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch run stats", exc) from exc
