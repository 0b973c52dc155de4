# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..errors import backend_failure
from ..sheets.records import parse_float
from .models import ProfileResponse, WeightEntryRequest, WeightSavedResponse
from .storage import estimate_tdee, get_profile_data, save_weight_entry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse, summary="Profile block and weight history")
def profile():
    try:
        return get_profile_data()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch profile data", exc) from exc


@router.post("", response_model=WeightSavedResponse, summary="Log a weight entry")
def log_weight(request: WeightEntryRequest):
    weight = parse_float(request.weight)
    if not request.date or not weight:
        raise HTTPException(status_code=400, detail="Date and weight are required")
    try:
        tdee = request.tdee
        if tdee is None or str(tdee).strip() == "":
            # Derive TDEE from the stored profile when the client did not send one.
            tdee = estimate_tdee(get_profile_data().profile, weight)
        row = save_weight_entry(request.date, weight, "" if tdee is None else tdee)
    except Exception as exc:
        raise backend_failure(logger, "Failed to save weight entry", exc) from exc
    return WeightSavedResponse(success=True, row=row)
