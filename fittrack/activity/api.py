# -*- coding: utf-8 -*-
"""Calendar — API endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ..errors import backend_failure
from .models import CalendarActivitiesResponse
from .storage import get_calendar_activities

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/calendar", tags=["Calendar"])


@router.get("/activities", response_model=CalendarActivitiesResponse, summary="Days with a workout or a run")
def activities():
    try:
        return get_calendar_activities()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch activities", exc) from exc
