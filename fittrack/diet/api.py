# -*- coding: utf-8 -*-
"""Diet — API endpoints."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from ..config import settings
from ..errors import backend_failure, error_detail
from .image import ImageTooLarge
from .models import (
    AddMealRequest,
    AddMealResponse,
    AnalyzeImageRequest,
    AnalyzeImageResponse,
    DeficitHistoryResponse,
    DeficitResponse,
    TodaysMealsResponse,
)
from .storage import add_meal, get_deficit_history, get_todays_meals, summarize_deficits, update_deficit
from .vision import (
    VisionEmptyResponse,
    VisionInvalidJSON,
    VisionNotConfigured,
    VisionProviderError,
    VisionTransportError,
    analyze_meal_image,
    resolve_vision_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/diet", tags=["Diet"])

MANUAL_ENTRY_HINT = "Could not analyze photo, enter the meal manually."


@router.get("/food", response_model=TodaysMealsResponse, summary="Meals logged today")
def todays_meals():
    try:
        return get_todays_meals()
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch meals", exc) from exc


@router.post("/food", response_model=AddMealResponse, summary="Log a meal for today")
def create_meal(request: AddMealRequest):
    if not request.name or request.calories is None:
        raise HTTPException(status_code=400, detail="Missing required fields: name and calories")
    try:
        add_meal(request.model_dump())
    except Exception as exc:
        raise backend_failure(logger, "Failed to add meal", exc) from exc
    return AddMealResponse(success=True)


@router.get("/deficit", response_model=DeficitResponse, summary="Recompute today's calorie deficit")
def deficit():
    try:
        return update_deficit()
    except Exception as exc:
        raise backend_failure(logger, "Failed to get deficit data", exc) from exc


@router.get("/deficit-history", response_model=DeficitHistoryResponse, summary="Daily deficits, oldest first")
def deficit_history(limit: int = Query(default=30)):
    try:
        update_deficit()
        history = get_deficit_history(limit)
    except Exception as exc:
        raise backend_failure(logger, "Failed to fetch deficit history", exc) from exc
    return DeficitHistoryResponse(history=history, stats=summarize_deficits(history))


def _decode_image_or_400(image_base64: str) -> bytes:
    raw = image_base64.strip()
    if raw.startswith("data:") and "," in raw:
        raw = raw.split(",", 1)[1]
    if len(raw) > settings.max_image_body_bytes:
        raise HTTPException(
            status_code=413,
            detail=error_detail("Image too large", f"{len(raw)} bytes > {settings.max_image_body_bytes}"),
        )
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(status_code=400, detail=error_detail("Invalid base64 image", str(exc))) from exc


def _analyzer_failure(status_code: int, error: str, reason: Any = None) -> HTTPException:
    """Every analyzer failure tells the client to fall back to manual entry."""
    details: dict = {"hint": MANUAL_ENTRY_HINT}
    if reason is not None:
        details["reason"] = reason
    return HTTPException(status_code=status_code, detail=error_detail(error, details))


@router.post("/analyze-image", response_model=AnalyzeImageResponse, summary="Estimate nutrition from a meal photo")
def analyze_image(request: AnalyzeImageRequest):
    cfg = resolve_vision_settings()
    if not cfg.api_key:
        raise _analyzer_failure(500, "AI service is not configured")
    if not request.image_base64:
        raise HTTPException(status_code=400, detail="Missing image data")
    image_bytes = _decode_image_or_400(request.image_base64)

    try:
        meal = analyze_meal_image(
            image_bytes=image_bytes,
            image_mime=request.mime_type or "image/jpeg",
            cfg=cfg,
        )
    except ImageTooLarge as exc:
        raise _analyzer_failure(413, "Image too large", str(exc)) from exc
    except VisionNotConfigured as exc:
        raise _analyzer_failure(500, "AI service is not configured") from exc
    except VisionProviderError as exc:
        raise _analyzer_failure(exc.status_code, "AI request failed", exc.details) from exc
    except VisionTransportError as exc:
        raise _analyzer_failure(502, "AI service unreachable", str(exc)) from exc
    except VisionEmptyResponse as exc:
        raise _analyzer_failure(500, "No response from AI service") from exc
    except VisionInvalidJSON as exc:
        raise _analyzer_failure(500, "AI response was not valid JSON", str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to analyze food image: %s", exc)
        raise _analyzer_failure(500, "Failed to analyze food image", str(exc)) from exc
    return AnalyzeImageResponse(success=True, meal=meal)
