# -*- coding: utf-8 -*-
"""Diet — meal photo nutrition estimate via an OpenAI-compatible chat-completions API."""

from __future__ import annotations

import base64
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..sheets.records import sanitize_macro
from .image import prepare_image
from .models import Meal

logger = logging.getLogger(__name__)

DEFAULT_MEAL_NAME = "Logged meal"

SYSTEM_PROMPT = " ".join(
    [
        "You are an experienced nutrition coach.",
        "Given a photo of food encoded as base64, identify the most likely dish and estimate "
        "calories (kcal), protein (g), carbs (g), and fat (g).",
        'Respond with strict JSON matching the schema: {"name": string, "calories": number, '
        '"protein": number, "carbs": number, "fat": number}.',
        "If multiple foods are visible, pick the dominant portion and include everything visible (sauces, sides).",
        "If unsure, make the best reasonable estimate and still return numbers.",
    ]
)


class VisionError(RuntimeError):
    """Base class for meal photo analysis failures."""


class VisionNotConfigured(VisionError):
    pass


class VisionTransportError(VisionError):
    pass


class VisionProviderError(VisionError):
    def __init__(self, status_code: int, details: Any) -> None:
        super().__init__(f"Provider returned HTTP {status_code}: {details}")
        self.status_code = status_code
        self.details = details


class VisionEmptyResponse(VisionError):
    pass


class VisionInvalidJSON(VisionError):
    pass


@dataclass(frozen=True)
class VisionSettings:
    api_key: Optional[str]
    base_url: str
    model: str
    timeout: float
    temperature: float


def resolve_vision_settings() -> VisionSettings:
    return VisionSettings(
        api_key=settings.ai_api_key,
        base_url=settings.ai_base_url.rstrip("/"),
        model=settings.ai_model or settings.ai_default_model,
        timeout=settings.ai_timeout,
        temperature=settings.ai_temperature,
    )


def _completions_url(base_url: str) -> str:
    if base_url.endswith("/chat/completions"):
        return base_url
    return f"{base_url}/chat/completions"


def _data_url(mime: str, image_bytes: bytes) -> str:
    b64 = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{b64}"


def build_payload(cfg: VisionSettings, image_mime: str, image_bytes: bytes) -> Dict[str, Any]:
    user_content = [
        {"type": "text", "text": "Analyze the attached food photo and respond with JSON only."},
        {
            "type": "image_url",
            "image_url": {"url": _data_url(image_mime, image_bytes), "detail": "low"},
        },
        {"type": "text", "text": "Remember: JSON only, no explanations."},
    ]
    return {
        "model": cfg.model,
        "temperature": cfg.temperature,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_content},
        ],
        "response_format": {"type": "json_object"},
    }


def _provider_details(resp: httpx.Response, data: Any) -> Any:
    if isinstance(data, dict):
        return data.get("error") or data.get("message") or json.dumps(data)
    return resp.reason_phrase or "Unknown error"


def _strip_fences(text: str) -> str:
    cleaned = text.strip()
    cleaned = re.sub(r"^```(?:json)?\s*", "", cleaned, flags=re.IGNORECASE)
    cleaned = re.sub(r"\s*```$", "", cleaned)
    return cleaned


def _extract_content(data: Any) -> str:
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""


def normalize_meal(parsed: Dict[str, Any]) -> Meal:
    name = str(parsed.get("name") or "").strip() or DEFAULT_MEAL_NAME
    return Meal(
        name=name,
        calories=sanitize_macro(parsed.get("calories")),
        protein=sanitize_macro(parsed.get("protein")),
        carbs=sanitize_macro(parsed.get("carbs")),
        fat=sanitize_macro(parsed.get("fat")),
    )


def analyze_meal_image(
    *,
    image_bytes: bytes,
    image_mime: str,
    cfg: VisionSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Meal:
    cfg = cfg or resolve_vision_settings()
    if not cfg.api_key:
        raise VisionNotConfigured("AI service is not configured")

    prepared = prepare_image(image_bytes, image_mime, max_bytes=settings.max_prepared_image_bytes)
    if prepared.resized:
        logger.info("meal photo downscaled to %d bytes", len(prepared.data))

    payload = build_payload(cfg, prepared.mime, prepared.data)
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {cfg.api_key}",
    }
    try:
        with httpx.Client(timeout=cfg.timeout, transport=transport) as client:
            resp = client.post(_completions_url(cfg.base_url), headers=headers, json=payload)
    except httpx.HTTPError as exc:
        logger.error("meal photo request failed: %s", exc)
        raise VisionTransportError(str(exc)) from exc

    try:
        data = resp.json()
    except ValueError:
        data = None

    if resp.status_code >= 400:
        details = _provider_details(resp, data)
        logger.error("meal photo provider error %s: %s", resp.status_code, details)
        raise VisionProviderError(resp.status_code, details)

    content = _extract_content(data)
    if not content.strip():
        raise VisionEmptyResponse("No response from AI service")

    try:
        parsed = json.loads(_strip_fences(content))
    except ValueError as exc:
        logger.warning("meal photo output parse failed: %s", exc)
        raise VisionInvalidJSON(str(exc)) from exc
    if not isinstance(parsed, dict):
        raise VisionInvalidJSON("Expected a JSON object")

    return normalize_meal(parsed)
