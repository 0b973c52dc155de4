from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


class Settings:
    """Centralized configuration for the tracker backend."""

    def __init__(self) -> None:
        # ---- Spreadsheet store ----
        self.sheets_backend: str = (
            os.environ.get("FITTRACK_SHEETS_BACKEND") or "google"
        ).strip().lower()
        self.google_sheet_id: Optional[str] = os.environ.get("GOOGLE_SHEET_ID")
        self.google_service_account_email: Optional[str] = os.environ.get(
            "GOOGLE_SERVICE_ACCOUNT_EMAIL"
        )
        # Keys pasted into env files usually carry literal "\n" sequences.
        private_key = os.environ.get("GOOGLE_PRIVATE_KEY")
        self.google_private_key: Optional[str] = (
            private_key.replace("\\n", "\n") if private_key else None
        )
        service_account_json = os.environ.get("GOOGLE_SERVICE_ACCOUNT_JSON")
        self.google_service_account_json: Optional[Path] = (
            Path(service_account_json).expanduser() if service_account_json else None
        )
        memory_seed = os.environ.get("FITTRACK_MEMORY_SEED")
        self.memory_seed: Optional[Path] = (
            Path(memory_seed).expanduser() if memory_seed else None
        )

        # ---- Sheet layout ----
        self.run_sheet: str = os.environ.get("FITTRACK_SHEET_RUN") or "Run"
        self.profile_sheet: str = os.environ.get("FITTRACK_SHEET_PROFILE") or "Profile"
        self.food_sheet: str = os.environ.get("FITTRACK_SHEET_FOOD") or "Food"
        self.deficit_sheet: str = os.environ.get("FITTRACK_SHEET_DEFICIT") or "Deficit"
        self.workout_categories: List[str] = _split_csv(
            os.environ.get("FITTRACK_WORKOUT_CATEGORIES") or "push,pull,leg"
        )
        self.timezone: Optional[str] = os.environ.get("FITTRACK_TIMEZONE") or None
        self.default_tdee: float = float(os.environ.get("FITTRACK_DEFAULT_TDEE") or "2000")

        # ---- Meal photo analyzer ----
        self.ai_api_key: Optional[str] = os.environ.get("CONFIDENTIAL_AI_API_KEY") or None
        self.ai_base_url: str = os.environ.get(
            "CONFIDENTIAL_AI_BASE_URL", "https://api.redpill.ai/v1"
        )
        self.ai_model: Optional[str] = os.environ.get("CONFIDENTIAL_AI_MODEL") or None
        self.ai_default_model: str = "openai/gpt-4.1-nano"
        self.ai_timeout: float = float(os.environ.get("CONFIDENTIAL_AI_TIMEOUT") or "60")
        self.ai_temperature: float = 0.15
        self.max_image_body_bytes: int = int(
            os.environ.get("FITTRACK_MAX_IMAGE_BODY_BYTES") or str(8 * 1024 * 1024)
        )
        self.max_prepared_image_bytes: int = int(
            os.environ.get("FITTRACK_MAX_PREPARED_IMAGE_BYTES") or str(4 * 1024 * 1024)
        )

        self.log_level: str = (os.environ.get("FITTRACK_LOG_LEVEL") or "INFO").upper()

        cors = os.environ.get("FITTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = _split_csv(cors)


settings = Settings()
