# -*- coding: utf-8 -*-
"""
FitTrack API

Workout, run, profile and diet logging backed by a single spreadsheet, plus
meal-photo nutrition estimates.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .activity.api import router as calendar_router
from .config import settings
from .diet.api import router as diet_router
from .errors import http_exception_handler, validation_exception_handler
from .profile.api import router as profile_router
from .run.api import history_router as run_history_router
from .run.api import router as run_router
from .workout.api import history_router as workout_history_router
from .workout.api import router as workout_router

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="FitTrack",
    description="Workout, run and diet tracking on top of a spreadsheet",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(workout_router)
app.include_router(workout_history_router)
app.include_router(run_router)
app.include_router(run_history_router)
app.include_router(profile_router)
app.include_router(diet_router)
app.include_router(calendar_router)


@app.get("/api/health")
def health() -> dict:
    return {"ok": True}


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    host = os.environ.get("FITTRACK_HOST") or os.environ.get("HOST") or "127.0.0.1"
    port_raw = os.environ.get("FITTRACK_PORT") or os.environ.get("PORT") or "8000"
    try:
        port = int(port_raw)
    except ValueError:
        port = 8000

    uvicorn.run("fittrack.api:app", host=host, port=port, reload=False)
