# -*- coding: utf-8 -*-
"""HTTP error payloads: every failure leaves the API as ``{error, details?}``."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def error_detail(error: str, details: Optional[Any] = None) -> dict:
    detail: dict = {"error": error}
    if details is not None:
        detail["details"] = details
    return detail


def backend_failure(logger: logging.Logger, error: str, exc: Exception, status_code: int = 500) -> HTTPException:
    """Log an unexpected backend failure and build the HTTP error for it."""
    logger.exception("%s: %s", error, exc)
    return HTTPException(status_code=status_code, detail=error_detail(error, str(exc)))


def _content_for(detail: Any) -> dict:
    if isinstance(detail, dict) and "error" in detail:
        return detail
    return {"error": str(detail)}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        content: dict = {"error": "Method not allowed"}
    else:
        content = _content_for(exc.detail)
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content=error_detail("Invalid request body", details))
