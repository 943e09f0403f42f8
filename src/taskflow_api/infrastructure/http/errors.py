# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""HTTP error translation.

Purpose:
    Build the canonical ``{"error": {...}}`` envelope and provide the
    exception handlers registered by ``create_app``. Domain errors map to
    their class-level ``code`` and ``http_status``.

Layer: infrastructure/http
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from starlette.responses import Response

from taskflow_api.domain.exceptions import DomainError
from taskflow_api.infrastructure.logging.logger import get_trace_id

logger = logging.getLogger(__name__)


def _trace_id(request: Request) -> str | None:
    state = getattr(request, "state", None)
    return (
        getattr(state, "trace_id", None)
        or getattr(state, "request_id", None)
        or get_trace_id()
    )


def error_envelope(
    *,
    code: str,
    http_status: int,
    message: str,
    details: dict[str, Any] | None = None,
    trace_id: str | None = None,
) -> dict[str, Any]:
    """Return the canonical error payload."""
    err: dict[str, Any] = {
        "code": code,
        "http_status": http_status,
        "message": message,
    }
    if details is not None:
        err["details"] = details
    if trace_id is not None:
        err["trace_id"] = trace_id
    return {"error": err}


async def handle_domain_error(request: Request, exc: DomainError) -> Response:
    """Translate a :class:`DomainError` using its ``code`` and ``http_status``."""
    logger.info(
        "http.domain_error",
        extra={"code": exc.code, "path": request.url.path, "http_status": exc.http_status},
    )
    payload = error_envelope(
        code=exc.code,
        http_status=exc.http_status,
        message=str(exc) or exc.code,
        details=jsonable_encoder(exc.details) if exc.details else None,
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=exc.http_status, content=payload)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    payload = error_envelope(
        code="VALIDATION_ERROR",
        http_status=422,
        message="Request validation failed",
        details={"errors": jsonable_encoder(exc.errors())},
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=422, content=payload)


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    payload = error_envelope(
        code="HTTP_ERROR",
        http_status=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
        details=None if isinstance(exc.detail, str) else {"detail": exc.detail},
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=exc.status_code, content=payload, headers=exc.headers)


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    logger.exception("http.unhandled_exception", extra={"path": request.url.path})
    payload = error_envelope(
        code="INTERNAL_ERROR",
        http_status=500,
        message="Internal server error",
        details=None,
        trace_id=_trace_id(request),
    )
    return JSONResponse(status_code=500, content=payload)
