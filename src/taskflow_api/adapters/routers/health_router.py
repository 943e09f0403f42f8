# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Health endpoints (Adapters Layer).

Purpose:
    Expose a liveness signal for container orchestrators and load balancers.
"""

from __future__ import annotations

import typing as t

from fastapi import APIRouter, status

from taskflow_api.adapters.schemas.http.base import BaseHTTPSchema

router = APIRouter()


class LivenessResponse(BaseHTTPSchema):
    """Liveness response indicating the process is running."""

    status: t.Literal["ok"] = "ok"


@router.get(
    "/liveness",
    summary="Liveness",
    operation_id="health_liveness",
    response_model=LivenessResponse,
    status_code=status.HTTP_200_OK,
)
async def liveness() -> LivenessResponse:
    """Return a fast liveness signal (no external I/O)."""
    return LivenessResponse()
