# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Purpose:
    Compose the top-level ``router`` that includes all feature routers.

Responsibilities:
    * Mount health endpoints under ``/health``.
    * Expose the Prometheus scrape endpoint at ``/metrics``.
    * Mount profile calendar endpoints under ``/v1/profiles/...``.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from taskflow_api.adapters.routers.health_router import router as health_router
from taskflow_api.adapters.routers.metrics_router import router as metrics_router
from taskflow_api.adapters.routers.time_config_router import router as time_config_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["Health"])
router.include_router(metrics_router)

# BaseRouter already includes the /v1/profiles prefix.
router.include_router(time_config_router)
