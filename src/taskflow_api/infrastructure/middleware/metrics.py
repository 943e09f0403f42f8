# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Prometheus request metrics middleware.

Summary:
    Counts requests and records their duration per (method, handler, status).
    Collectors are created on first use and reused afterwards, so building the
    app more than once in a process never registers a metric twice.

Labels:
    method:  Uppercased HTTP method.
    handler: Templated route path (``/v1/profiles/{user_id}/time-config``),
             or ``unmatched`` when no route handled the request.
    status:  Response status code; 500 when the downstream app raised.

Layer:
    infrastructure/middleware
"""

from __future__ import annotations

import logging
import time
from typing import Any

from prometheus_client import REGISTRY, Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from taskflow_api.infrastructure.logging.logger import get_json_logger

__all__ = [
    "PromMetricsMiddleware",
    "get_http_request_duration_seconds",
    "get_http_requests_counter",
]

logger: logging.Logger = get_json_logger(__name__)

UNMATCHED_HANDLER = "unmatched"
_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
_LABELS = ("method", "handler", "status")

_http_requests: Counter | None = None
_http_duration: Histogram | None = None


def get_http_requests_counter() -> Counter:
    """Return the process-wide request counter, creating it on first call."""
    global _http_requests
    if _http_requests is None:
        _http_requests = Counter(
            "taskflow_http_requests",
            "HTTP requests by method, route and status.",
            labelnames=_LABELS,
            registry=REGISTRY,
        )
    return _http_requests


def get_http_request_duration_seconds() -> Histogram:
    """Return the process-wide request duration histogram, creating it on first call."""
    global _http_duration
    if _http_duration is None:
        _http_duration = Histogram(
            "taskflow_http_request_duration_seconds",
            "HTTP request duration in seconds by method, route and status.",
            labelnames=_LABELS,
            buckets=_BUCKETS,
            registry=REGISTRY,
        )
    return _http_duration


def _handler_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or UNMATCHED_HANDLER


class PromMetricsMiddleware(BaseHTTPMiddleware):
    """Record a count and a duration sample for every request.

    Recording failures are logged at DEBUG and never reach the client.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._requests = get_http_requests_counter()
        self._duration = get_http_request_duration_seconds()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed = time.perf_counter() - start
            labels = (request.method.upper(), _handler_label(request), str(status_code))
            try:
                self._requests.labels(*labels).inc()
                self._duration.labels(*labels).observe(elapsed)
            except Exception:
                logger.debug("metrics_record_failed", exc_info=True)
