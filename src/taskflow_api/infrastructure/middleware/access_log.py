# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Access Log Middleware.

One INFO record named ``access_log`` per request, with ``evt``, ``method``,
``path``, ``status`` (500 when the downstream app raised), ``elapsed_ms`` and
``ok`` passed as ``extra`` so the JSON formatter emits them as keys.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from taskflow_api.infrastructure.logging.logger import get_json_logger

_logger: logging.Logger = get_json_logger(__name__)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Structured access logging middleware."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        t0 = time.perf_counter()
        response: Response | None = None
        ok = False
        try:
            response = await call_next(request)
            ok = True
            return response
        finally:
            log: dict[str, Any] = {
                "evt": "access",
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code if response is not None else 500,
                "elapsed_ms": round((time.perf_counter() - t0) * 1000.0, 2),
                "ok": ok,
            }
            _logger.info("access_log", extra=log)
