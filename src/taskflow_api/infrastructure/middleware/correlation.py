# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Correlation middleware.

Each request gets a request id and a trace id. Both are stored on
``request.state``, pushed into the logging contextvars and echoed on the
response, where error envelopes and access logs pick them up.

Headers:
    X-Request-ID  Reused when the caller's value is safe, else a new UUID4.
    x-trace-id    Reused when the caller's value is safe, else the request id.

A value is safe when, after trimming, it is 1 to 128 characters drawn from
letters, digits and ``-_.:@``.
"""

from __future__ import annotations

import re
import uuid
from typing import Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from taskflow_api.infrastructure.logging.logger import set_request_context

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
TRACE_HEADER: Final[str] = "x-trace-id"

_SAFE_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9\-_.:@]{1,128}$")


def _inbound(request: Request, header: str) -> str | None:
    value = (request.headers.get(header) or "").strip()
    return value if _SAFE_RE.match(value) else None


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Assign, propagate and echo the request and trace ids."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _inbound(request, REQUEST_ID_HEADER) or str(uuid.uuid4())
        trace_id = _inbound(request, TRACE_HEADER) or request_id

        request.state.request_id = request_id
        request.state.trace_id = trace_id
        set_request_context(request_id=request_id, trace_id=trace_id)

        response = await call_next(request)
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        response.headers.setdefault(TRACE_HEADER, trace_id)
        return response


__all__ = ["REQUEST_ID_HEADER", "TRACE_HEADER", "CorrelationMiddleware"]
