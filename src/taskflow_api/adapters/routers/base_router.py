# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Base Router (Adapters Layer)

Purpose:
    Provide a canonical APIRouter wrapper and shared utilities for TaskFlow
    HTTP endpoints:
      - Versioned routing with stable prefixes (e.g., "/v1/profiles").
      - Standard error response mapping using ErrorEnvelope.
      - Helper to emit presenter results with headers (ETag, X-Request-ID).

Layer:
    adapters/routers
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from fastapi import APIRouter, Response

from taskflow_api.adapters.presenters.base_presenter import PresentResult
from taskflow_api.adapters.schemas.http.envelopes import ErrorEnvelope
from taskflow_api.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)

TagType = str | Enum


class BaseRouter(APIRouter):
    """Canonical router wrapper for TaskFlow HTTP endpoints.

    Args:
        version: API version segment (e.g., "v1").
        resource: Plural resource segment (e.g., "profiles").
        prefix: Optional explicit prefix (overrides version/resource).
        tags: Default tags applied to all routes mounted on this router.
        dependencies: Optional global dependencies for all routes.
        **kwargs: Additional APIRouter kwargs.
    """

    def __init__(
        self,
        *,
        version: str,
        resource: str,
        prefix: str | None = None,
        tags: Sequence[TagType] | None = None,
        dependencies: Sequence[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        computed_prefix = prefix or f"/{version}/{resource}"
        super().__init__(
            prefix=computed_prefix,
            tags=list(tags) if tags is not None else None,
            dependencies=list(dependencies) if dependencies is not None else None,
            **kwargs,
        )
        _LOGGER.debug(
            "router_initialized",
            extra={"prefix": computed_prefix, "tags": [str(t) for t in tags or []]},
        )

    @staticmethod
    def send_success(response: Response, result: PresentResult[Any]) -> Any:
        """Apply presenter headers to the Response and return the body."""
        response.headers.update(dict(result.headers))
        return result.body

    @staticmethod
    def std_error_responses() -> dict[int | str, dict[str, Any]]:
        """Return the canonical error response mapping for endpoints.

        Use in routes via ``responses=BaseRouter.std_error_responses()``.
        """
        return {
            404: {"model": ErrorEnvelope, "description": "Not found."},
            422: {"model": ErrorEnvelope, "description": "Unprocessable content."},
            500: {"model": ErrorEnvelope, "description": "Internal server error."},
        }
