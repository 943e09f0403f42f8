# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Presenter utilities and canonical envelope helpers.

Purpose:
    Thin, framework-aware helpers used by routers to consistently shape HTTP
    responses and headers.

Responsibilities:
    * Build SuccessEnvelope instances.
    * Compute strong, quoted ETags from canonical JSON material.
    * Attach standard headers such as X-Request-ID.

Layer:
    adapters/presenters
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from taskflow_api.adapters.schemas.http.envelopes import SuccessEnvelope


def _json_default(value: Any) -> str:
    """Serialize non-JSON-native types deterministically for hashing."""
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    raise TypeError(f"unsupported type for JSON hashing: {type(value)!r}")


def compute_quoted_etag(payload: Mapping[str, Any]) -> str:
    """Return a quoted strong ETag (SHA-256 of canonical JSON for ``payload``)."""
    material = json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        default=_json_default,
    ).encode("utf-8")
    return f'"{hashlib.sha256(material).hexdigest()}"'


@dataclass(slots=True)
class PresentResult[T]:
    """Presentation result envelope.

    Attributes:
        body: A Pydantic envelope instance.
        headers: Extra HTTP headers to apply.
    """

    body: T
    headers: Mapping[str, str]


class BasePresenter:
    """Base presenter for HTTP response shaping.

    Business decisions stay in the use cases; presenters only assemble
    envelopes and headers.
    """

    def present_success(
        self,
        *,
        data: Any,
        request_id: str | None = None,
    ) -> PresentResult[SuccessEnvelope[Any]]:
        """Build a SuccessEnvelope and attach ``X-Request-ID`` and a strong ``ETag``."""
        body = SuccessEnvelope[Any](data=data)

        headers: dict[str, str] = {}
        if request_id:
            headers["X-Request-ID"] = request_id
        headers["ETag"] = compute_quoted_etag(body.model_dump(mode="python"))
        return PresentResult(body=body, headers=headers)
