# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""HTTP schemas and envelopes."""

from __future__ import annotations

from .base import BaseHTTPSchema
from .envelopes import ErrorEnvelope, ErrorObject, SuccessEnvelope

__all__ = ["BaseHTTPSchema", "ErrorEnvelope", "ErrorObject", "SuccessEnvelope"]
