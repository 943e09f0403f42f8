# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Domain exceptions (re-exported for convenient import sites)."""

from __future__ import annotations

from .base import DomainError
from .time_config import InvalidConfiguration, InvalidDueDate, ProfileNotFound

__all__ = ["DomainError", "InvalidConfiguration", "InvalidDueDate", "ProfileNotFound"]
