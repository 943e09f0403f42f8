# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Config package export."""

from __future__ import annotations

from .settings import Environment, Settings, get_settings

__all__ = ["Environment", "Settings", "get_settings"]
