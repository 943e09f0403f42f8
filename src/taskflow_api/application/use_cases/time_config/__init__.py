# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Profile time configuration use cases."""

from __future__ import annotations

from .get_time_config import GetTimeConfig
from .get_time_info import GetTimeInfo
from .update_time_config import UpdateTimeConfig

__all__ = ["GetTimeConfig", "GetTimeInfo", "UpdateTimeConfig"]
