# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""System clock adapter for :class:`~taskflow_api.application.interfaces.clock.ClockPort`."""

from __future__ import annotations

from datetime import UTC, date, datetime


class SystemClock:
    """Reads the wall clock; "today" is the current UTC calendar date."""

    def today(self) -> date:
        return datetime.now(tz=UTC).date()
