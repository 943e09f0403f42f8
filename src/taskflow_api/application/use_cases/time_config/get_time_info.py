# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Use Case: Get Time Info

Purpose:
    Build the page-header label "Saturday, October 17, 2026 • Sprint 3 •
    Quarter 2" for a user. Users without a profile only get the date.

Layer: application/use_cases
"""

from __future__ import annotations

from datetime import date

from taskflow_api.application.interfaces.clock import ClockPort
from taskflow_api.application.schemas.dto.time_config import TimeInfoDTO
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.application.use_cases._repositories import get_profile_repository
from taskflow_api.domain.entities.time_config import DEFAULT_SPRINT_LENGTH_DAYS
from taskflow_api.domain.services.time_windows import resolve_time_windows

LABEL_SEPARATOR = " • "


def format_long_date(day: date) -> str:
    """Return e.g. ``"Monday, January 20, 2025"``."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class GetTimeInfo:
    """Compose today's date with the user's current sprint and quarter."""

    def __init__(
        self,
        uow: UnitOfWork,
        clock: ClockPort,
        *,
        default_sprint_length_days: int = DEFAULT_SPRINT_LENGTH_DAYS,
    ) -> None:
        self._uow = uow
        self._clock = clock
        self._default_length = default_sprint_length_days

    async def execute(self, user_id: str) -> TimeInfoDTO:
        """Return the header label for ``user_id``."""
        today = self._clock.today()
        async with self._uow as tx:
            config = await get_profile_repository(tx).get_time_config(user_id)

        label = format_long_date(today)
        if config is None:
            return TimeInfoDTO(as_of=today, label=label)

        snapshot = resolve_time_windows(
            config,
            today=today,
            default_sprint_length_days=self._default_length,
        )
        label = LABEL_SEPARATOR.join(
            (
                label,
                f"Sprint {snapshot.current_sprint}",
                f"Quarter {snapshot.current_quarter}",
            )
        )
        return TimeInfoDTO(
            as_of=today,
            label=label,
            sprint=snapshot.current_sprint,
            quarter=snapshot.current_quarter,
        )
