# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Use Case: Check Due Date

Purpose:
    Validate a task due date and report whether it lands in the user's
    current sprint, quarter or year.

Layer: application/use_cases
"""

from __future__ import annotations

from datetime import date

from taskflow_api.application.interfaces.clock import ClockPort
from taskflow_api.application.schemas.dto.time_config import DueDateStatusDTO
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.application.use_cases._repositories import get_profile_repository
from taskflow_api.domain.entities.due_date import DueDate
from taskflow_api.domain.entities.time_config import DEFAULT_SPRINT_LENGTH_DAYS, TimeConfig
from taskflow_api.domain.enums.tasks import DueDateType
from taskflow_api.domain.services.time_windows import resolve_time_windows


class CheckDueDate:
    """Evaluate a due date against the user's calendar.

    Users without a profile are evaluated against an unconfigured calendar
    (sprint 1 starting on the most recent Monday, quarter 1).

    Raises:
        InvalidDueDate: If the value does not satisfy the rules for its type.
    """

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

    async def execute(
        self,
        user_id: str,
        kind: DueDateType,
        value: str | int | date,
    ) -> DueDateStatusDTO:
        """Parse ``value`` as a ``kind`` due date and compare it with today."""
        today = self._clock.today()
        due_date = DueDate.parse(kind, value, today=today)

        async with self._uow as tx:
            config = await get_profile_repository(tx).get_time_config(user_id)

        snapshot = resolve_time_windows(
            config or TimeConfig(),
            today=today,
            default_sprint_length_days=self._default_length,
        )
        return DueDateStatusDTO.from_domain(due_date=due_date, snapshot=snapshot)
