# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Use Case: Get Time Configuration

Purpose:
    Load a profile's calendar anchors and derive the current sprint window and
    fiscal quarter for "today".

Layer: application/use_cases
"""

from __future__ import annotations

import logging

from taskflow_api.application.interfaces.clock import ClockPort
from taskflow_api.application.schemas.dto.time_config import TimeConfigDTO
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.application.use_cases._repositories import get_profile_repository
from taskflow_api.domain.entities.time_config import DEFAULT_SPRINT_LENGTH_DAYS
from taskflow_api.domain.exceptions import ProfileNotFound
from taskflow_api.domain.services.time_windows import resolve_time_windows

logger = logging.getLogger(__name__)


class GetTimeConfig:
    """Read a profile's time configuration with derived period answers.

    Args:
        uow: Unit of work used to resolve the profile repository.
        clock: Source of "today".
        default_sprint_length_days: Length applied when the profile has none.

    Raises:
        ProfileNotFound: If the user has no profile.
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

    async def execute(self, user_id: str) -> TimeConfigDTO:
        """Return the stored configuration and its snapshot for today."""
        async with self._uow as tx:
            config = await get_profile_repository(tx).get_time_config(user_id)

        if config is None:
            raise ProfileNotFound(
                "No profile found for user.",
                details={"user_id": user_id},
            )

        snapshot = resolve_time_windows(
            config,
            today=self._clock.today(),
            default_sprint_length_days=self._default_length,
        )
        logger.debug(
            "time_config.get",
            extra={
                "user_id": user_id,
                "current_sprint": snapshot.current_sprint,
                "current_quarter": snapshot.current_quarter,
            },
        )
        return TimeConfigDTO.from_domain(user_id=user_id, config=config, snapshot=snapshot)
