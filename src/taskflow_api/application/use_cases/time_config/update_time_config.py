# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Use Case: Update Time Configuration

Purpose:
    Apply a partial settings-form submission to a profile's calendar anchors,
    creating the profile on first save. When the user describes the sprint
    they are currently in ("sprint 5 started on 2025-01-01"), the start of
    sprint 1 is back-calculated before storage.

Layer: application/use_cases
"""

from __future__ import annotations

import logging

from taskflow_api.application.interfaces.clock import ClockPort
from taskflow_api.application.schemas.dto.time_config import (
    TimeConfigDTO,
    UpdateTimeConfigRequestDTO,
)
from taskflow_api.application.uow import UnitOfWork, run_in_uow
from taskflow_api.application.use_cases._repositories import get_profile_repository
from taskflow_api.domain.entities.time_config import DEFAULT_SPRINT_LENGTH_DAYS, TimeConfig
from taskflow_api.domain.exceptions import InvalidConfiguration
from taskflow_api.domain.services.time_windows import (
    first_sprint_start_date,
    resolve_time_windows,
)

logger = logging.getLogger(__name__)

_KNOWN_SPRINT_FIELDS = frozenset({"current_sprint_number", "current_sprint_start_date"})


class UpdateTimeConfig:
    """Upsert a profile's calendar anchors.

    Args:
        uow: Unit of work providing the transaction and profile repository.
        clock: Source of "today" for the returned snapshot.
        default_sprint_length_days: Length used for back-calculation and
            display when the profile has none.

    Raises:
        InvalidConfiguration: If both forms of the sprint anchor are supplied,
            the known-sprint pair is incomplete, or a value is out of range.
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

    async def execute(self, user_id: str, req: UpdateTimeConfigRequestDTO) -> TimeConfigDTO:
        """Merge ``req`` into the stored configuration and persist it.

        Args:
            user_id: Owner of the profile.
            req: Partial update; only explicitly set fields are applied.

        Returns:
            The persisted configuration with its snapshot for today.
        """
        provided = req.model_fields_set
        known_sprint = provided & _KNOWN_SPRINT_FIELDS
        if known_sprint and "first_sprint_start_date" in provided:
            raise InvalidConfiguration(
                "Provide either first_sprint_start_date or the current sprint, not both.",
                details={"fields": sorted(known_sprint | {"first_sprint_start_date"})},
            )

        async def _apply(tx: UnitOfWork) -> TimeConfig:
            repo = get_profile_repository(tx)
            current = await repo.get_time_config(user_id) or TimeConfig()
            merged = self._merge(user_id, current, req)
            return await repo.upsert_time_config(user_id, merged)

        saved = await run_in_uow(self._uow, _apply)

        snapshot = resolve_time_windows(
            saved,
            today=self._clock.today(),
            default_sprint_length_days=self._default_length,
        )
        logger.info(
            "time_config.updated",
            extra={
                "user_id": user_id,
                "fields": sorted(provided),
                "current_sprint": snapshot.current_sprint,
                "current_quarter": snapshot.current_quarter,
            },
        )
        return TimeConfigDTO.from_domain(user_id=user_id, config=saved, snapshot=snapshot)

    def _merge(
        self,
        user_id: str,
        current: TimeConfig,
        req: UpdateTimeConfigRequestDTO,
    ) -> TimeConfig:
        """Return the configuration that results from applying ``req`` to ``current``."""
        provided = req.model_fields_set

        fiscal = (
            req.fiscal_year_start_date
            if "fiscal_year_start_date" in provided
            else current.fiscal_year_start_date
        )
        length = (
            req.sprint_length_days
            if "sprint_length_days" in provided
            else current.sprint_length_days
        )

        if provided & _KNOWN_SPRINT_FIELDS:
            number = req.current_sprint_number
            start = req.current_sprint_start_date
            if number is None or start is None:
                raise InvalidConfiguration(
                    "current_sprint_number and current_sprint_start_date must be given together.",
                    details={
                        "current_sprint_number": number,
                        "current_sprint_start_date": start.isoformat() if start else None,
                    },
                )
            # The stored length must match the one used for back-calculation.
            length = length if length is not None else self._default_length
            first = first_sprint_start_date(start, number, length)
            logger.info(
                "time_config.first_sprint_back_calculated",
                extra={
                    "user_id": user_id,
                    "known_sprint_number": number,
                    "known_sprint_start_date": start.isoformat(),
                    "sprint_length_days": length,
                    "first_sprint_start_date": first.isoformat(),
                },
            )
        elif "first_sprint_start_date" in provided:
            first = req.first_sprint_start_date
        else:
            first = current.first_sprint_start_date

        return TimeConfig(
            fiscal_year_start_date=fiscal,
            first_sprint_start_date=first,
            sprint_length_days=length,
        )
