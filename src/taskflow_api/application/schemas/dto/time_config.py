# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Time configuration DTOs (Application Layer).

Purpose:
    Request/response shapes for the profile calendar use cases. Dates are
    plain ``datetime.date`` values; presenters own JSON formatting.

Layer: application/schemas/dto
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from taskflow_api.application.schemas.dto.base import BaseDTO
from taskflow_api.domain.entities.due_date import DueDate
from taskflow_api.domain.entities.time_config import TimeConfig, TimeWindowSnapshot
from taskflow_api.domain.enums.tasks import DueDateType


class TimeConfigDTO(BaseDTO):
    """Stored calendar settings plus the derived current-period answers."""

    user_id: str
    configured: bool = False
    fiscal_year_start_date: date | None = None
    first_sprint_start_date: date | None = None
    sprint_length_days: int | None = None
    effective_sprint_length_days: int = Field(..., ge=1)
    current_sprint: int = Field(..., ge=1)
    current_sprint_start_date: date
    current_sprint_end_date: date
    current_quarter: int = Field(..., ge=1, le=4)
    as_of: date

    @classmethod
    def from_domain(
        cls,
        *,
        user_id: str,
        config: TimeConfig,
        snapshot: TimeWindowSnapshot,
    ) -> TimeConfigDTO:
        """Combine a stored configuration and its snapshot into a DTO."""
        return cls(
            user_id=user_id,
            configured=config.is_configured,
            fiscal_year_start_date=config.fiscal_year_start_date,
            first_sprint_start_date=config.first_sprint_start_date,
            sprint_length_days=config.sprint_length_days,
            effective_sprint_length_days=snapshot.sprint_length_days,
            current_sprint=snapshot.current_sprint,
            current_sprint_start_date=snapshot.current_sprint_start_date,
            current_sprint_end_date=snapshot.current_sprint_end_date,
            current_quarter=snapshot.current_quarter,
            as_of=snapshot.as_of,
        )


class UpdateTimeConfigRequestDTO(BaseDTO):
    """Partial update of a profile's calendar settings.

    Only fields present in ``model_fields_set`` are applied; an explicit
    ``None`` clears the stored value. The start of sprint 1 may be given
    directly or as the pair (``current_sprint_number``,
    ``current_sprint_start_date``), never both.
    """

    fiscal_year_start_date: date | None = None
    sprint_length_days: int | None = None
    first_sprint_start_date: date | None = None
    current_sprint_number: int | None = None
    current_sprint_start_date: date | None = None


class TimeInfoDTO(BaseDTO):
    """Header label data: today's date with the current sprint and quarter."""

    as_of: date
    label: str
    sprint: int | None = None
    quarter: int | None = None


class DueDateStatusDTO(BaseDTO):
    """Whether a due date lands in the period containing ``as_of``."""

    type: DueDateType
    value: str
    in_current_period: bool
    current_sprint: int
    current_quarter: int
    as_of: date

    @classmethod
    def from_domain(cls, *, due_date: DueDate, snapshot: TimeWindowSnapshot) -> DueDateStatusDTO:
        """Build the DTO from a validated due date and the current snapshot."""
        return cls(
            type=due_date.kind,
            value=due_date.to_storage(),
            in_current_period=due_date.falls_in_current_period(snapshot),
            current_sprint=snapshot.current_sprint,
            current_quarter=snapshot.current_quarter,
            as_of=snapshot.as_of,
        )
