# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Time Configuration Entities (Domain Layer).

Purpose:
    Immutable representations of a profile's sprint/fiscal calendar settings
    and of the "current period" answers derived from them.

Layer:
    domain/entities

Notes:
    - ``TimeConfig`` is the persisted shape; every field is optional because
      organizations may not have configured their calendar yet.
    - ``TimeWindowSnapshot`` is computed on every read and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from taskflow_api.domain.exceptions import InvalidConfiguration

#: Sprint length used for display when a profile has not configured one.
DEFAULT_SPRINT_LENGTH_DAYS = 14


@dataclass(frozen=True, slots=True)
class TimeConfig:
    """Sprint and fiscal-year anchors for a single profile.

    Args:
        fiscal_year_start_date: Calendar date marking the fiscal year start.
            Only the month is significant.
        first_sprint_start_date: Start date of sprint 1.
        sprint_length_days: Sprint duration in days.

    Raises:
        InvalidConfiguration: If ``sprint_length_days`` is set but is not a
            positive integer.
    """

    fiscal_year_start_date: date | None = None
    first_sprint_start_date: date | None = None
    sprint_length_days: int | None = None

    def __post_init__(self) -> None:
        length = self.sprint_length_days
        if length is None:
            return
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidConfiguration(
                "sprint_length_days must be a positive integer",
                details={"sprint_length_days": length},
            )

    @property
    def is_configured(self) -> bool:
        """Return True when at least one anchor has been set."""
        return self.fiscal_year_start_date is not None or self.first_sprint_start_date is not None


@dataclass(frozen=True, slots=True)
class TimeWindowSnapshot:
    """Current sprint/quarter answers for a given day.

    Attributes:
        as_of: The day the snapshot was computed for.
        sprint_length_days: Effective sprint length (configured or default).
        current_sprint: 1-based sprint number containing ``as_of``.
        current_sprint_start_date: First day of the current sprint.
        current_sprint_end_date: Last day (inclusive) of the current sprint.
        current_quarter: Fiscal quarter (1..4) containing ``as_of``.
    """

    as_of: date
    sprint_length_days: int
    current_sprint: int
    current_sprint_start_date: date
    current_sprint_end_date: date
    current_quarter: int

    def contains(self, day: date) -> bool:
        """Return True when ``day`` falls inside the current sprint window."""
        return self.current_sprint_start_date <= day <= self.current_sprint_end_date
