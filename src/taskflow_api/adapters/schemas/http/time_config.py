# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""HTTP schemas for profile calendar endpoints.

Layer: adapters/schemas/http
"""

from __future__ import annotations

from datetime import date

from pydantic import ConfigDict, Field

from taskflow_api.adapters.schemas.http.base import BaseHTTPSchema
from taskflow_api.domain.enums.tasks import DueDateType


class TimeConfigHTTP(BaseHTTPSchema):
    """Stored calendar settings plus the current sprint and quarter."""

    model_config = ConfigDict(title="TimeConfig")

    user_id: str
    configured: bool = Field(
        ..., description="True once a fiscal year or sprint 1 anchor is stored."
    )
    fiscal_year_start_date: date | None = Field(
        default=None, description="Fiscal year start; only the month is significant."
    )
    first_sprint_start_date: date | None = Field(default=None, description="Start of sprint 1.")
    sprint_length_days: int | None = Field(default=None, description="Configured sprint length.")
    effective_sprint_length_days: int = Field(
        ..., ge=1, description="Configured length, or the service default when unset."
    )
    current_sprint: int = Field(..., ge=1)
    current_sprint_start_date: date
    current_sprint_end_date: date = Field(..., description="Last day of the sprint (inclusive).")
    current_quarter: int = Field(..., ge=1, le=4)
    as_of: date


class UpdateTimeConfigRequestHTTP(BaseHTTPSchema):
    """Partial update of the calendar settings.

    Omitted fields keep their stored value and ``null`` clears it. Give the
    start of sprint 1 directly or describe the current sprint with
    ``current_sprint_number`` and ``current_sprint_start_date``.
    """

    model_config = ConfigDict(
        title="UpdateTimeConfigRequest",
        json_schema_extra={
            "examples": [
                {
                    "fiscal_year_start_date": "2024-10-01",
                    "sprint_length_days": 14,
                    "current_sprint_number": 5,
                    "current_sprint_start_date": "2025-01-01",
                }
            ]
        },
    )

    fiscal_year_start_date: date | None = None
    sprint_length_days: int | None = Field(default=None, ge=1, le=365, strict=True)
    first_sprint_start_date: date | None = None
    current_sprint_number: int | None = Field(default=None, ge=1, le=1000, strict=True)
    current_sprint_start_date: date | None = None


class TimeInfoHTTP(BaseHTTPSchema):
    """Header label, e.g. "Monday, January 20, 2025 • Sprint 1 • Quarter 2"."""

    model_config = ConfigDict(title="TimeInfo")

    as_of: date
    label: str
    sprint: int | None = None
    quarter: int | None = None


class DueDateCheckRequestHTTP(BaseHTTPSchema):
    """A task due date to evaluate against the profile calendar."""

    model_config = ConfigDict(
        title="DueDateCheckRequest",
        json_schema_extra={"examples": [{"type": "sprint", "value": 3}]},
    )

    type: DueDateType
    value: int | str = Field(..., description="ISO date, sprint number, quarter or year.")


class DueDateStatusHTTP(BaseHTTPSchema):
    """Whether the due date lands in the current period."""

    model_config = ConfigDict(title="DueDateStatus")

    type: DueDateType
    value: str
    in_current_period: bool
    current_sprint: int
    current_quarter: int
    as_of: date
