# tests/unit/application/use_cases/test_get_time_info_uc.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from taskflow_api.adapters.uow import InMemoryUnitOfWork
from taskflow_api.application.use_cases.time_config.get_time_info import (
    GetTimeInfo,
    format_long_date,
)
from taskflow_api.domain.entities.time_config import TimeConfig


def test_format_long_date() -> None:
    assert format_long_date(date(2025, 1, 20)) == "Monday, January 20, 2025"
    assert format_long_date(date(2026, 10, 7)) == "Wednesday, October 7, 2026"


@pytest.mark.asyncio
async def test_label_includes_sprint_and_quarter(
    uow: InMemoryUnitOfWork, store: dict[str, TimeConfig], clock: Any
) -> None:
    store["u-1"] = TimeConfig(
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=14,
    )

    dto = await GetTimeInfo(uow, clock).execute("u-1")

    assert dto.label == "Monday, January 20, 2025 • Sprint 2 • Quarter 2"
    assert dto.sprint == 2
    assert dto.quarter == 2
    assert dto.as_of == date(2025, 1, 20)


@pytest.mark.asyncio
async def test_unconfigured_profile_gets_defaults(
    uow: InMemoryUnitOfWork, store: dict[str, TimeConfig], clock: Any
) -> None:
    store["u-1"] = TimeConfig()

    dto = await GetTimeInfo(uow, clock).execute("u-1")

    assert dto.label == "Monday, January 20, 2025 • Sprint 1 • Quarter 1"


@pytest.mark.asyncio
async def test_missing_profile_returns_date_only(uow: InMemoryUnitOfWork, clock: Any) -> None:
    dto = await GetTimeInfo(uow, clock).execute("nobody")

    assert dto.label == "Monday, January 20, 2025"
    assert dto.sprint is None
    assert dto.quarter is None


@pytest.mark.asyncio
async def test_label_follows_the_clock(
    uow: InMemoryUnitOfWork, store: dict[str, TimeConfig], clock: Any
) -> None:
    store["u-1"] = TimeConfig(
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=14,
    )
    clock.day = date(2025, 4, 2)

    dto = await GetTimeInfo(uow, clock).execute("u-1")

    # 91 days after the anchor.
    assert dto.label == "Wednesday, April 2, 2025 • Sprint 7 • Quarter 3"
