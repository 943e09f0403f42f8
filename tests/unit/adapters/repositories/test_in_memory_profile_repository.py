# tests/unit/adapters/repositories/test_in_memory_profile_repository.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from datetime import date

import pytest

from taskflow_api.adapters.repositories import InMemoryProfileRepository
from taskflow_api.domain.entities.time_config import TimeConfig


@pytest.mark.asyncio
async def test_get_missing_profile_returns_none() -> None:
    repo = InMemoryProfileRepository()
    assert await repo.get_time_config("nobody") is None


@pytest.mark.asyncio
async def test_upsert_then_get() -> None:
    repo = InMemoryProfileRepository()
    first = TimeConfig(sprint_length_days=14)
    second = TimeConfig(fiscal_year_start_date=date(2024, 10, 1), sprint_length_days=7)

    assert await repo.upsert_time_config("u-1", first) == first
    await repo.upsert_time_config("u-1", second)

    assert await repo.get_time_config("u-1") == second


@pytest.mark.asyncio
async def test_writes_go_to_the_supplied_store() -> None:
    store: dict[str, TimeConfig] = {}
    repo = InMemoryProfileRepository(store)

    await repo.upsert_time_config("u-1", TimeConfig())

    assert store == {"u-1": TimeConfig()}
