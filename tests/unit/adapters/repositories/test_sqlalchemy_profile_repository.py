# tests/unit/adapters/repositories/test_sqlalchemy_profile_repository.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from taskflow_api.adapters.repositories.profile_repository import SqlAlchemyProfileRepository
from taskflow_api.domain.entities.time_config import TimeConfig
from taskflow_api.infrastructure.database.models import ProfileModel


class _FakeScalars:
    def __init__(self, row: Any) -> None:
        self._row = row

    def first(self) -> Any:
        return self._row


class _FakeResult:
    def __init__(self, row: Any) -> None:
        self._row = row

    def scalars(self) -> _FakeScalars:
        return _FakeScalars(self._row)


class _FakeSession:
    """Returns a fixed row for every SELECT and records adds/flushes."""

    def __init__(self, row: ProfileModel | None = None) -> None:
        self.row = row
        self.added: list[Any] = []
        self.flushes = 0
        self.statements: list[Any] = []

    async def execute(self, stmt: Any) -> _FakeResult:
        self.statements.append(stmt)
        return _FakeResult(self.row)

    def add(self, obj: Any) -> None:
        self.added.append(obj)

    async def flush(self) -> None:
        self.flushes += 1


@pytest.mark.asyncio
async def test_get_time_config_maps_columns() -> None:
    row = ProfileModel(
        user_id="u-1",
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=14,
    )
    repo = SqlAlchemyProfileRepository(session=_FakeSession(row))  # type: ignore[arg-type]

    assert await repo.get_time_config("u-1") == TimeConfig(
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=14,
    )


@pytest.mark.asyncio
async def test_get_time_config_missing_row() -> None:
    repo = SqlAlchemyProfileRepository(session=_FakeSession(None))  # type: ignore[arg-type]
    assert await repo.get_time_config("u-1") is None


@pytest.mark.asyncio
async def test_upsert_inserts_new_profile_and_flushes() -> None:
    session = _FakeSession(None)
    repo = SqlAlchemyProfileRepository(session=session)  # type: ignore[arg-type]
    config = TimeConfig(first_sprint_start_date=date(2024, 11, 6), sprint_length_days=14)

    saved = await repo.upsert_time_config("u-1", config)

    assert saved == config
    (model,) = session.added
    assert isinstance(model, ProfileModel)
    assert model.user_id == "u-1"
    assert model.first_sprint_start_date == date(2024, 11, 6)
    assert model.updated_at is not None
    assert session.flushes == 1


@pytest.mark.asyncio
async def test_upsert_updates_existing_row_in_place() -> None:
    row = ProfileModel(user_id="u-1", sprint_length_days=14)
    session = _FakeSession(row)
    repo = SqlAlchemyProfileRepository(session=session)  # type: ignore[arg-type]

    await repo.upsert_time_config("u-1", TimeConfig(fiscal_year_start_date=date(2024, 4, 1)))

    assert session.added == []
    assert row.fiscal_year_start_date == date(2024, 4, 1)
    # Unset fields are written through as NULL.
    assert row.sprint_length_days is None
