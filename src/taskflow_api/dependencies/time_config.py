# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the profile calendar use cases.

Overview:
    FastAPI dependency providers that build the unit of work, the clock and
    the use cases consumed by the time configuration router.

Layer:
    dependencies

Design:
    * Always return the real use case types; tests override ``get_uow``,
      ``get_clock`` or ``get_settings`` through ``app.dependency_overrides``.
    * Select the unit of work by configuration:
        - SqlAlchemyUnitOfWork when ``DATABASE_URL`` is set.
        - InMemoryUnitOfWork over a process-wide store otherwise.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from taskflow_api.adapters.uow import InMemoryUnitOfWork, SqlAlchemyUnitOfWork
from taskflow_api.application.interfaces.clock import ClockPort
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.application.use_cases.due_dates import CheckDueDate
from taskflow_api.application.use_cases.time_config import (
    GetTimeConfig,
    GetTimeInfo,
    UpdateTimeConfig,
)
from taskflow_api.config.settings import Settings, get_settings
from taskflow_api.domain.entities.time_config import TimeConfig
from taskflow_api.infrastructure.clock import SystemClock
from taskflow_api.infrastructure.database.session import (
    get_sessionmaker,
    init_engine_and_sessionmaker,
)

# Shared by every request when no database is configured.
_MEMORY_STORE: dict[str, TimeConfig] = {}


def get_clock() -> ClockPort:
    """Return the wall clock."""
    return SystemClock()


def get_uow(settings: Annotated[Settings, Depends(get_settings)]) -> UnitOfWork:
    """Return a fresh unit of work for the configured backend."""
    if settings.database_url:
        init_engine_and_sessionmaker(settings)
        return SqlAlchemyUnitOfWork(session_factory=get_sessionmaker())
    return InMemoryUnitOfWork(_MEMORY_STORE)


UowDep = Annotated[UnitOfWork, Depends(get_uow)]
ClockDep = Annotated[ClockPort, Depends(get_clock)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_get_time_config_use_case(
    uow: UowDep, clock: ClockDep, settings: SettingsDep
) -> GetTimeConfig:
    return GetTimeConfig(
        uow, clock, default_sprint_length_days=settings.default_sprint_length_days
    )


def get_update_time_config_use_case(
    uow: UowDep, clock: ClockDep, settings: SettingsDep
) -> UpdateTimeConfig:
    return UpdateTimeConfig(
        uow, clock, default_sprint_length_days=settings.default_sprint_length_days
    )


def get_time_info_use_case(uow: UowDep, clock: ClockDep, settings: SettingsDep) -> GetTimeInfo:
    return GetTimeInfo(uow, clock, default_sprint_length_days=settings.default_sprint_length_days)


def get_check_due_date_use_case(
    uow: UowDep, clock: ClockDep, settings: SettingsDep
) -> CheckDueDate:
    return CheckDueDate(
        uow, clock, default_sprint_length_days=settings.default_sprint_length_days
    )
