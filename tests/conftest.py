# tests/conftest.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskflow_api.adapters.uow import InMemoryUnitOfWork
from taskflow_api.config.settings import get_settings
from taskflow_api.dependencies.time_config import get_clock, get_uow
from taskflow_api.domain.entities.time_config import TimeConfig


@dataclass
class FixedClock:
    """Clock pinned to a single day."""

    day: date

    def today(self) -> date:
        return self.day


@pytest.fixture(autouse=True)
def _hermetic_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against in-memory persistence with default settings."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DEFAULT_SPRINT_LENGTH_DAYS", raising=False)
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    # A Monday.
    return date(2025, 1, 20)


@pytest.fixture
def clock(today: date) -> FixedClock:
    return FixedClock(today)


@pytest.fixture
def store() -> dict[str, TimeConfig]:
    return {}


@pytest.fixture
def uow(store: dict[str, TimeConfig]) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def app(store: dict[str, TimeConfig], clock: FixedClock) -> Generator[FastAPI, None, None]:
    from taskflow_api.main import create_app

    application = create_app()
    application.dependency_overrides[get_uow] = lambda: InMemoryUnitOfWork(store)
    application.dependency_overrides[get_clock] = lambda: clock
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
