# tests/unit/config/test_settings.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

import pytest

from taskflow_api.config.settings import Environment, Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("DB_SCHEMA", raising=False)
    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.database_url is None
    assert settings.db_schema == "public"
    assert settings.default_sprint_length_days == 14
    assert settings.cors_allow_origins == []
    assert settings.service_name == "taskflow-api"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_allowed_origins_are_split(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    settings = get_settings()

    assert settings.cors_allow_origins == ["https://a.example", "https://b.example"]


def test_wildcard_cors_allowed_in_test(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    assert get_settings().cors_allow_origins == ["*"]


def test_production_rejects_wildcard_cors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")

    with pytest.raises(RuntimeError):
        get_settings()


@pytest.mark.parametrize("raw", ["0", "366", "two"])
def test_default_sprint_length_bounds(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DEFAULT_SPRINT_LENGTH_DAYS", raw)

    with pytest.raises(RuntimeError):
        get_settings()


def test_default_sprint_length_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEFAULT_SPRINT_LENGTH_DAYS", "10")
    assert get_settings().default_sprint_length_days == 10
