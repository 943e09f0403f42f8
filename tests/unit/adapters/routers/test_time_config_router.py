# tests/unit/adapters/routers/test_time_config_router.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient

from taskflow_api.domain.entities.time_config import TimeConfig

BASE = "/v1/profiles/u-1"


def _seed(store: dict[str, TimeConfig]) -> None:
    store["u-1"] = TimeConfig(
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=14,
    )


def test_get_time_config_success_envelope(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    _seed(store)

    resp = client.get(f"{BASE}/time-config", headers={"X-Request-ID": "req-123"})

    assert resp.status_code == 200
    assert resp.headers["X-Request-ID"] == "req-123"
    etag = resp.headers["ETag"]
    assert etag.startswith('"') and etag.endswith('"')

    data = resp.json()["data"]
    assert data == {
        "user_id": "u-1",
        "configured": True,
        "fiscal_year_start_date": "2024-10-01",
        "first_sprint_start_date": "2025-01-01",
        "sprint_length_days": 14,
        "effective_sprint_length_days": 14,
        "current_sprint": 2,
        "current_sprint_start_date": "2025-01-15",
        "current_sprint_end_date": "2025-01-28",
        "current_quarter": 2,
        "as_of": "2025-01-20",
    }


def test_etag_is_stable_for_identical_payloads(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    _seed(store)

    first = client.get(f"{BASE}/time-config")
    second = client.get(f"{BASE}/time-config")

    assert first.headers["ETag"] == second.headers["ETag"]
    assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


def test_get_time_config_unknown_profile_is_404(client: TestClient) -> None:
    resp = client.get(f"{BASE}/time-config", headers={"x-trace-id": "trace-abc"})

    assert resp.status_code == 404
    err = resp.json()["error"]
    assert err["code"] == "PROFILE_NOT_FOUND"
    assert err["http_status"] == 404
    assert err["details"] == {"user_id": "u-1"}
    assert err["trace_id"] == "trace-abc"
    assert resp.headers["x-trace-id"] == "trace-abc"
    assert "X-Request-ID" in resp.headers


def test_put_creates_profile_with_back_calculated_anchor(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    resp = client.put(
        f"{BASE}/time-config",
        json={
            "fiscal_year_start_date": "2024-10-01",
            "sprint_length_days": 14,
            "current_sprint_number": 5,
            "current_sprint_start_date": "2025-01-01",
        },
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["first_sprint_start_date"] == "2024-11-06"
    assert data["current_sprint"] == 6
    assert data["current_quarter"] == 2
    assert store["u-1"].first_sprint_start_date == date(2024, 11, 6)


def test_put_partial_update_keeps_other_fields(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    _seed(store)

    resp = client.put(f"{BASE}/time-config", json={"sprint_length_days": 7})

    assert resp.status_code == 200
    assert store["u-1"] == TimeConfig(
        fiscal_year_start_date=date(2024, 10, 1),
        first_sprint_start_date=date(2025, 1, 1),
        sprint_length_days=7,
    )
    assert resp.json()["data"]["current_sprint"] == 3


def test_put_both_anchor_forms_is_invalid_configuration(client: TestClient) -> None:
    resp = client.put(
        f"{BASE}/time-config",
        json={
            "first_sprint_start_date": "2025-01-01",
            "current_sprint_number": 2,
            "current_sprint_start_date": "2025-01-15",
        },
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_CONFIGURATION"


def test_put_incomplete_known_sprint_is_invalid_configuration(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    resp = client.put(f"{BASE}/time-config", json={"current_sprint_number": 2})

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_CONFIGURATION"
    assert store == {}


def test_get_time_config_past_calendar_end_is_invalid_configuration(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    store["u-1"] = TimeConfig(first_sprint_start_date=date(9999, 12, 31), sprint_length_days=14)

    resp = client.get(f"{BASE}/time-config")

    assert resp.status_code == 422
    err = resp.json()["error"]
    assert err["code"] == "INVALID_CONFIGURATION"
    assert err["details"]["current_sprint_start_date"] == "9999-12-31"


def test_put_known_sprint_before_calendar_start_is_invalid_configuration(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    resp = client.put(
        f"{BASE}/time-config",
        json={
            "sprint_length_days": 365,
            "current_sprint_number": 1000,
            "current_sprint_start_date": "0500-01-01",
        },
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_CONFIGURATION"
    assert store == {}


def test_put_rejects_sprint_number_above_limit(client: TestClient) -> None:
    resp = client.put(
        f"{BASE}/time-config",
        json={"current_sprint_number": 1001, "current_sprint_start_date": "2025-01-01"},
    )

    assert resp.status_code == 422
    err = resp.json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert err["details"]["errors"][0]["loc"][-1] == "current_sprint_number"


def test_put_rejects_non_positive_length(client: TestClient) -> None:
    resp = client.put(f"{BASE}/time-config", json={"sprint_length_days": 0})

    assert resp.status_code == 422
    err = resp.json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert err["details"]["errors"][0]["loc"][-1] == "sprint_length_days"


def test_put_rejects_unknown_fields(client: TestClient) -> None:
    resp = client.put(f"{BASE}/time-config", json={"sprint_length": 14})

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_time_info_label(client: TestClient, store: dict[str, TimeConfig]) -> None:
    _seed(store)

    resp = client.get(f"{BASE}/time-info")

    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "as_of": "2025-01-20",
        "label": "Monday, January 20, 2025 • Sprint 2 • Quarter 2",
        "sprint": 2,
        "quarter": 2,
    }


def test_time_info_without_profile(client: TestClient) -> None:
    resp = client.get(f"{BASE}/time-info")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["label"] == "Monday, January 20, 2025"
    assert data["sprint"] is None
    assert data["quarter"] is None


def test_due_date_check(client: TestClient, store: dict[str, TimeConfig]) -> None:
    _seed(store)

    resp = client.post(f"{BASE}/due-dates/check", json={"type": "sprint", "value": 2})

    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "type": "sprint",
        "value": "2",
        "in_current_period": True,
        "current_sprint": 2,
        "current_quarter": 2,
        "as_of": "2025-01-20",
    }


def test_due_date_check_date_outside_sprint(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    _seed(store)

    resp = client.post(f"{BASE}/due-dates/check", json={"type": "date", "value": "2025-02-03"})

    assert resp.status_code == 200
    assert resp.json()["data"]["in_current_period"] is False


def test_due_date_check_invalid_value(client: TestClient) -> None:
    resp = client.post(f"{BASE}/due-dates/check", json={"type": "quarter", "value": 5})

    assert resp.status_code == 422
    err = resp.json()["error"]
    assert err["code"] == "INVALID_DUE_DATE"
    assert err["details"]["type"] == "quarter"


def test_due_date_check_rejects_timestamp(
    client: TestClient, store: dict[str, TimeConfig]
) -> None:
    _seed(store)

    resp = client.post(
        f"{BASE}/due-dates/check", json={"type": "date", "value": "2025-01-22T10:00:00Z"}
    )

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_DUE_DATE"


def test_due_date_check_unknown_type(client: TestClient) -> None:
    resp = client.post(f"{BASE}/due-dates/check", json={"type": "week", "value": 1})

    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


def test_liveness(client: TestClient) -> None:
    resp = client.get("/health/liveness")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
