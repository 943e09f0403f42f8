# tests/unit/domain/entities/test_due_date.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
from __future__ import annotations

from datetime import date

import pytest

from taskflow_api.domain.entities.due_date import MAX_YEARS_BACK, DueDate
from taskflow_api.domain.entities.time_config import TimeWindowSnapshot
from taskflow_api.domain.enums.tasks import DueDateType
from taskflow_api.domain.exceptions import InvalidDueDate

TODAY = date(2025, 1, 20)


def _snapshot() -> TimeWindowSnapshot:
    return TimeWindowSnapshot(
        as_of=TODAY,
        sprint_length_days=14,
        current_sprint=2,
        current_sprint_start_date=date(2025, 1, 15),
        current_sprint_end_date=date(2025, 1, 28),
        current_quarter=2,
    )


def test_parse_iso_date() -> None:
    due = DueDate.parse(DueDateType.DATE, "2025-01-22", today=TODAY)
    assert due.value == date(2025, 1, 22)
    assert due.to_storage() == "2025-01-22"


@pytest.mark.parametrize("raw", ["2025-01-22T10:00:00Z", "2025-01-22junk", "20250122"])
def test_parse_date_rejects_anything_but_a_bare_calendar_date(raw: str) -> None:
    with pytest.raises(InvalidDueDate) as excinfo:
        DueDate.parse(DueDateType.DATE, raw, today=TODAY)
    assert excinfo.value.details == {"type": "date", "value": raw}


def test_parse_date_strips_surrounding_whitespace() -> None:
    due = DueDate.parse(DueDateType.DATE, " 2025-01-22 ", today=TODAY)
    assert due.value == date(2025, 1, 22)


@pytest.mark.parametrize(
    ("kind", "raw", "expected"),
    [
        (DueDateType.SPRINT, "7", 7),
        (DueDateType.SPRINT, 3, 3),
        (DueDateType.QUARTER, " 4 ", 4),
        (DueDateType.YEAR, 2026, 2026),
    ],
)
def test_parse_numeric_kinds(kind: DueDateType, raw: str | int, expected: int) -> None:
    due = DueDate.parse(kind, raw, today=TODAY)
    assert due.value == expected
    assert due.to_storage() == str(expected)


@pytest.mark.parametrize(
    ("kind", "raw"),
    [
        (DueDateType.DATE, "not-a-date"),
        (DueDateType.DATE, 5),
        (DueDateType.QUARTER, 0),
        (DueDateType.QUARTER, "5"),
        (DueDateType.SPRINT, 0),
        (DueDateType.SPRINT, "next"),
        (DueDateType.SPRINT, date(2025, 1, 1)),
        (DueDateType.YEAR, -1),
    ],
)
def test_parse_rejects_invalid_values(kind: DueDateType, raw: object) -> None:
    with pytest.raises(InvalidDueDate) as ei:
        DueDate.parse(kind, raw, today=TODAY)  # type: ignore[arg-type]
    assert ei.value.code == "INVALID_DUE_DATE"
    assert ei.value.details["type"] == kind.value


def test_year_lower_bound_is_relative_to_today() -> None:
    earliest = TODAY.year - MAX_YEARS_BACK
    assert DueDate.parse(DueDateType.YEAR, earliest, today=TODAY).value == earliest
    with pytest.raises(InvalidDueDate) as ei:
        DueDate.parse(DueDateType.YEAR, earliest - 1, today=TODAY)
    assert ei.value.details["earliest"] == earliest


def test_bool_is_not_a_sprint_number() -> None:
    with pytest.raises(InvalidDueDate):
        DueDate(kind=DueDateType.SPRINT, value=True)


@pytest.mark.parametrize(
    ("due", "expected"),
    [
        (DueDate(DueDateType.DATE, date(2025, 1, 15)), True),
        (DueDate(DueDateType.DATE, date(2025, 1, 28)), True),
        (DueDate(DueDateType.DATE, date(2025, 1, 29)), False),
        (DueDate(DueDateType.DATE, date(2025, 1, 14)), False),
        (DueDate(DueDateType.SPRINT, 2), True),
        (DueDate(DueDateType.SPRINT, 3), False),
        (DueDate(DueDateType.QUARTER, 2), True),
        (DueDate(DueDateType.QUARTER, 1), False),
        (DueDate(DueDateType.YEAR, 2025), True),
        (DueDate(DueDateType.YEAR, 2026), False),
    ],
)
def test_falls_in_current_period(due: DueDate, expected: bool) -> None:
    assert due.falls_in_current_period(_snapshot()) is expected
