# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Sprint and fiscal-quarter window calculator.

Purpose:
    Convert a profile's sprint/fiscal calendar anchors into "current period"
    answers (sprint number, sprint window, fiscal quarter) and back-calculate
    the start of sprint 1 from any known sprint.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No clock reads: every forward computation takes ``today`` explicitly.
        * No persistence or transport concerns.
    - Elapsed time is measured in whole calendar days. ``datetime`` inputs are
      truncated to their date so time-of-day never advances a sprint early.
    - Quarters are month buckets relative to the fiscal start month; the
      day-of-month of the fiscal start is ignored.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from taskflow_api.domain.entities.time_config import (
    DEFAULT_SPRINT_LENGTH_DAYS,
    TimeConfig,
    TimeWindowSnapshot,
)
from taskflow_api.domain.exceptions import InvalidConfiguration

__all__ = [
    "current_quarter",
    "current_sprint_end_date",
    "current_sprint_number",
    "current_sprint_start_date",
    "first_sprint_start_date",
    "most_recent_monday",
    "resolve_time_windows",
]

_MONTHS_PER_QUARTER = 3


def _as_date(value: date) -> date:
    """Truncate a ``datetime`` to its calendar date; pass dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _require_positive_int(value: object, *, field: str) -> int:
    """Return ``value`` if it is a positive integer, else raise.

    Raises:
        InvalidConfiguration: For ``bool``, non-integers, zero and negatives.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(
            f"{field} must be a positive integer",
            details={field: value},
        )
    return value


def _shift(day: date, days: int, *, details: dict[str, object]) -> date:
    """Return ``day + days``, raising ``InvalidConfiguration`` outside the calendar range.

    Raises:
        InvalidConfiguration: If the result falls before ``date.min`` or after
            ``date.max``.
    """
    try:
        return day + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidConfiguration(
            "sprint calendar falls outside the supported date range",
            details={**details, "offset_days": days},
        ) from exc


def most_recent_monday(today: date) -> date:
    """Return the Monday on or before ``today``."""
    today = _as_date(today)
    return today - timedelta(days=today.weekday())


def current_sprint_number(
    first_sprint_start_date: date | None,
    sprint_length_days: int,
    *,
    today: date,
) -> int:
    """Return the 1-based sprint number containing ``today``.

    Args:
        first_sprint_start_date: Start of sprint 1, or None when unconfigured.
        sprint_length_days: Sprint duration in days.
        today: Reference day.

    Returns:
        ``1`` when the anchor is missing or lies in the future; otherwise the
        number of whole sprints elapsed since the anchor plus one.

    Raises:
        InvalidConfiguration: If ``sprint_length_days`` is not a positive integer.
    """
    length = _require_positive_int(sprint_length_days, field="sprint_length_days")
    if first_sprint_start_date is None:
        return 1

    anchor = _as_date(first_sprint_start_date)
    today = _as_date(today)
    if today < anchor:
        return 1

    elapsed_days = (today - anchor).days
    return elapsed_days // length + 1


def current_sprint_start_date(
    first_sprint_start_date: date | None,
    sprint_length_days: int,
    *,
    today: date,
) -> date:
    """Return the first day of the sprint containing ``today``.

    When no anchor is configured the most recent Monday is treated as the
    start of the current (and first) sprint.

    Raises:
        InvalidConfiguration: If ``sprint_length_days`` is not a positive integer,
            or the sprint start falls outside the calendar range.
    """
    sprint = current_sprint_number(first_sprint_start_date, sprint_length_days, today=today)
    if first_sprint_start_date is None:
        return most_recent_monday(today)

    anchor = _as_date(first_sprint_start_date)
    return _shift(
        anchor,
        (sprint - 1) * sprint_length_days,
        details={"first_sprint_start_date": anchor.isoformat(), "current_sprint": sprint},
    )


def current_sprint_end_date(
    first_sprint_start_date: date | None,
    sprint_length_days: int,
    *,
    today: date,
) -> date:
    """Return the last day (inclusive) of the sprint containing ``today``."""
    start = current_sprint_start_date(first_sprint_start_date, sprint_length_days, today=today)
    return _shift(
        start,
        sprint_length_days - 1,
        details={"current_sprint_start_date": start.isoformat()},
    )


def first_sprint_start_date(
    known_sprint_start_date: date,
    known_sprint_number: int,
    sprint_length_days: int,
) -> date:
    """Back-calculate the start of sprint 1 from a known sprint.

    Example:
        Sprint 5 started on 2025-01-01 with 14-day sprints, so sprint 1
        started ``4 * 14`` days earlier, on 2024-11-06.

    Args:
        known_sprint_start_date: Start date of the known sprint.
        known_sprint_number: 1-based number of the known sprint.
        sprint_length_days: Sprint duration in days.

    Returns:
        Start date of sprint 1.

    Raises:
        InvalidConfiguration: If the sprint number or length is not a positive
            integer, or sprint 1 would start before 0001-01-01.
    """
    number = _require_positive_int(known_sprint_number, field="known_sprint_number")
    length = _require_positive_int(sprint_length_days, field="sprint_length_days")
    known = _as_date(known_sprint_start_date)
    return _shift(
        known,
        -(number - 1) * length,
        details={"known_sprint_start_date": known.isoformat(), "known_sprint_number": number},
    )


def current_quarter(fiscal_year_start_date: date | None, *, today: date) -> int:
    """Return the fiscal quarter (1..4) containing ``today``.

    Args:
        fiscal_year_start_date: Fiscal year start; only its month is used.
            ``None`` yields quarter 1.
        today: Reference day; only its month is used.

    Returns:
        ``month_diff // 3 + 1`` where ``month_diff`` is the month distance
        from the fiscal start month, wrapped into ``0..11``.
    """
    if fiscal_year_start_date is None:
        return 1

    month_diff = today.month - fiscal_year_start_date.month
    if month_diff < 0:
        month_diff += 12
    return month_diff // _MONTHS_PER_QUARTER + 1


def resolve_time_windows(
    config: TimeConfig,
    *,
    today: date,
    default_sprint_length_days: int = DEFAULT_SPRINT_LENGTH_DAYS,
) -> TimeWindowSnapshot:
    """Compute every derived period answer for a stored configuration.

    Args:
        config: Stored calendar anchors.
        today: Reference day.
        default_sprint_length_days: Length applied when the profile has none.

    Returns:
        Snapshot of the current sprint window and fiscal quarter.

    Raises:
        InvalidConfiguration: If the effective sprint length is not positive
            or the current sprint window leaves the calendar range.
    """
    today = _as_date(today)
    length = _require_positive_int(
        config.sprint_length_days or default_sprint_length_days,
        field="sprint_length_days",
    )
    anchor = config.first_sprint_start_date

    start = current_sprint_start_date(anchor, length, today=today)
    return TimeWindowSnapshot(
        as_of=today,
        sprint_length_days=length,
        current_sprint=current_sprint_number(anchor, length, today=today),
        current_sprint_start_date=start,
        current_sprint_end_date=_shift(
            start,
            length - 1,
            details={"current_sprint_start_date": start.isoformat()},
        ),
        current_quarter=current_quarter(config.fiscal_year_start_date, today=today),
    )
