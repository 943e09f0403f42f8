# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Due Date Value Object (Domain Layer).

Purpose:
    A task due date expressed at one of four granularities: a calendar date,
    a sprint number, a fiscal quarter, or a year.

Layer:
    domain/entities

Notes:
    - Stored values are strings (ISO date or decimal integer); ``parse`` and
      ``to_storage`` convert between the stored and typed forms.
    - Year values may reach at most ``MAX_YEARS_BACK`` years into the past.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

from taskflow_api.domain.entities.time_config import TimeWindowSnapshot
from taskflow_api.domain.enums.tasks import DueDateType
from taskflow_api.domain.exceptions import InvalidDueDate

MAX_YEARS_BACK = 10

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True, slots=True)
class DueDate:
    """Typed due date.

    Args:
        kind: Granularity of the due date.
        value: ``date`` for ``DueDateType.DATE``; a positive ``int`` otherwise.

    Raises:
        InvalidDueDate: If the value does not match the rules for ``kind``.
    """

    kind: DueDateType
    value: date | int

    def __post_init__(self) -> None:
        if self.kind is DueDateType.DATE:
            if not isinstance(self.value, date):
                raise InvalidDueDate(
                    "date due dates require a calendar date",
                    details={"type": self.kind.value, "value": str(self.value)},
                )
            return

        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidDueDate(
                f"{self.kind.value} due dates require an integer value",
                details={"type": self.kind.value, "value": str(self.value)},
            )
        if self.kind is DueDateType.QUARTER and not 1 <= self.value <= 4:
            raise InvalidDueDate(
                "quarter must be between 1 and 4",
                details={"type": self.kind.value, "value": self.value},
            )
        if self.kind in (DueDateType.SPRINT, DueDateType.YEAR) and self.value < 1:
            raise InvalidDueDate(
                f"{self.kind.value} must be a positive integer",
                details={"type": self.kind.value, "value": self.value},
            )

    @classmethod
    def parse(cls, kind: DueDateType, raw: str | int | date, *, today: date) -> DueDate:
        """Build a due date from its stored or submitted representation.

        Args:
            kind: Granularity of the due date.
            raw: ISO date string / ``date`` for dates, integer or decimal
                string for the other kinds.
            today: Reference day for the year lower bound.

        Returns:
            A validated ``DueDate``.

        Raises:
            InvalidDueDate: If ``raw`` cannot be parsed or violates the rules.
        """
        value: date | int
        try:
            if kind is DueDateType.DATE:
                value = _parse_calendar_date(raw)
            elif isinstance(raw, date):
                raise ValueError("calendar date given for a numeric due date")
            else:
                value = int(str(raw).strip()) if isinstance(raw, str) else raw
        except ValueError as exc:
            raise InvalidDueDate(
                f"cannot parse {kind.value} due date",
                details={"type": kind.value, "value": str(raw)},
            ) from exc

        due = cls(kind=kind, value=value)
        if kind is DueDateType.YEAR and isinstance(value, int):
            earliest = today.year - MAX_YEARS_BACK
            if value < earliest:
                raise InvalidDueDate(
                    f"year must be {earliest} or later",
                    details={"type": kind.value, "value": value, "earliest": earliest},
                )
        return due

    def to_storage(self) -> str:
        """Return the string form persisted alongside the task."""
        if isinstance(self.value, date):
            return self.value.isoformat()
        return str(self.value)

    def falls_in_current_period(self, snapshot: TimeWindowSnapshot) -> bool:
        """Return True when the due date lands in the period containing ``snapshot.as_of``.

        Dates are compared against the current sprint window; sprint, quarter
        and year values against the matching snapshot counter.
        """
        if self.kind is DueDateType.DATE:
            return isinstance(self.value, date) and snapshot.contains(self.value)
        if self.kind is DueDateType.SPRINT:
            return self.value == snapshot.current_sprint
        if self.kind is DueDateType.QUARTER:
            return self.value == snapshot.current_quarter
        return self.value == snapshot.as_of.year


def _parse_calendar_date(raw: str | int | date) -> date:
    """Parse a ``YYYY-MM-DD`` string; timestamps and trailing text are rejected."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str) or not _ISO_DATE_RE.fullmatch(raw.strip()):
        raise ValueError("calendar date must be formatted as YYYY-MM-DD")
    return date.fromisoformat(raw.strip())
