# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Clock Port (Application Layer).

Purpose:
    Supply "today" to use cases so that period calculations stay pure and
    tests can pin the date instead of patching the wall clock.

Layer:
    application/interfaces
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Source of the current calendar day."""

    def today(self) -> date:
        """Return the current calendar day."""
        ...
