# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Task Vocabulary Enums.

Purpose:
    Stable, client-visible values for the kind of due date attached to a task.
    Values are persisted and serialized verbatim.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class DueDateType(str, Enum):
    """Granularity of a task due date."""

    DATE = "date"
    QUARTER = "quarter"
    SPRINT = "sprint"
    YEAR = "year"
