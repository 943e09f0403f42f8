# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Due date use cases."""

from __future__ import annotations

from .check_due_date import CheckDueDate

__all__ = ["CheckDueDate"]
