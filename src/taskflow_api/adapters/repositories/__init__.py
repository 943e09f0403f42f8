# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Repository implementations of the domain repository protocols."""

from __future__ import annotations

from .in_memory_profile_repository import InMemoryProfileRepository
from .profile_repository import SqlAlchemyProfileRepository

__all__ = ["InMemoryProfileRepository", "SqlAlchemyProfileRepository"]
