# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Profile Repository Interface (Domain Layer).

Purpose:
    Persistence port for a user's calendar settings. Implementations live in
    ``taskflow_api.adapters.repositories``.

Layer:
    domain/interfaces/repositories

Notes:
    - Repositories never commit; the Unit of Work owns the transaction.
    - Returned values are domain entities, never ORM rows.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from taskflow_api.domain.entities.time_config import TimeConfig


@runtime_checkable
class ProfileRepository(Protocol):
    """Read/write access to per-user time configuration."""

    async def get_time_config(self, user_id: str) -> TimeConfig | None:
        """Return the stored configuration, or None when the profile does not exist."""
        ...

    async def upsert_time_config(self, user_id: str, config: TimeConfig) -> TimeConfig:
        """Create the profile if needed and store ``config`` verbatim.

        Returns:
            The configuration as persisted.
        """
        ...
