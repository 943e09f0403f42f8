# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Process-local profile repository used when no database is configured."""

from __future__ import annotations

from taskflow_api.domain.entities.time_config import TimeConfig


class InMemoryProfileRepository:
    """Implements ``ProfileRepository`` over a plain dict.

    ``TimeConfig`` is immutable, so stored values are shared safely.
    ``written`` records the user ids upserted through this repository.
    """

    def __init__(self, store: dict[str, TimeConfig] | None = None) -> None:
        self._store: dict[str, TimeConfig] = store if store is not None else {}
        self.written: set[str] = set()

    async def get_time_config(self, user_id: str) -> TimeConfig | None:
        return self._store.get(user_id)

    async def upsert_time_config(self, user_id: str, config: TimeConfig) -> TimeConfig:
        self._store[user_id] = config
        self.written.add(user_id)
        return config
