# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Dict-backed Unit of Work.

Purpose:
    Give the in-memory profile repository the same commit/rollback semantics
    as the SQLAlchemy unit of work: writes are staged on a copy of the store
    and only the users written in the scope are published on ``commit()``,
    so concurrent scopes touching different users never undo each other.

Layer:
    adapters/uow
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

from taskflow_api.adapters.repositories.in_memory_profile_repository import (
    InMemoryProfileRepository,
)
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.domain.entities.time_config import TimeConfig
from taskflow_api.domain.interfaces.repositories.profile_repository import ProfileRepository


class InMemoryUnitOfWork(UnitOfWork):
    """UnitOfWork over a shared ``user_id -> TimeConfig`` dict."""

    def __init__(self, store: dict[str, TimeConfig] | None = None) -> None:
        self.store: dict[str, TimeConfig] = store if store is not None else {}
        self._staged: dict[str, TimeConfig] | None = None
        self._repo: InMemoryProfileRepository | None = None
        self.commits = 0
        self.rollbacks = 0

    async def __aenter__(self) -> InMemoryUnitOfWork:
        if self._staged is not None:
            raise RuntimeError("UnitOfWork is already active; nested usage is not supported.")
        self._staged = dict(self.store)
        self._repo = InMemoryProfileRepository(self._staged)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None:
        self._staged = None
        self._repo = None
        return None

    async def commit(self) -> None:
        if self._staged is None or self._repo is None:
            raise RuntimeError("Cannot commit: UnitOfWork is not active.")
        self.store.update({user_id: self._staged[user_id] for user_id in self._repo.written})
        self._repo.written.clear()
        self.commits += 1

    async def rollback(self) -> None:
        if self._staged is None:
            return
        self._staged = dict(self.store)
        self._repo = InMemoryProfileRepository(self._staged)
        self.rollbacks += 1

    def get_repository(self, repo_type: type[Any]) -> Any:
        if self._repo is None:
            raise RuntimeError(
                "get_repository() called outside of an active UnitOfWork scope. "
                "Use 'async with uow:' before requesting repositories.",
            )
        if repo_type not in (ProfileRepository, InMemoryProfileRepository):
            raise KeyError(f"No repository registered for type {repo_type!r}.")
        return self._repo
