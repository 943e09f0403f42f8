# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""SQLAlchemy Unit of Work.

Purpose:
    Open one ``AsyncSession`` per ``async with`` scope and bind every
    repository handed out in that scope to it, so a use case's reads and
    writes share a single transaction.

Layer:
    adapters/uow
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskflow_api.adapters.repositories.profile_repository import SqlAlchemyProfileRepository
from taskflow_api.application.uow import UnitOfWork
from taskflow_api.domain.interfaces.repositories.profile_repository import ProfileRepository

RepoFactory = Callable[[AsyncSession], Any]

_DEFAULT_FACTORIES: dict[type[Any], RepoFactory] = {
    ProfileRepository: lambda session: SqlAlchemyProfileRepository(session=session),
}


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work over an ``async_sessionmaker``.

    Args:
        session_factory: Builds the session opened on ``__aenter__``.
        repo_factories: Extra or replacement repository factories keyed by
            repository port.

    Notes:
        ``commit`` and ``rollback`` each run at most once per scope. Leaving
        the scope with an exception rolls back if nothing was finalized yet,
        and the session is always closed.
    """

    def __init__(
        self,
        *,
        session_factory: async_sessionmaker[AsyncSession],
        repo_factories: Mapping[type[Any], RepoFactory] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._factories: dict[type[Any], RepoFactory] = {
            **_DEFAULT_FACTORIES,
            **(repo_factories or {}),
        }
        self._session: AsyncSession | None = None
        self._repos: dict[type[Any], Any] = {}
        self._finalized = False

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        if self._session is not None:
            raise RuntimeError("UnitOfWork is already active; nested usage is not supported.")
        self._session = self._session_factory()
        self._finalized = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None:
        session, self._session = self._session, None
        self._repos.clear()
        if session is None:
            return None
        try:
            if exc_type is not None and not self._finalized:
                await session.rollback()
                self._finalized = True
        finally:
            await session.close()
        return None

    def _active(self, action: str) -> AsyncSession:
        if self._session is None:
            raise RuntimeError(
                f"{action} called outside of an active UnitOfWork scope. "
                "Use 'async with uow:' first.",
            )
        return self._session

    async def commit(self) -> None:
        session = self._active("commit()")
        if not self._finalized:
            await session.commit()
            self._finalized = True

    async def rollback(self) -> None:
        if self._session is None or self._finalized:
            return
        await self._session.rollback()
        self._finalized = True

    def get_repository(self, repo_type: type[Any]) -> Any:
        """Return the scope's repository for ``repo_type``, building it on first use.

        Raises:
            RuntimeError: Outside an active scope.
            KeyError: If no factory is registered for ``repo_type``.
        """
        session = self._active("get_repository()")
        if repo_type not in self._repos:
            try:
                factory = self._factories[repo_type]
            except KeyError as exc:
                raise KeyError(f"No repository factory registered for {repo_type!r}.") from exc
            self._repos[repo_type] = factory(session)
        return self._repos[repo_type]
