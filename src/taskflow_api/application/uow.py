# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Unit of Work port (Application Layer).

Purpose:
    Transaction boundary used by the profile calendar use cases. A unit of
    work hands out repositories bound to one transaction; ``run_in_uow``
    commits when the work succeeds and rolls back when it raises.

Layer:
    application

Notes:
    Implementations live in ``taskflow_api.adapters.uow``:
        * ``SqlAlchemyUnitOfWork`` (one AsyncSession per scope)
        * ``InMemoryUnitOfWork`` (staged copy of a dict store)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Any, Protocol, Self, TypeVar, runtime_checkable

TResult = TypeVar("TResult")


@runtime_checkable
class UnitOfWork(Protocol):
    """Async context manager scoping repositories to one transaction."""

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool | None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    def get_repository(self, repo_type: type[Any]) -> Any:
        """Return the repository registered under ``repo_type`` (e.g. ``ProfileRepository``)."""
        ...


async def run_in_uow(  # noqa: UP047
    uow: UnitOfWork,
    fn: Callable[[UnitOfWork], Awaitable[TResult]],
) -> TResult:
    """Run ``fn`` inside ``uow`` and commit its writes.

    Args:
        uow: Unit of work to open.
        fn: Coroutine function receiving the active unit of work.

    Returns:
        Whatever ``fn`` returns.

    Raises:
        Exception: Anything raised by ``fn``, after the transaction is rolled back.
    """
    async with uow as tx:
        try:
            result = await fn(tx)
        except Exception:
            await tx.rollback()
            raise
        await tx.commit()
        return result
