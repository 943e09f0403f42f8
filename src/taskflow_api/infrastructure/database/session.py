# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Process-wide async engine for the profiles database.

Lifecycle:
    * ``init_engine_and_sessionmaker(settings)`` runs in the app lifespan, or
      lazily from ``get_uow`` the first time a request needs the database.
    * ``get_sessionmaker()`` feeds ``SqlAlchemyUnitOfWork``.
    * ``dispose_engine()`` closes the pool on shutdown.

Sessions keep attributes loaded after commit (``expire_on_commit=False``) so
use cases can map ORM rows to domain objects once the transaction is done.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskflow_api.config.settings import Settings
from taskflow_api.infrastructure.logging.logger import get_json_logger

logger: logging.Logger = get_json_logger(__name__)


@dataclass
class _Database:
    engine: AsyncEngine | None = None
    sessionmaker: async_sessionmaker[AsyncSession] | None = None


_db = _Database()


def init_engine_and_sessionmaker(settings: Settings) -> None:
    """Create the engine and sessionmaker once; later calls are no-ops.

    Raises:
        ValueError: If ``settings.database_url`` is empty.
    """
    if not settings.database_url:
        raise ValueError("database_url must be configured")
    if _db.engine is not None:
        return

    engine = create_async_engine(settings.database_url, pool_pre_ping=True)
    _db.engine = engine
    _db.sessionmaker = async_sessionmaker(engine, expire_on_commit=False)
    logger.info(
        "db_engine_initialized",
        extra={
            "url": make_url(settings.database_url).render_as_string(hide_password=True),
            "db_schema": settings.db_schema,
        },
    )


async def dispose_engine() -> None:
    """Close the connection pool and forget the engine."""
    engine, _db.engine, _db.sessionmaker = _db.engine, None, None
    if engine is not None:
        await engine.dispose()
        logger.info("db_engine_disposed")


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """Return the sessionmaker.

    Raises:
        RuntimeError: Before ``init_engine_and_sessionmaker`` has run.
    """
    if _db.sessionmaker is None:
        raise RuntimeError("Database is not initialized; call init_engine_and_sessionmaker first.")
    return _db.sessionmaker
