# migrations/env.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Alembic environment for the TaskFlow profiles schema.

Runs the revisions in ``migrations/versions`` offline (``--sql``) or online
through an async engine.

Safety:
    - ``ENVIRONMENT`` must be set explicitly; there is no default target.
    - Each environment may only migrate its own database name.
    - The URL is only ever logged with the password masked.

Environment variables:
    ENVIRONMENT       test | development | production (required).
    DATABASE_URL      Async SQLAlchemy URL; falls back to ``sqlalchemy.url``.
    DB_SCHEMA         Schema holding ``profiles`` and the version table.
    ECHO_SQL          "1" echoes SQL during online runs.
    ALEMBIC_SHOW_URL  "1" logs the masked URL (same as ``-x show_url=1``).

Usage:
    ENVIRONMENT=test alembic upgrade head
    ENVIRONMENT=test alembic upgrade head --sql
"""

from __future__ import annotations

import asyncio
import logging
import logging.config
import os
from pathlib import Path
from typing import NamedTuple
from urllib.parse import urlparse, urlunparse

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from taskflow_api.infrastructure.database.models import metadata as target_metadata

config = context.config
if config.config_file_name is not None:
    logging.config.fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

# Database name each ENVIRONMENT is allowed to migrate.
_ALLOWED_DATABASES: dict[str, str] = {
    "test": "taskflow_test",
    "development": "taskflow",
    "production": "taskflow",
}


class _Target(NamedTuple):
    environment: str
    url: str
    schema: str | None


def _load_dotenv_files() -> None:
    """Load ``.env.<ENVIRONMENT>`` then ``.env``; exported variables always win."""
    root = Path(__file__).resolve().parents[1]
    environment = (os.getenv("ENVIRONMENT") or "").strip().lower()
    for name in (f".env.{environment}" if environment else None, ".env"):
        if name and (root / name).exists():
            load_dotenv(root / name, override=False)


def _mask(url: str) -> str:
    parts = urlparse(url)
    auth = f"{parts.username}:****@" if parts.username else ""
    port = f":{parts.port}" if parts.port else ""
    return urlunparse((parts.scheme, f"{auth}{parts.hostname or ''}{port}", parts.path, "", "", ""))


def _resolve_target() -> _Target:
    """Return the guarded migration target.

    Raises:
        RuntimeError: If ENVIRONMENT is missing or unknown, no URL is
            configured, or the URL points at another environment's database.
    """
    environment = (os.getenv("ENVIRONMENT") or "").strip().lower()
    if not environment:
        raise RuntimeError("ENVIRONMENT must be set to run migrations (e.g. ENVIRONMENT=test).")
    expected = _ALLOWED_DATABASES.get(environment)
    if expected is None:
        raise RuntimeError(
            f"Unsupported ENVIRONMENT={environment!r}; expected one of {sorted(_ALLOWED_DATABASES)}."
        )

    url = os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url")
    if not url:
        raise RuntimeError("No database configured (DATABASE_URL or sqlalchemy.url).")

    database = urlparse(url).path.lstrip("/")
    if database != expected:
        raise RuntimeError(
            f"ENVIRONMENT={environment!r} may only migrate {expected!r}, "
            f"got {database!r} ({_mask(url)})."
        )

    if (
        context.get_x_argument(as_dictionary=True).get("show_url") == "1"
        or os.getenv("ALEMBIC_SHOW_URL") == "1"
    ):
        logger.info("Migrating %s (%s)", _mask(url), environment)

    schema = os.getenv("DB_SCHEMA", "public") or None
    return _Target(environment=environment, url=url, schema=schema)


def _configure(target: _Target, **kwargs: object) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        include_schemas=True,
        version_table_schema=target.schema,
        **kwargs,
    )


def run_migrations_offline(target: _Target) -> None:
    """Emit the migration SQL without connecting."""
    _configure(
        target,
        url=target.url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_sync(connection: Connection, target: _Target) -> None:
    _configure(target, connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online(target: _Target) -> None:
    """Apply migrations over a short-lived async engine."""
    engine = create_async_engine(
        target.url,
        echo=os.getenv("ECHO_SQL") == "1",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_sync, target)
    finally:
        await engine.dispose()


_load_dotenv_files()
_target = _resolve_target()

if context.is_offline_mode():
    run_migrations_offline(_target)
else:
    asyncio.run(run_migrations_online(_target))
