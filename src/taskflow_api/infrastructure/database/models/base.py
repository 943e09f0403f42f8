# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Declarative Base and persistence mixins.

This module defines:
    - A project-wide SQLAlchemy Declarative Base with deterministic naming
      conventions (for stable Alembic diffs).
    - Mixins for identity (UUIDv4) and audit timestamps (UTC).
"""

from __future__ import annotations

import os
import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import MetaData, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func
from sqlalchemy.types import DateTime

__all__ = [
    "DEFAULT_DB_SCHEMA",
    "Base",
    "IdentityMixin",
    "TimestampMixin",
    "metadata",
]

#: Schema for all tables. Read from the environment so Alembic can import the
#: models without a complete application configuration.
DEFAULT_DB_SCHEMA: str | None = os.getenv("DB_SCHEMA", "public") or None

#: Ref: https://alembic.sqlalchemy.org/en/latest/naming.html
NAMING_CONVENTIONS: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTIONS)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative Base for all ORM models."""

    metadata = metadata

    @declared_attr.directive
    def __table_args__(cls) -> tuple[dict[str, Any]] | tuple[()]:
        if DEFAULT_DB_SCHEMA:
            return ({"schema": DEFAULT_DB_SCHEMA},)
        return ()


class IdentityMixin:
    """UUIDv4 primary key ``id``."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )


class TimestampMixin:
    """Immutable ``created_at`` and mutable ``updated_at`` timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )
