# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""ORM model for user profiles and their calendar anchors."""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy import CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

from taskflow_api.infrastructure.database.models.base import (
    DEFAULT_DB_SCHEMA,
    Base,
    IdentityMixin,
    TimestampMixin,
)


class ProfileModel(IdentityMixin, TimestampMixin, Base):
    """One row per user; calendar columns are null until first configured."""

    __tablename__ = "profiles"

    @declared_attr.directive
    def __table_args__(cls) -> tuple[Any, ...]:
        constraints: tuple[Any, ...] = (
            CheckConstraint(
                "sprint_length_days IS NULL OR sprint_length_days > 0",
                name="sprint_length_days_positive",
            ),
        )
        if DEFAULT_DB_SCHEMA:
            return (*constraints, {"schema": DEFAULT_DB_SCHEMA})
        return constraints

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    fiscal_year_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    first_sprint_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    sprint_length_days: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<ProfileModel user_id={self.user_id!r}>"
