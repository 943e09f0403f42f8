# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
SQLAlchemy repository for profile calendar settings.

Purpose:
    Persist and load :class:`TimeConfig` values on the ``profiles`` table.
    Profiles are keyed by the external ``user_id``; the first write creates
    the row.

Layer: adapters / repositories
"""

from __future__ import annotations

from sqlalchemy import select

from taskflow_api.adapters.repositories.base_repository import BaseRepository
from taskflow_api.domain.entities.time_config import TimeConfig
from taskflow_api.infrastructure.database.models.profile import ProfileModel


class SqlAlchemyProfileRepository(BaseRepository[ProfileModel]):
    """Implements ``ProfileRepository`` on top of an ``AsyncSession``."""

    async def _get_model(self, user_id: str) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        return await self.fetch_optional(stmt)

    async def get_time_config(self, user_id: str) -> TimeConfig | None:
        """Return the stored configuration, or ``None`` if the profile does not exist."""
        model = await self._get_model(user_id)
        return None if model is None else _to_entity(model)

    async def upsert_time_config(self, user_id: str, config: TimeConfig) -> TimeConfig:
        """Create or update the profile row for ``user_id``.

        The session is flushed but not committed.
        """
        model = await self._get_model(user_id)
        if model is None:
            model = ProfileModel(user_id=user_id)
            self._session.add(model)

        model.fiscal_year_start_date = config.fiscal_year_start_date
        model.first_sprint_start_date = config.first_sprint_start_date
        model.sprint_length_days = config.sprint_length_days
        model.updated_at = self.utc_now()

        await self._session.flush()
        return _to_entity(model)


def _to_entity(model: ProfileModel) -> TimeConfig:
    return TimeConfig(
        fiscal_year_start_date=model.fiscal_year_start_date,
        first_sprint_start_date=model.first_sprint_start_date,
        sprint_length_days=model.sprint_length_days,
    )
