# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Repository resolution helpers shared by use cases."""

from __future__ import annotations

from typing import cast

from taskflow_api.application.uow import UnitOfWork
from taskflow_api.domain.interfaces.repositories.profile_repository import ProfileRepository


def get_profile_repository(tx: UnitOfWork) -> ProfileRepository:
    """Resolve the profile repository from an active UnitOfWork."""
    return cast(ProfileRepository, tx.get_repository(ProfileRepository))
