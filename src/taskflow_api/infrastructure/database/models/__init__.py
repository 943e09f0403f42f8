# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""ORM models. Importing this package registers every table on ``Base.metadata``."""

from taskflow_api.infrastructure.database.models.base import Base, metadata
from taskflow_api.infrastructure.database.models.profile import ProfileModel

__all__ = ["Base", "ProfileModel", "metadata"]
