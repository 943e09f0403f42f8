# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Unit of Work implementations (Adapters Layer)

Purpose:
    Concrete UnitOfWork implementations. Application-layer code depends only
    on the ``UnitOfWork`` protocol from ``taskflow_api.application.uow``.

Exports:
    - SqlAlchemyUnitOfWork: AsyncSession-backed unit of work.
    - InMemoryUnitOfWork: dict-backed unit of work for tests and
      database-less development.
"""

from __future__ import annotations

from .in_memory_uow import InMemoryUnitOfWork
from .sqlalchemy_uow import SqlAlchemyUnitOfWork

__all__ = ["InMemoryUnitOfWork", "SqlAlchemyUnitOfWork"]
