# migrations/versions/20261017_0001_profiles.py
# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Create the profiles table holding each user's sprint/fiscal calendar."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

from taskflow_api.infrastructure.database.models.base import DEFAULT_DB_SCHEMA

revision = "20261017_0001_profiles"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    schema = DEFAULT_DB_SCHEMA

    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("fiscal_year_start_date", sa.Date(), nullable=True),
        sa.Column("first_sprint_start_date", sa.Date(), nullable=True),
        sa.Column("sprint_length_days", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_profiles"),
        sa.UniqueConstraint("user_id", name="uq_profiles_user_id"),
        sa.CheckConstraint(
            "sprint_length_days IS NULL OR sprint_length_days > 0",
            name="ck_profiles_sprint_length_days_positive",
        ),
        schema=schema,
    )


def downgrade() -> None:
    schema = DEFAULT_DB_SCHEMA
    op.drop_table("profiles", schema=schema)
