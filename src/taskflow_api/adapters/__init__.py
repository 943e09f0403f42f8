# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Adapters layer: HTTP routers, presenters, schemas, repositories and units of work."""
