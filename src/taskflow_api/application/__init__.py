# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Application layer: use cases, DTOs and ports."""
