# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Repository protocols."""
