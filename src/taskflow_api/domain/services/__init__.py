# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Pure domain services."""
