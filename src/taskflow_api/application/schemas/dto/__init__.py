# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Application-layer DTOs."""
