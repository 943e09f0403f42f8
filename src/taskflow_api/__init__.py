# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""TaskFlow API: sprint and fiscal-quarter time windows for task planning."""

__version__ = "0.1.0"
