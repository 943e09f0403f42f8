# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Domain enumerations."""
