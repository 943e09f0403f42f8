# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Domain entities and value objects."""
