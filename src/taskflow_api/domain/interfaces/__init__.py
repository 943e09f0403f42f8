# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Domain ports implemented by adapters."""
