# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Application ports implemented by infrastructure."""
