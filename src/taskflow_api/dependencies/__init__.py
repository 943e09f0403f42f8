# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""FastAPI dependency providers."""
