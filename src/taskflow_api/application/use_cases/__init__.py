# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Application use cases."""
