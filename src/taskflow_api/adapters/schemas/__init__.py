# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Transport-facing schemas."""
