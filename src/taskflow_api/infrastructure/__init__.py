# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Infrastructure layer: logging, HTTP plumbing, persistence and the clock."""
