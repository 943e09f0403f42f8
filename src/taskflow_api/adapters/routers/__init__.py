# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""HTTP routers."""
