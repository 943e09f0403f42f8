# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Presenters: application DTOs to HTTP envelopes."""
