# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
