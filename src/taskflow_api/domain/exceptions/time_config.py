# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Time Configuration Domain Exceptions

Purpose:
    Error conditions raised by the time window calculator, the due-date value
    object and the profile settings use cases. Mapped to HTTP by adapters.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class InvalidConfiguration(DomainError):
    """Sprint calendar configuration cannot produce a meaningful answer."""

    code = "INVALID_CONFIGURATION"
    http_status = 422


class InvalidDueDate(DomainError):
    """Due-date value does not match the rules for its type."""

    code = "INVALID_DUE_DATE"
    http_status = 422


class ProfileNotFound(DomainError):
    """No profile (and therefore no time configuration) exists for the user."""

    code = "PROFILE_NOT_FOUND"
    http_status = 404
