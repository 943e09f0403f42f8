# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Presenter: profile calendar DTOs to HTTP envelopes.

Purpose:
    Map application-layer DTOs into canonical HTTP schemas wrapped in
    ``SuccessEnvelope``:

        * SuccessEnvelope[TimeConfigHTTP]
        * SuccessEnvelope[TimeInfoHTTP]
        * SuccessEnvelope[DueDateStatusHTTP]

Layer:
    adapters/presenters
"""

from __future__ import annotations

from typing import Any

from taskflow_api.adapters.presenters.base_presenter import BasePresenter, PresentResult
from taskflow_api.adapters.schemas.http.envelopes import SuccessEnvelope
from taskflow_api.adapters.schemas.http.time_config import (
    DueDateStatusHTTP,
    TimeConfigHTTP,
    TimeInfoHTTP,
)
from taskflow_api.application.schemas.dto.time_config import (
    DueDateStatusDTO,
    TimeConfigDTO,
    TimeInfoDTO,
)


class TimeConfigPresenter(BasePresenter):
    """Presenter for the ``/v1/profiles/{user_id}`` resources."""

    def present_time_config(
        self,
        *,
        dto: TimeConfigDTO,
        request_id: str | None = None,
    ) -> PresentResult[SuccessEnvelope[Any]]:
        payload = TimeConfigHTTP.model_validate(dto.model_dump())
        return self.present_success(data=payload, request_id=request_id)

    def present_time_info(
        self,
        *,
        dto: TimeInfoDTO,
        request_id: str | None = None,
    ) -> PresentResult[SuccessEnvelope[Any]]:
        payload = TimeInfoHTTP.model_validate(dto.model_dump())
        return self.present_success(data=payload, request_id=request_id)

    def present_due_date_status(
        self,
        *,
        dto: DueDateStatusDTO,
        request_id: str | None = None,
    ) -> PresentResult[SuccessEnvelope[Any]]:
        payload = DueDateStatusHTTP.model_validate(dto.model_dump())
        return self.present_success(data=payload, request_id=request_id)
