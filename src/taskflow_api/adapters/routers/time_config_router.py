# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""Profile Calendar Router (v1).

Synopsis:
    HTTP surface for a profile's sprint/fiscal calendar:

        GET  /v1/profiles/{user_id}/time-config
        PUT  /v1/profiles/{user_id}/time-config
        GET  /v1/profiles/{user_id}/time-info
        POST /v1/profiles/{user_id}/due-dates/check

Design:
    * Presentation-only: builds DTOs, delegates to use cases, shapes response.
    * Domain errors propagate to the exception handlers registered in
      ``create_app`` and become ErrorEnvelope responses.
    * Success responses carry a strong ETag and X-Request-ID.

Layer:
    adapters/routers
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import Depends, Path, Request, Response, status

from taskflow_api.adapters.presenters.time_config_presenter import TimeConfigPresenter
from taskflow_api.adapters.routers.base_router import BaseRouter
from taskflow_api.adapters.schemas.http.envelopes import SuccessEnvelope
from taskflow_api.adapters.schemas.http.time_config import (
    DueDateCheckRequestHTTP,
    DueDateStatusHTTP,
    TimeConfigHTTP,
    TimeInfoHTTP,
    UpdateTimeConfigRequestHTTP,
)
from taskflow_api.application.schemas.dto.time_config import UpdateTimeConfigRequestDTO
from taskflow_api.application.use_cases.due_dates import CheckDueDate
from taskflow_api.application.use_cases.time_config import (
    GetTimeConfig,
    GetTimeInfo,
    UpdateTimeConfig,
)
from taskflow_api.dependencies.time_config import (
    get_check_due_date_use_case,
    get_get_time_config_use_case,
    get_time_info_use_case,
    get_update_time_config_use_case,
)
from taskflow_api.domain.enums.tasks import DueDateType

router = BaseRouter(version="v1", resource="profiles", tags=["Profiles"])
presenter = TimeConfigPresenter()

UserId = Annotated[str, Path(min_length=1, max_length=255, description="External user id.")]


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@router.get(
    "/{user_id}/time-config",
    response_model=SuccessEnvelope[TimeConfigHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Get a profile's sprint and fiscal calendar",
)
async def get_time_config(
    request: Request,
    response: Response,
    user_id: UserId,
    uc: Annotated[GetTimeConfig, Depends(get_get_time_config_use_case)],
) -> Any:
    """Return the stored calendar with the current sprint window and quarter."""
    dto = await uc.execute(user_id)
    result = presenter.present_time_config(dto=dto, request_id=_request_id(request))
    return BaseRouter.send_success(response, result)


@router.put(
    "/{user_id}/time-config",
    response_model=SuccessEnvelope[TimeConfigHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Create or update a profile's sprint and fiscal calendar",
    description=(
        "Partial update. Provide `first_sprint_start_date`, or the number and start "
        "date of the sprint currently running so that sprint 1 is back-calculated."
    ),
)
async def put_time_config(
    request: Request,
    response: Response,
    user_id: UserId,
    body: UpdateTimeConfigRequestHTTP,
    uc: Annotated[UpdateTimeConfig, Depends(get_update_time_config_use_case)],
) -> Any:
    """Apply a partial calendar update and return the resulting configuration."""
    req = UpdateTimeConfigRequestDTO(**body.model_dump(exclude_unset=True))
    dto = await uc.execute(user_id, req)
    result = presenter.present_time_config(dto=dto, request_id=_request_id(request))
    return BaseRouter.send_success(response, result)


@router.get(
    "/{user_id}/time-info",
    response_model=SuccessEnvelope[TimeInfoHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Get the date, sprint and quarter label for a profile",
)
async def get_time_info(
    request: Request,
    response: Response,
    user_id: UserId,
    uc: Annotated[GetTimeInfo, Depends(get_time_info_use_case)],
) -> Any:
    """Return today's header label for the profile."""
    dto = await uc.execute(user_id)
    result = presenter.present_time_info(dto=dto, request_id=_request_id(request))
    return BaseRouter.send_success(response, result)


@router.post(
    "/{user_id}/due-dates/check",
    response_model=SuccessEnvelope[DueDateStatusHTTP],
    status_code=status.HTTP_200_OK,
    responses=BaseRouter.std_error_responses(),
    summary="Validate a task due date against the profile calendar",
)
async def check_due_date(
    request: Request,
    response: Response,
    user_id: UserId,
    body: DueDateCheckRequestHTTP,
    uc: Annotated[CheckDueDate, Depends(get_check_due_date_use_case)],
) -> Any:
    """Report whether the due date lands in the current sprint, quarter or year."""
    dto = await uc.execute(user_id, DueDateType(body.type), body.value)
    result = presenter.present_due_date_status(dto=dto, request_id=_request_id(request))
    return BaseRouter.send_success(response, result)
