# Copyright (c) TaskFlow.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers and routers.
    Provides an application factory (``create_app``) and a module-level app
    (``app``) for ASGI servers.

Design:
    * Bootstrap only (no business logic).
    * Lifespan initializes the database engine when ``DATABASE_URL`` is set
      and disposes it on shutdown.
    * Root JSON logging configured at import time.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response

from taskflow_api import __version__
from taskflow_api.adapters.routers.api_router import router as api_router
from taskflow_api.config.settings import Settings, get_settings
from taskflow_api.domain.exceptions import DomainError
from taskflow_api.infrastructure.database.session import (
    dispose_engine,
    init_engine_and_sessionmaker,
)
from taskflow_api.infrastructure.http.errors import (
    handle_domain_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from taskflow_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from taskflow_api.infrastructure.middleware.access_log import AccessLogMiddleware
from taskflow_api.infrastructure.middleware.correlation import CorrelationMiddleware
from taskflow_api.infrastructure.middleware.metrics import PromMetricsMiddleware

configure_root_logging()
logger = get_json_logger(__name__)


def _stable_operation_id(route: APIRoute) -> str:
    """Deterministic operationId, e.g. ``get__v1_profiles_user_id_time-config``."""
    methods = ",".join(sorted(route.methods or []))
    path = route.path_format.replace("/", "_").replace("{", "").replace("}", "")
    return f"{methods.lower()}_{path.lower()}"


@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and tear down the database engine, when one is configured."""
    settings = get_settings()
    app.state.settings = settings
    if settings.database_url:
        init_engine_and_sessionmaker(settings)
    try:
        yield
    finally:
        await dispose_engine()


def _attach_middlewares(app: FastAPI, settings: Settings) -> None:
    """Attach middleware. Starlette runs the last added first.

    Request order: CORS, CorrelationMiddleware, PromMetricsMiddleware,
    AccessLogMiddleware, then the route.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(PromMetricsMiddleware)
    app.add_middleware(CorrelationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins or ["*"],
        allow_credentials=bool(settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["ETag", "X-Request-ID", "x-trace-id"],
    )


def _patch_exception_handlers(app: FastAPI) -> None:
    """Replace the default exception handlers with envelope-producing ones."""

    async def _domain_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, DomainError):
            raise exc
        return await handle_domain_error(request, exc)

    async def _http_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, StarletteHTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, handle_unhandled_exception)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings: Settings = get_settings()
    configure_root_logging(settings.log_level)

    app = FastAPI(
        title="TaskFlow API",
        version=__version__,
        description="Sprint and fiscal-quarter calendar service for TaskFlow.",
        lifespan=runtime_lifespan,
        generate_unique_id_function=_stable_operation_id,
        docs_url=settings.docs_url,
        openapi_url=settings.openapi_url,
        redoc_url=None,
    )

    _patch_exception_handlers(app)
    _attach_middlewares(app, settings)
    app.include_router(api_router)

    logger.info(
        "service_startup",
        extra={
            "service": settings.service_name,
            "env": settings.environment.value,
            "version": __version__,
        },
    )
    return app


app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "taskflow_api.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )
