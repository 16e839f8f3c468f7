"""Entry point for the task manager FastAPI application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import RequestContextMiddleware
from .db import close_document_store, init_document_store
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .schemas.system import RootResponse


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    await init_document_store()
    try:
        yield
    finally:
        await close_document_store()


def create_app(*, manage_document_store: bool = True) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``manage_document_store=False`` skips connecting to MongoDB on startup,
    which lets tests wire their own client or replace the use cases.
    """

    settings = get_settings()
    configure_logging(settings)

    router_prefix = settings.router_prefix
    openapi_url = f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Task and user management API.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
        lifespan=_lifespan if manage_document_store else None,
    )

    application.state.settings = settings

    application.add_middleware(RequestContextMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    application.include_router(api_router, prefix=router_prefix)
    application.include_router(health_router)

    @application.get("/", response_model=RootResponse, summary="Service metadata")
    async def read_root(settings: SettingsDependency) -> RootResponse:
        """Expose minimal service metadata at the root endpoint."""
        return RootResponse(
            name=settings.project_name,
            environment=settings.environment,
            version=settings.version,
            api_prefix=settings.api_prefix,
        )

    register_exception_handlers(application)

    return application


def run() -> None:
    """Console entry point for ``task-manager``."""
    settings: Settings = get_settings()
    uvicorn.run(
        "task_manager.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
