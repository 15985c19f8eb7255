"""FastAPI application setup."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..app import Application
from .routes import (
    create_accounts_router,
    create_control_router,
    create_conversations_router,
    create_observability_router,
    create_workflow_router,
)


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    The lifespan starts and stops the given (or global) Application.
    """
    application = application or get_app()

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI):
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Allzap API",
        description="Multi-account conversations and sales pipeline",
        version="0.1.0",
        lifespan=lifespan,
    )

    origins = os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:5174"
    )  # Vite default
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.include_router(create_accounts_router(application))
    fastapi_app.include_router(create_conversations_router(application))
    fastapi_app.include_router(create_workflow_router(application))
    fastapi_app.include_router(create_control_router(application))
    fastapi_app.include_router(create_observability_router(application))

    return fastapi_app
