"""FastAPI application entry point.

Run with: uvicorn --factory confsite.main:create_app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from confsite.api.routes import (
    auth_router,
    committees_router,
    countries_router,
    documents_router,
    gallery_router,
    highlights_router,
    posts_router,
    public_router,
    schedule_router,
    secretariat_router,
    site_content_router,
    transfer_router,
)
from confsite.config import Settings, configure_logging, get_settings
from confsite.db import Database
from confsite.services.auth import AuthService
from confsite.services.seed import seed_defaults

logger = logging.getLogger(__name__)

SERVICE_NAME = "Conference Website CMS"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    if settings.seed_on_startup:
        async with database.session_maker() as session:
            await seed_defaults(session)
            await session.commit()

    yield
    await database.dispose()


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application with its own settings, database and auth service."""
    settings = settings or get_settings()
    database = database or Database.from_settings(settings)
    configure_logging(settings)

    app = FastAPI(
        title=SERVICE_NAME,
        description="Content management backend for a conference website",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.auth_service = AuthService(settings)

    # CORS middleware (can't use allow_origins=["*"] with allow_credentials=True)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        auth_router,
        gallery_router,
        secretariat_router,
        highlights_router,
        documents_router,
        schedule_router,
        committees_router,
        countries_router,
        posts_router,
        site_content_router,
        transfer_router,
        public_router,
    ):
        app.include_router(router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "service": "confsite"}

    @app.get("/")
    async def root() -> dict:
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "docs": "/docs",
        }

    logger.info(f"Application created ({settings.app_env})")
    return app
