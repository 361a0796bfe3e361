"""
Football Tournament Simulator Dashboard - FastAPI Application

Main entry point for the dashboard API.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .admin import ModelRegistry, PipelineConsole
from .api import admin_router, notifications_router, simulations_router
from .client import TournamentApiClient
from .core.config import Settings, get_settings
from .core.notifications import NotificationBus


logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """
    Build the dashboard application.

    Args:
        settings: Settings to use (defaults to the environment)
        transport: Optional httpx transport for the backend client (used by tests)
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        logging.basicConfig(level=settings.log_level)
        client = TournamentApiClient(
            base_url=settings.api_base_url,
            timeout=settings.api_timeout,
            transport=transport,
        )
        bus = NotificationBus(limit=settings.notification_limit)
        registry = ModelRegistry(client, bus)

        app.state.api_client = client
        app.state.notification_bus = bus
        app.state.model_registry = registry
        app.state.pipeline_console = PipelineConsole(client, bus, registry=registry)
        logger.info("Dashboard using simulation backend at %s", settings.api_base_url)
        yield
        # Shutdown
        await client.aclose()

    app = FastAPI(
        title="Football Tournament Simulator Dashboard",
        description="Configure and run Monte Carlo knockout-tournament simulations and manage the model pipeline.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(simulations_router, prefix="/api")
    app.include_router(admin_router, prefix="/api")
    app.include_router(notifications_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Football Tournament Simulator Dashboard",
            "version": __version__,
            "backend": settings.api_base_url,
            "docs": "/api/docs",
            "health": "/api/health"
        }

    return app


app = create_app()
