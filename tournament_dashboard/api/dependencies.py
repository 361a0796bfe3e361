"""
Shared FastAPI dependencies: access to the objects created at startup.
"""

from fastapi import Request

from ..admin import ModelRegistry, PipelineConsole
from ..client import TournamentApiClient
from ..core.notifications import NotificationBus


def get_api_client(request: Request) -> TournamentApiClient:
    return request.app.state.api_client


def get_notification_bus(request: Request) -> NotificationBus:
    return request.app.state.notification_bus


def get_model_registry(request: Request) -> ModelRegistry:
    return request.app.state.model_registry


def get_pipeline_console(request: Request) -> PipelineConsole:
    return request.app.state.pipeline_console
