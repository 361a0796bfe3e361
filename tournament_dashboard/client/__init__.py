"""
Client for the remote tournament simulation backend.
"""

from .api import TournamentApiClient, extract_error_message
from .base import ApiError, ApiNotFoundError, ApiResponseError, ApiTransportError
from .models import (
    ActivationResult,
    IngestionStatus,
    ModelRun,
    ModelRunStatus,
    ProcessingStatus,
    SimulationRequest,
    SimulationResponse,
    TeamProbability,
    TrainingStatus,
)

__all__ = [
    "TournamentApiClient",
    "extract_error_message",
    # Errors
    "ApiError",
    "ApiNotFoundError",
    "ApiResponseError",
    "ApiTransportError",
    # Models
    "ActivationResult",
    "IngestionStatus",
    "ModelRun",
    "ModelRunStatus",
    "ProcessingStatus",
    "SimulationRequest",
    "SimulationResponse",
    "TeamProbability",
    "TrainingStatus",
]
