"""
Async client for the football tournament simulation backend.

Talks JSON over HTTP to the backend that owns ingestion, training,
simulation and persistence. Every call is a single attempt; nothing here
retries.
"""

import json
from typing import Any, List, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .base import ApiError, ApiNotFoundError, ApiResponseError, ApiTransportError
from .models import (
    ActivationResult,
    IngestionStatus,
    ModelRun,
    ProcessingStatus,
    SimulationRequest,
    SimulationResponse,
    TrainingStatus,
)


ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    # Admin and simulation responses must never come from a cache
    "Cache-Control": "no-store",
}


def extract_error_message(response: httpx.Response) -> Tuple[str, Any]:
    """
    Build the user-facing message for a failed response.

    Uses the body's `detail` field when present (strings verbatim, anything
    else JSON-encoded), otherwise the HTTP status line.

    Returns:
        Tuple of (message, raw detail or None)
    """
    message = f"API error: {response.status_code} {response.reason_phrase}".rstrip()
    try:
        data = response.json()
    except ValueError:
        return message, None

    detail = data.get("detail") if isinstance(data, dict) else None
    if not detail:
        return message, None
    if isinstance(detail, str):
        return detail, detail
    return json.dumps(detail), detail


class TournamentApiClient:
    """Typed client for the simulation backend."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend base URL
            timeout: Request timeout in seconds; None waits indefinitely
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "TournamentApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, payload: Any = None) -> Any:
        """
        Send one request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the base URL (e.g. "/teams")
            payload: Optional JSON body

        Returns:
            Decoded JSON, or None for an empty body

        Raises:
            ApiNotFoundError: On HTTP 404
            ApiError: On any other non-2xx status
            ApiTransportError: If the backend is unreachable
        """
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.RequestError as e:
            raise ApiTransportError(f"Network error: {e}")

        if not response.is_success:
            message, detail = extract_error_message(response)
            error_cls = ApiNotFoundError if response.status_code == 404 else ApiError
            raise error_cls(message, status_code=response.status_code, detail=detail)

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError(
                f"Invalid JSON from {path}: {e}", status_code=response.status_code
            )

    @staticmethod
    def _parse(model: Type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ApiResponseError(f"Unexpected response from {path}: {e}")

    # ---- Teams & simulation ----

    async def get_teams(self) -> List[str]:
        """Fetch every team name the backend knows about."""
        data = await self._request("GET", "/teams")
        try:
            return TypeAdapter(List[str]).validate_python(data)
        except ValidationError as e:
            raise ApiResponseError(f"Unexpected response from /teams: {e}")

    async def simulate_tournament(self, request: SimulationRequest) -> SimulationResponse:
        """Run a Monte Carlo tournament simulation."""
        data = await self._request("POST", "/simulate-tournament", request.model_dump())
        return self._parse(SimulationResponse, data, "/simulate-tournament")

    async def get_simulation(self, simulation_id: str) -> SimulationResponse:
        """
        Load a stored simulation.

        Raises:
            ApiNotFoundError: If no simulation has this id
        """
        path = f"/simulation/{quote(simulation_id, safe='')}"
        data = await self._request("GET", path)
        if data is None:
            raise ApiNotFoundError(f"Simulation {simulation_id} not found", status_code=404)
        return self._parse(SimulationResponse, data, path)

    # ---- Admin: pipeline ----

    async def ingest_data(self) -> IngestionStatus:
        data = await self._request("POST", "/admin/ingest-data")
        return self._parse(IngestionStatus, data, "/admin/ingest-data")

    async def process_data(self) -> ProcessingStatus:
        data = await self._request("POST", "/admin/process-data")
        return self._parse(ProcessingStatus, data, "/admin/process-data")

    async def train_model(self) -> TrainingStatus:
        data = await self._request("POST", "/admin/train-model")
        return self._parse(TrainingStatus, data, "/admin/train-model")

    # ---- Admin: model registry ----

    async def list_model_runs(self) -> List[ModelRun]:
        data = await self._request("GET", "/admin/model-runs")
        try:
            return TypeAdapter(List[ModelRun]).validate_python(data or [])
        except ValidationError as e:
            raise ApiResponseError(f"Unexpected response from /admin/model-runs: {e}")

    async def get_active_model(self) -> Optional[ModelRun]:
        """Return the active model run, or None when no run is active."""
        data = await self._request("GET", "/admin/model/active")
        if not data:
            return None
        return self._parse(ModelRun, data, "/admin/model/active")

    async def activate_model_run(self, model_run_id: str) -> ActivationResult:
        path = f"/admin/model-runs/{quote(model_run_id, safe='')}/activate"
        data = await self._request("POST", path)
        return self._parse(ActivationResult, data, path)
