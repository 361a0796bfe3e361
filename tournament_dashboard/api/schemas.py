"""
Pydantic schemas for the dashboard's request/response payloads.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..client.models import ModelRun
from ..simulator.selection import DEFAULT_RUN_COUNT


# ============== Simulator Schemas ==============

class TeamListResponse(BaseModel):
    """Teams available for selection."""
    query: str
    selected: List[str]
    teams: List[str]
    total: int


class SimulateRequest(BaseModel):
    """Run a tournament simulation. Values are validated, never adjusted."""
    teams: List[str] = Field(default_factory=list)
    # Any: lax int coercion would turn true or "100" into a valid count
    n_runs: Any = DEFAULT_RUN_COUNT


class FavouriteOut(BaseModel):
    """A top-ranked team."""
    rank: int
    team: str
    win_prob: float
    win_pct: str


class ResultRowOut(BaseModel):
    """A results table row. Unreported values are shown as '-'."""
    rank: int
    team: str
    win_prob: str
    final_prob: str
    semi_prob: str
    wins: str
    finals: str
    semis: str


class SimulationView(BaseModel):
    """A simulation result ready for display."""
    simulation_id: str
    share_path: str
    n_runs: Optional[int] = None
    team_count: int
    favourites: List[FavouriteOut]
    results: List[ResultRowOut]


class LocalValidationError(BaseModel):
    """Detail of a request rejected before reaching the backend."""
    title: str
    description: str


class LookupNotFound(BaseModel):
    """Detail of a simulation lookup that found nothing."""
    state: str = "not_found"
    simulation_id: str
    message: Optional[str] = None


# ============== Admin Schemas ==============

class ModelRunRowOut(BaseModel):
    id: str
    created: str
    status: str
    accuracy: str
    log_loss: str
    action: str
    is_active: bool


class ModelRegistryResponse(BaseModel):
    """Model runs plus the active model (None when no run is active)."""
    runs: List[ModelRunRowOut]
    active: Optional[ModelRun] = None
    error: Optional[str] = None


class PipelineStatusResponse(BaseModel):
    """Which pipeline actions are currently running."""
    ingest: bool
    process: bool
    train: bool


# ============== Notification Schemas ==============

class NotificationOut(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    variant: str
    created_at: str


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None
