"""
Pydantic models for the simulation backend's JSON payloads.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for backend payloads; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


# ============== Simulation ==============

class SimulationRequest(WireModel):
    """Body of POST /simulate-tournament."""
    teams: List[str]
    n_runs: int


class TeamProbability(WireModel):
    """
    Per-team outcome of a simulation.

    The optional fields are only present when the backend computed raw
    counts; None means "not reported", never zero.
    """
    team: str
    win_prob: float
    final_prob: Optional[float] = None
    semi_prob: Optional[float] = None
    wins: Optional[int] = None
    finals: Optional[int] = None
    semis: Optional[int] = None


class SimulationResponse(WireModel):
    """A simulation result, fresh or loaded by id."""
    simulation_id: str = Field(min_length=1)
    results: List[TeamProbability] = Field(default_factory=list)


# ============== Admin pipeline ==============

class IngestionStatus(WireModel):
    status: str
    files: List[str] = Field(default_factory=list)
    timestamp: str


class ProcessingStatus(WireModel):
    status: str
    records: int
    teams: int
    timestamp: str


class TrainingStatus(WireModel):
    status: str
    model_run_id: str
    model_s3_path: str
    metrics: Dict[str, Any] = Field(default_factory=dict)
    timestamp: str


# ============== Model registry ==============

class ModelRunStatus(str, Enum):
    """Statuses the backend is known to use. The backend owns the full set."""
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"


class ModelRun(WireModel):
    """A registered training run."""
    id: str
    created_at: str
    model_s3_path: str
    status: str
    metrics: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None

    @property
    def is_failed(self) -> bool:
        return self.status.upper() == ModelRunStatus.FAILED.value

    def metric(self, name: str) -> Optional[float]:
        """Return a numeric metric, or None if the run did not report one."""
        if not self.metrics:
            return None
        value = self.metrics.get(name)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)


class ActivationResult(WireModel):
    """Response of POST /admin/model-runs/{id}/activate."""
    status: str
    active_model_run_id: str
