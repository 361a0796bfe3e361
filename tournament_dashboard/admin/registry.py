"""
Model registry view: list training runs, show the active one, activate runs.

The backend guarantees that at most one run is active. The registry only
mirrors that state and refreshes it after every change.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

from ..client import ActivationResult, ApiError, ModelRun, TournamentApiClient
from ..core.notifications import NotificationBus


logger = logging.getLogger(__name__)

# Shown when no run in the table reports metrics at all
NO_METRICS = "—"
MISSING_METRIC = "-"

ACTION_ACTIVATE = "Activate"
ACTION_ACTIVE = "Active"
ACTION_BLOCKED = "Cannot activate"


class ModelActivationError(Exception):
    """Raised when a run cannot be activated; no request is sent."""

    def __init__(self, message: str, model_run_id: str):
        super().__init__(message)
        self.message = message
        self.model_run_id = model_run_id


@dataclass(frozen=True)
class ModelRunRow:
    """One rendered line of the model runs table."""

    id: str
    created: str
    status: str
    accuracy: str
    log_loss: str
    action: str
    is_active: bool

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "created": self.created,
            "status": self.status,
            "accuracy": self.accuracy,
            "log_loss": self.log_loss,
            "action": self.action,
            "is_active": self.is_active,
        }


def format_timestamp(value: str) -> str:
    """Render an ISO timestamp for display; unparseable values pass through."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.strftime("%Y-%m-%d %H:%M:%S")


def _format_metric(value: Optional[float], any_metrics: bool) -> str:
    if value is None:
        return MISSING_METRIC if any_metrics else NO_METRICS
    return f"{value:.4f}"


class ModelRegistry:
    """State and actions of the model registry section."""

    def __init__(self, client: TournamentApiClient, bus: NotificationBus):
        self.client = client
        self.bus = bus
        self.runs: List[ModelRun] = []
        self.active: Optional[ModelRun] = None
        self.loading = False
        self.error: Optional[str] = None

    @property
    def active_id(self) -> Optional[str]:
        return self.active.id if self.active is not None else None

    async def refresh(self) -> bool:
        """
        Re-fetch the run list and the active model together.

        On failure the previous runs stay displayed and `error` is set.

        Returns:
            True if both reads succeeded
        """
        self.loading = True
        self.error = None
        try:
            # Both reads settle before a failure is reported
            runs, active = await asyncio.gather(
                self.client.list_model_runs(),
                self.client.get_active_model(),
                return_exceptions=True,
            )
            for outcome in (runs, active):
                if isinstance(outcome, BaseException):
                    raise outcome
        except ApiError as e:
            logger.error("Failed to load model runs: %s", e.message)
            self.error = e.message or "Failed to load model runs"
            self.bus.error("Failed to load model runs", e.message)
            return False
        finally:
            self.loading = False

        self.runs = runs
        self.active = active
        return True

    def find(self, model_run_id: str) -> Optional[ModelRun]:
        for run in self.runs:
            if run.id == model_run_id:
                return run
        return None

    def can_activate(self, run: ModelRun) -> bool:
        """Failed runs and the currently active run offer no activation."""
        return not run.is_failed and run.id != self.active_id

    async def activate(self, run: Union[ModelRun, str]) -> ActivationResult:
        """
        Make a run the active model.

        Args:
            run: The run, or its id (looked up in the loaded runs)

        Raises:
            ModelActivationError: If the run is known to have failed
            ApiError: If the backend rejects the activation
        """
        if isinstance(run, str):
            run = self.find(run) or run

        if isinstance(run, ModelRun):
            model_run_id = run.id
            if run.is_failed:
                message = f"Model run {run.id} failed and cannot be activated"
                logger.warning("Refusing to activate failed model run %s", run.id)
                self.bus.error("Activation failed", message)
                raise ModelActivationError(message, run.id)
        else:
            # Unknown locally; the backend performs its own check
            model_run_id = run

        try:
            result = await self.client.activate_model_run(model_run_id)
        except ApiError as e:
            logger.error("Activation of %s failed: %s", model_run_id, e.message)
            self.bus.error("Activation failed", e.message)
            raise

        self.bus.publish("Model activated", f"Active model set to {result.active_model_run_id}.")
        await self.refresh()
        return result

    def rows(self) -> List[ModelRunRow]:
        any_metrics = any(run.metrics for run in self.runs)
        active_id = self.active_id
        rows = []
        for run in self.runs:
            is_active = run.id == active_id
            if is_active:
                action = ACTION_ACTIVE
            elif run.is_failed:
                action = ACTION_BLOCKED
            else:
                action = ACTION_ACTIVATE
            rows.append(ModelRunRow(
                id=run.id,
                created=format_timestamp(run.created_at),
                status=run.status,
                accuracy=_format_metric(run.metric("accuracy"), any_metrics),
                log_loss=_format_metric(run.metric("log_loss"), any_metrics),
                action=action,
                is_active=is_active,
            ))
        return rows
