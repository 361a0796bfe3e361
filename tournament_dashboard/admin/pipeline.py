"""
Admin pipeline actions: ingest, process and train.

Each action is independent. An action cannot be started again while its
own request is pending, but different actions may run at the same time.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Dict, Optional, Set, Tuple

from ..client import ApiError, IngestionStatus, ProcessingStatus, TournamentApiClient, TrainingStatus
from ..core.notifications import NotificationBus
from .registry import ModelRegistry


logger = logging.getLogger(__name__)


class PipelineAction(str, Enum):
    INGEST = "ingest"
    PROCESS = "process"
    TRAIN = "train"


# (success title, failure title)
_TITLES: Dict[PipelineAction, Tuple[str, str]] = {
    PipelineAction.INGEST: ("Ingestion complete", "Ingestion failed"),
    PipelineAction.PROCESS: ("Processing complete", "Processing failed"),
    PipelineAction.TRAIN: ("Training complete", "Training failed"),
}


class ActionInProgressError(RuntimeError):
    """Raised when an action is triggered while it is already pending."""

    def __init__(self, action: PipelineAction):
        super().__init__(f"{action.value} is already running")
        self.action = action


class PipelineConsole:
    """State and actions of the data pipeline section."""

    def __init__(
        self,
        client: TournamentApiClient,
        bus: NotificationBus,
        registry: Optional[ModelRegistry] = None
    ):
        self.client = client
        self.bus = bus
        self.registry = registry
        self.last_ingestion: Optional[IngestionStatus] = None
        self.last_processing: Optional[ProcessingStatus] = None
        self.last_training: Optional[TrainingStatus] = None
        self._pending: Set[PipelineAction] = set()

    def is_pending(self, action: PipelineAction) -> bool:
        return PipelineAction(action) in self._pending

    async def _run(self, action: PipelineAction, call: Callable[[], Awaitable]):
        if action in self._pending:
            raise ActionInProgressError(action)

        success_title, failure_title = _TITLES[action]
        self._pending.add(action)
        try:
            return await call()
        except ApiError as e:
            logger.error("%s: %s", failure_title, e.message)
            self.bus.error(failure_title, e.message)
            raise
        finally:
            self._pending.discard(action)

    async def ingest(self) -> IngestionStatus:
        result = await self._run(PipelineAction.INGEST, self.client.ingest_data)
        self.last_ingestion = result
        self.bus.publish(
            _TITLES[PipelineAction.INGEST][0],
            f"Uploaded {len(result.files)} files at {result.timestamp}.",
        )
        return result

    async def process(self) -> ProcessingStatus:
        result = await self._run(PipelineAction.PROCESS, self.client.process_data)
        self.last_processing = result
        self.bus.publish(
            _TITLES[PipelineAction.PROCESS][0],
            f"Processed {result.records} records for {result.teams} teams.",
        )
        return result

    async def train(self) -> TrainingStatus:
        """Train a model, then refresh the registry so the new run shows up."""
        result = await self._run(PipelineAction.TRAIN, self.client.train_model)
        self.last_training = result
        self.bus.publish(
            _TITLES[PipelineAction.TRAIN][0],
            f"New model trained with ID {result.model_run_id}.",
        )
        if self.registry is not None:
            await self.registry.refresh()
        return result

    async def trigger(self, action: PipelineAction):
        """Run an action by name."""
        handlers = {
            PipelineAction.INGEST: self.ingest,
            PipelineAction.PROCESS: self.process,
            PipelineAction.TRAIN: self.train,
        }
        return await handlers[PipelineAction(action)]()
