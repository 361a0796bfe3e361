"""
Resolve a stored simulation from a shareable link.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote

from ..client import ApiError, ApiNotFoundError, SimulationResponse, TournamentApiClient


logger = logging.getLogger(__name__)


class LookupState(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class LookupOutcome:
    """Result of resolving a simulation id."""

    state: LookupState
    simulation_id: str
    simulation: Optional[SimulationResponse] = None
    message: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.state is LookupState.FOUND


def share_path(simulation_id: str) -> str:
    """Path of the detail page for a simulation."""
    return f"/simulation/{quote(simulation_id, safe='')}"


class SimulationLookup:
    """
    Loads a simulation by id for the detail view.

    Lookups are plain reads and can be repeated freely.
    """

    def __init__(self, client: TournamentApiClient):
        self.client = client
        self._closed = False

    def close(self) -> None:
        self._closed = True

    async def fetch(self, simulation_id: Optional[str]) -> Optional[LookupOutcome]:
        """
        Look up a simulation.

        Returns:
            The outcome, or None if the lookup was closed before the
            response arrived
        """
        simulation_id = (simulation_id or "").strip()
        if not simulation_id:
            return LookupOutcome(
                state=LookupState.NOT_FOUND,
                simulation_id="",
                message="No simulation ID provided.",
            )

        try:
            simulation = await self.client.get_simulation(simulation_id)
        except ApiNotFoundError as e:
            outcome = LookupOutcome(
                state=LookupState.NOT_FOUND,
                simulation_id=simulation_id,
                message=e.message or "Simulation not found",
            )
        except ApiError as e:
            logger.error("Failed to load simulation %s: %s", simulation_id, e.message)
            outcome = LookupOutcome(
                state=LookupState.ERROR,
                simulation_id=simulation_id,
                message=e.message,
            )
        else:
            outcome = LookupOutcome(
                state=LookupState.FOUND,
                simulation_id=simulation_id,
                simulation=simulation,
            )

        if self._closed:
            return None
        return outcome
