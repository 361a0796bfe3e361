"""
Simulation configuration workflow.

Holds the state of one simulator view: the team catalogue, the current
selection, the requested run count and the latest result. Local
validation happens before any request is made; backend failures leave the
previous result in place.
"""

import logging
from typing import List, Optional

from ..client import ApiError, ApiResponseError, SimulationRequest, SimulationResponse, TeamProbability, TournamentApiClient
from ..core.notifications import NotificationBus
from .ranking import FAVOURITES_COUNT, ResultRow, result_rows, top_n
from .selection import DEFAULT_RUN_COUNT, SelectionError, SelectionStatus, TeamSelection, validate_run_count


logger = logging.getLogger(__name__)


class SimulationInProgressError(RuntimeError):
    """Raised when a run is started while another is still pending."""
    pass


def check_result(request: SimulationRequest, result: SimulationResponse) -> None:
    """
    Reject a result that does not cover exactly the submitted teams.

    Raises:
        ApiResponseError: If a team is missing, unexpected or repeated
    """
    names = [r.team for r in result.results]
    if len(names) != len(set(names)):
        raise ApiResponseError("Simulation result lists a team more than once")
    if set(names) != set(request.teams):
        raise ApiResponseError("Simulation result does not match the selected teams")


class SimulationWorkflow:
    """State and actions of the tournament simulator view."""

    def __init__(
        self,
        client: TournamentApiClient,
        bus: NotificationBus,
        selection: Optional[TeamSelection] = None,
        n_runs: int = DEFAULT_RUN_COUNT
    ):
        self.client = client
        self.bus = bus
        self.selection = selection if selection is not None else TeamSelection()
        self.n_runs = n_runs
        self.simulation: Optional[SimulationResponse] = None
        self.pending = False
        self.teams_loading = False
        self.teams_error: Optional[str] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Mark the view as gone; responses that arrive later are dropped."""
        self._closed = True

    async def load_teams(self) -> bool:
        """
        Fetch the team catalogue into the selection.

        Returns:
            True if the catalogue was loaded and applied
        """
        self.teams_loading = True
        self.teams_error = None
        try:
            teams = await self.client.get_teams()
        except ApiError as e:
            logger.error("Failed to load teams: %s", e.message)
            if self._closed:
                return False
            self.teams_error = e.message or "Failed to load teams"
            self.bus.error("Failed to load teams", e.message)
            return False
        finally:
            self.teams_loading = False

        if self._closed:
            return False
        self.selection.set_known_teams(teams)
        return True

    def toggle(self, team: str) -> bool:
        return self.selection.toggle(team)

    def check(self) -> None:
        """
        Validate the selection and run count without touching the network.

        Raises:
            SelectionError: With a user-facing title and description
        """
        status = self.selection.validate()
        if status is not SelectionStatus.OK:
            raise status.to_error()
        validate_run_count(self.n_runs)

    async def run(self) -> Optional[SimulationResponse]:
        """
        Submit the current configuration as one new simulation.

        Returns:
            The new result, or None if the view was closed while waiting

        Raises:
            SelectionError: If local validation fails (no request is sent)
            SimulationInProgressError: If a run is already pending
            ApiError: If the backend rejects or cannot serve the request
        """
        try:
            self.check()
        except SelectionError as e:
            self.bus.error(e.title, e.description)
            raise

        if self.pending:
            raise SimulationInProgressError("A simulation is already running")

        request = SimulationRequest(teams=list(self.selection.teams), n_runs=self.n_runs)
        self.pending = True
        try:
            result = await self.client.simulate_tournament(request)
            check_result(request, result)
        except ApiError as e:
            logger.error("Simulation failed: %s", e.message)
            if not self._closed:
                self.bus.error("Simulation failed", e.message)
            raise
        finally:
            self.pending = False

        if self._closed:
            logger.debug("Discarding simulation %s for closed view", result.simulation_id)
            return None

        self.simulation = result
        self.bus.publish(
            "Simulation complete",
            f"Simulation {result.simulation_id} finished with {request.n_runs} runs.",
        )
        return result

    def reset(self) -> None:
        """Clear the selection and the displayed result."""
        self.selection.clear()
        self.simulation = None

    @property
    def favourites(self) -> List[TeamProbability]:
        if self.simulation is None:
            return []
        return top_n(self.simulation.results, FAVOURITES_COUNT)

    @property
    def table(self) -> List[ResultRow]:
        if self.simulation is None:
            return []
        return result_rows(self.simulation.results)
