"""
Simulator API routes: team catalogue, running simulations and loading them by id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..dependencies import get_api_client, get_notification_bus
from ..errors import to_http_exception
from ..schemas import (
    FavouriteOut,
    LocalValidationError,
    LookupNotFound,
    ResultRowOut,
    SimulateRequest,
    SimulationView,
    TeamListResponse,
)
from ...client import ApiError, SimulationResponse, TournamentApiClient
from ...core.notifications import NotificationBus
from ...simulator import (
    FAVOURITES_COUNT,
    LookupState,
    SelectionError,
    SimulationLookup,
    SimulationWorkflow,
    TeamSelection,
    format_probability,
    result_rows,
    share_path,
    top_n,
)


router = APIRouter(tags=["simulations"])


def build_simulation_view(
    simulation: SimulationResponse,
    n_runs: Optional[int] = None
) -> SimulationView:
    """Rank a result set into the favourites card and the results table."""
    favourites = [
        FavouriteOut(
            rank=rank,
            team=entry.team,
            win_prob=entry.win_prob,
            win_pct=format_probability(entry.win_prob),
        )
        for rank, entry in enumerate(top_n(simulation.results, FAVOURITES_COUNT), start=1)
    ]
    rows = [ResultRowOut(**row.to_dict()) for row in result_rows(simulation.results)]

    return SimulationView(
        simulation_id=simulation.simulation_id,
        share_path=share_path(simulation.simulation_id),
        n_runs=n_runs,
        team_count=len(simulation.results),
        favourites=favourites,
        results=rows,
    )


@router.get("/teams", response_model=TeamListResponse)
async def list_teams(
    q: str = "",
    selected: List[str] = Query(default=[]),
    client: TournamentApiClient = Depends(get_api_client),
    bus: NotificationBus = Depends(get_notification_bus)
) -> TeamListResponse:
    """
    List teams that can still be added to the bracket.

    Teams already in `selected` are left out; `q` filters by
    case-insensitive substring.
    """
    selection = TeamSelection()
    selection.extend(selected)
    workflow = SimulationWorkflow(client, bus, selection=selection)

    if not await workflow.load_teams():
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load teams: {workflow.teams_error}"
        )

    teams = list(selection.filter(q))
    return TeamListResponse(
        query=q,
        selected=list(selection.teams),
        teams=teams,
        total=len(teams),
    )


@router.post(
    "/simulate",
    response_model=SimulationView,
    responses={400: {"model": LocalValidationError}}
)
async def run_simulation(
    request: SimulateRequest,
    client: TournamentApiClient = Depends(get_api_client),
    bus: NotificationBus = Depends(get_notification_bus)
) -> SimulationView:
    """
    Run a knockout tournament simulation.

    The team count and run count are checked here first; an invalid
    request never reaches the simulation backend.
    """
    selection = TeamSelection(request.teams)
    selection.extend(request.teams)
    workflow = SimulationWorkflow(client, bus, selection=selection, n_runs=request.n_runs)

    try:
        simulation = await workflow.run()
    except SelectionError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=LocalValidationError(title=e.title, description=e.description).model_dump()
        )
    except ApiError as e:
        raise to_http_exception(e)

    return build_simulation_view(simulation, n_runs=request.n_runs)


@router.get(
    "/simulation/{simulation_id}",
    response_model=SimulationView,
    responses={404: {"model": LookupNotFound}}
)
async def get_simulation(
    simulation_id: str,
    client: TournamentApiClient = Depends(get_api_client)
) -> SimulationView:
    """Load a saved simulation, e.g. from a shared link."""
    outcome = await SimulationLookup(client).fetch(simulation_id)

    if outcome.state is LookupState.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=LookupNotFound(
                simulation_id=outcome.simulation_id,
                message=outcome.message
            ).model_dump()
        )

    if outcome.state is LookupState.ERROR:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=outcome.message
        )

    return build_simulation_view(outcome.simulation)
