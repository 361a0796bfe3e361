"""
Tournament simulator view state: team selection, invocation, ranking and lookup.
"""

from .selection import (
    TeamSelection,
    TeamFilter,
    SelectionStatus,
    SelectionError,
    is_power_of_two,
    validate_team_count,
    validate_run_count,
    suggest_run_count_range,
    DEFAULT_RUN_COUNT,
)
from .ranking import UNKNOWN, FAVOURITES_COUNT, ResultRow, sorted_all, top_n, result_rows, format_probability, format_count
from .workflow import SimulationWorkflow, SimulationInProgressError
from .lookup import SimulationLookup, LookupOutcome, LookupState, share_path

__all__ = [
    # Selection
    "TeamSelection",
    "TeamFilter",
    "SelectionStatus",
    "SelectionError",
    "is_power_of_two",
    "validate_team_count",
    "validate_run_count",
    "suggest_run_count_range",
    "DEFAULT_RUN_COUNT",
    # Ranking
    "UNKNOWN",
    "FAVOURITES_COUNT",
    "ResultRow",
    "sorted_all",
    "top_n",
    "result_rows",
    "format_probability",
    "format_count",
    # Invocation
    "SimulationWorkflow",
    "SimulationInProgressError",
    # Lookup
    "SimulationLookup",
    "LookupOutcome",
    "LookupState",
    "share_path",
]
