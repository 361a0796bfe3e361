"""
Team selection state for configuring a knockout tournament.
"""

from enum import Enum
from typing import Iterable, Iterator, List, Sequence, Tuple


DEFAULT_RUN_COUNT = 200
SUGGESTED_MIN_RUNS = 10
SUGGESTED_MAX_RUNS = 5000


class SelectionError(ValueError):
    """Raised when a simulation request fails local validation."""

    def __init__(self, title: str, description: str):
        super().__init__(f"{title}: {description}")
        self.title = title
        self.description = description


class SelectionStatus(str, Enum):
    """Outcome of validating a team selection."""
    OK = "ok"
    TOO_FEW = "too_few"
    NOT_POWER_OF_TWO = "not_power_of_two"

    @property
    def title(self) -> str:
        return _STATUS_MESSAGES[self][0]

    @property
    def description(self) -> str:
        return _STATUS_MESSAGES[self][1]

    def to_error(self) -> SelectionError:
        return SelectionError(self.title, self.description)


_STATUS_MESSAGES = {
    SelectionStatus.OK: ("Ready", "The selection forms a complete knockout bracket."),
    SelectionStatus.TOO_FEW: (
        "Select more teams",
        "You need at least 2 teams for a tournament.",
    ),
    SelectionStatus.NOT_POWER_OF_TWO: (
        "Team count must be a power of 2",
        "Please select 4, 8, 16, 32, ... teams to form a knockout bracket.",
    ),
}


def is_power_of_two(n: int) -> bool:
    """True iff n has exactly one bit set."""
    return n > 0 and (n & (n - 1)) == 0


def validate_team_count(count: int) -> SelectionStatus:
    if count < 2:
        return SelectionStatus.TOO_FEW
    if not is_power_of_two(count):
        return SelectionStatus.NOT_POWER_OF_TWO
    return SelectionStatus.OK


def validate_run_count(n_runs: object) -> int:
    """
    Check that a run count is a positive integer.

    The value is returned unchanged; it is never clamped into the
    suggested range.

    Raises:
        SelectionError: If the value is not a positive integer
    """
    if isinstance(n_runs, bool) or not isinstance(n_runs, int) or n_runs <= 0:
        raise SelectionError(
            "Invalid number of runs",
            "Please use a positive number of simulation runs.",
        )
    return n_runs


def suggest_run_count_range() -> Tuple[int, int]:
    """Range offered by the run-count input. Advisory only."""
    return SUGGESTED_MIN_RUNS, SUGGESTED_MAX_RUNS


class TeamFilter:
    """
    Lazy view over the unselected teams matching a query.

    Each iteration re-reads the selection, so the same view can be
    iterated again after the selection changes.
    """

    def __init__(self, selection: "TeamSelection", query: str):
        self._selection = selection
        self.query = query

    def __iter__(self) -> Iterator[str]:
        needle = self.query.lower()
        for team in self._selection.known_teams:
            if team in self._selection:
                continue
            if needle == "" or needle in team.lower():
                yield team

    def __repr__(self) -> str:
        return f"TeamFilter(query={self.query!r})"


class TeamSelection:
    """Ordered set of teams chosen for a bracket."""

    def __init__(self, known_teams: Iterable[str] = ()):
        self._known: List[str] = list(dict.fromkeys(known_teams))
        self._selected: List[str] = []

    @property
    def known_teams(self) -> Tuple[str, ...]:
        return tuple(self._known)

    @property
    def teams(self) -> Tuple[str, ...]:
        """Selected teams in insertion order."""
        return tuple(self._selected)

    def set_known_teams(self, teams: Iterable[str]) -> None:
        """Replace the team catalogue. The current selection is kept."""
        self._known = list(dict.fromkeys(teams))

    def toggle(self, team: str) -> bool:
        """
        Add the team if absent, remove it if present.

        Returns:
            True if the team is selected after the call
        """
        if team in self._selected:
            self._selected.remove(team)
            return False
        self._selected.append(team)
        return True

    def extend(self, teams: Sequence[str]) -> None:
        """Select several teams at once, skipping ones already selected."""
        for team in teams:
            if team not in self._selected:
                self._selected.append(team)

    def clear(self) -> None:
        self._selected.clear()

    def filter(self, query: str = "") -> TeamFilter:
        """Unselected known teams whose name contains `query`, case-insensitively."""
        return TeamFilter(self, query)

    def validate(self) -> SelectionStatus:
        return validate_team_count(len(self._selected))

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, team: object) -> bool:
        return team in self._selected

    def __repr__(self) -> str:
        return f"TeamSelection({self._selected!r})"
