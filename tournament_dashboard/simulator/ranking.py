"""
Ranking and display helpers for simulation results.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..client.models import TeamProbability


UNKNOWN = "-"
FAVOURITES_COUNT = 3


def sorted_all(results: Sequence[TeamProbability]) -> List[TeamProbability]:
    """All results by win probability, highest first. Ties keep backend order."""
    # sorted() is stable
    return sorted(results, key=lambda r: r.win_prob, reverse=True)


def top_n(results: Sequence[TeamProbability], n: int) -> List[TeamProbability]:
    """The n most likely winners; always a prefix of sorted_all()."""
    if n <= 0:
        return []
    return sorted_all(results)[:n]


def format_probability(value: Optional[float]) -> str:
    if value is None:
        return UNKNOWN
    return f"{value * 100:.1f}%"


def format_count(value: Optional[int]) -> str:
    if value is None:
        return UNKNOWN
    return str(value)


@dataclass(frozen=True)
class ResultRow:
    """One rendered line of the results table."""

    rank: int
    team: str
    win_prob: str
    final_prob: str
    semi_prob: str
    wins: str
    finals: str
    semis: str

    @classmethod
    def from_probability(cls, rank: int, entry: TeamProbability) -> "ResultRow":
        return cls(
            rank=rank,
            team=entry.team,
            win_prob=format_probability(entry.win_prob),
            final_prob=format_probability(entry.final_prob),
            semi_prob=format_probability(entry.semi_prob),
            wins=format_count(entry.wins),
            finals=format_count(entry.finals),
            semis=format_count(entry.semis),
        )

    def to_dict(self) -> dict:
        return {
            "rank": self.rank,
            "team": self.team,
            "win_prob": self.win_prob,
            "final_prob": self.final_prob,
            "semi_prob": self.semi_prob,
            "wins": self.wins,
            "finals": self.finals,
            "semis": self.semis,
        }


def result_rows(results: Sequence[TeamProbability]) -> List[ResultRow]:
    """Rows for the detailed results table, ranked from 1."""
    return [
        ResultRow.from_probability(rank, entry)
        for rank, entry in enumerate(sorted_all(results), start=1)
    ]
