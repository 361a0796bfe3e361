"""
Tests for result ranking and display formatting.
"""

from tournament_dashboard.client import TeamProbability
from tournament_dashboard.simulator import (
    UNKNOWN,
    format_count,
    format_probability,
    result_rows,
    sorted_all,
    top_n,
)


def make_results(*pairs):
    return [TeamProbability(team=team, win_prob=p) for team, p in pairs]


class TestSorting:
    """Tests for sorted_all and top_n."""

    def test_descending_by_win_prob(self):
        """Test highest probability first."""
        results = make_results(("A", 0.1), ("B", 0.5), ("C", 0.4))
        assert [r.team for r in sorted_all(results)] == ["B", "C", "A"]

    def test_ties_keep_backend_order(self):
        """Test that the sort is stable."""
        results = make_results(("A", 0.25), ("B", 0.25), ("C", 0.5), ("D", 0.25))
        assert [r.team for r in sorted_all(results)] == ["C", "A", "B", "D"]

    def test_top_n_is_prefix_of_sorted_all(self):
        """Test that top_n agrees with the full ordering for every n."""
        results = make_results(("A", 0.2), ("B", 0.2), ("C", 0.3), ("D", 0.1), ("E", 0.2))
        full = sorted_all(results)
        for n in range(len(results) + 2):
            assert top_n(results, n) == full[:n]

    def test_top_n_non_positive(self):
        """Test that n <= 0 gives nothing."""
        results = make_results(("A", 0.5), ("B", 0.5))
        assert top_n(results, 0) == []
        assert top_n(results, -1) == []

    def test_input_not_mutated(self):
        """Test that ranking leaves the original result order alone."""
        results = make_results(("A", 0.1), ("B", 0.9))
        sorted_all(results)
        assert [r.team for r in results] == ["A", "B"]

    def test_deterministic_for_identical_input(self):
        """Test that repeated ranking gives identical output."""
        results = make_results(*[(f"T{i}", 0.125) for i in range(8)])
        assert sorted_all(results) == sorted_all(list(results))


class TestFormatting:
    """Tests for placeholders and number formatting."""

    def test_probability(self):
        """Test percentage formatting."""
        assert format_probability(0.4567) == "45.7%"
        assert format_probability(0.0) == "0.0%"
        assert format_probability(None) == UNKNOWN

    def test_count(self):
        """Test count formatting keeps zero distinct from unknown."""
        assert format_count(0) == "0"
        assert format_count(None) == UNKNOWN
        assert UNKNOWN != "0"

    def test_win_prob_only_renders_unknown_markers(self):
        """Test that optional fields missing from the backend are shown as unknown."""
        rows = result_rows([TeamProbability(team="Brazil", win_prob=0.5)])
        row = rows[0]
        assert row.win_prob == "50.0%"
        for value in (row.final_prob, row.semi_prob, row.wins, row.finals, row.semis):
            assert value == UNKNOWN

    def test_real_zero_renders_as_zero(self):
        """Test that reported zero counts are not mistaken for unknown."""
        entry = TeamProbability(team="Spain", win_prob=0.0, final_prob=0.0, semi_prob=0.1,
                                wins=0, finals=0, semis=10)
        row = result_rows([entry])[0]
        assert row.final_prob == "0.0%"
        assert row.wins == "0"
        assert row.semis == "10"

    def test_rows_are_ranked(self):
        """Test rank numbering follows the sorted order."""
        rows = result_rows(make_results(("A", 0.1), ("B", 0.6), ("C", 0.3)))
        assert [(r.rank, r.team) for r in rows] == [(1, "B"), (2, "C"), (3, "A")]
        assert rows[0].to_dict()["team"] == "B"
