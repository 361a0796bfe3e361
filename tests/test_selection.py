"""
Tests for team selection state and local validation.
"""

import pytest

from tournament_dashboard.simulator import (
    SelectionError,
    SelectionStatus,
    TeamSelection,
    is_power_of_two,
    suggest_run_count_range,
    validate_run_count,
    validate_team_count,
)

from conftest import TEAMS


@pytest.fixture
def selection():
    return TeamSelection(TEAMS)


class TestPowerOfTwo:
    """Tests for bracket-size validation."""

    def test_powers_of_two(self):
        """Test exact powers of two."""
        assert all(is_power_of_two(2 ** k) for k in range(12))

    def test_non_powers(self):
        """Test values with more than one bit set, and non-positive values."""
        for n in (0, -2, 3, 5, 6, 7, 12, 24, 100):
            assert not is_power_of_two(n)

    def test_validate_matches_bit_rule(self):
        """Test that OK holds exactly for counts >= 2 with one bit set."""
        for count in range(1, 70):
            expected_ok = count >= 2 and (count & (count - 1)) == 0
            assert (validate_team_count(count) is SelectionStatus.OK) == expected_ok

    def test_one_team_is_too_few(self):
        """Test that a single team (a power of two) is still too few."""
        assert validate_team_count(1) is SelectionStatus.TOO_FEW
        assert validate_team_count(0) is SelectionStatus.TOO_FEW

    def test_status_messages(self):
        """Test the user-facing text attached to each status."""
        assert SelectionStatus.TOO_FEW.title == "Select more teams"
        assert "power of 2" in SelectionStatus.NOT_POWER_OF_TWO.title
        error = SelectionStatus.NOT_POWER_OF_TWO.to_error()
        assert isinstance(error, SelectionError)
        assert "4, 8, 16, 32" in error.description


class TestRunCount:
    """Tests for run-count validation."""

    def test_positive_values_pass_unchanged(self):
        """Test that values outside the suggested range are not clamped."""
        low, high = suggest_run_count_range()
        assert (low, high) == (10, 5000)
        assert validate_run_count(1) == 1
        assert validate_run_count(high * 10) == high * 10

    @pytest.mark.parametrize("value", [0, -5, 2.5, "100", None, True])
    def test_invalid_values_raise(self, value):
        """Test that non-positive and non-integer values fail loudly."""
        with pytest.raises(SelectionError, match="Invalid number of runs"):
            validate_run_count(value)


class TestToggle:
    """Tests for adding and removing teams."""

    def test_toggle_adds_then_removes(self, selection):
        """Test basic toggling."""
        assert selection.toggle("Brazil") is True
        assert "Brazil" in selection
        assert selection.toggle("Brazil") is False
        assert "Brazil" not in selection

    def test_double_toggle_restores_membership(self, selection):
        """Test that toggling twice leaves the member set unchanged."""
        for team in ("Brazil", "Spain", "France"):
            selection.toggle(team)
        before = set(selection.teams)

        selection.toggle("Brazil")
        selection.toggle("Brazil")

        assert set(selection.teams) == before
        # Re-added team moves to the end
        assert selection.teams == ("Spain", "France", "Brazil")

    def test_no_duplicates(self, selection):
        """Test set semantics of extend()."""
        selection.extend(["Brazil", "Brazil", "Spain"])
        assert selection.teams == ("Brazil", "Spain")
        assert len(selection) == 2

    def test_names_are_case_sensitive(self, selection):
        """Test that identity follows the backend's exact names."""
        selection.toggle("Brazil")
        selection.toggle("brazil")
        assert selection.teams == ("Brazil", "brazil")

    def test_clear(self, selection):
        """Test clearing the selection."""
        selection.extend(TEAMS[:4])
        selection.clear()
        assert len(selection) == 0
        assert selection.validate() is SelectionStatus.TOO_FEW

    def test_validate(self, selection):
        """Test validation as teams are added."""
        selection.extend(TEAMS[:3])
        assert selection.validate() is SelectionStatus.NOT_POWER_OF_TWO
        selection.toggle(TEAMS[3])
        assert selection.validate() is SelectionStatus.OK


class TestFilter:
    """Tests for the searchable team list."""

    def test_empty_query_lists_unselected(self, selection):
        """Test that an empty query yields all unselected teams."""
        selection.toggle("Brazil")
        teams = list(selection.filter(""))
        assert "Brazil" not in teams
        assert len(teams) == len(TEAMS) - 1

    def test_case_insensitive_substring(self, selection):
        """Test matching regardless of case."""
        assert list(selection.filter("AN")) == ["England", "France", "Germany", "Netherlands"]

    def test_view_is_restartable(self, selection):
        """Test that the view re-evaluates against the current selection."""
        view = selection.filter("a")
        first = list(view)
        selection.toggle(first[0])
        second = list(view)
        assert first[0] not in second
        assert second == first[1:]

    def test_no_matches(self, selection):
        """Test a query matching nothing."""
        assert list(selection.filter("Atlantis")) == []

    def test_catalogue_replacement_keeps_selection(self, selection):
        """Test that reloading teams does not drop chosen ones."""
        selection.toggle("Brazil")
        selection.set_known_teams(["Brazil", "Japan", "Japan"])
        assert selection.known_teams == ("Brazil", "Japan")
        assert selection.teams == ("Brazil",)
        assert list(selection.filter()) == ["Japan"]
