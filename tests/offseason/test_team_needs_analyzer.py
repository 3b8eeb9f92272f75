"""
Unit Tests for TeamNeedsAnalyzer

Tests team needs analysis including:
- Deficits against the ideal depth chart
- Ordering by deficit, then depth chart order
- Surplus positions never reported as needs
"""

import pytest

from constants.positions import IDEAL_POSITION_COUNTS, Position
from offseason.team_needs_analyzer import TeamNeedsAnalyzer


class TestTeamNeedsAnalyzer:
    """Test suite for TeamNeedsAnalyzer"""

    @pytest.fixture
    def analyzer(self):
        return TeamNeedsAnalyzer()

    def test_empty_roster_needs_everything(self, analyzer):
        needs = analyzer.analyze_team_needs([])
        assert set(needs) == set(IDEAL_POSITION_COUNTS)
        assert sum(needs.values()) == 47

    def test_largest_deficit_first(self, analyzer):
        needs = analyzer.analyze_team_needs([])
        assert list(needs)[:2] == [Position.WR, Position.CB]
        assert list(needs.values()) == sorted(needs.values(), reverse=True)

    def test_filled_positions_dropped(self, analyzer, make_player):
        players = [make_player(position=Position.QB) for _ in range(3)]
        players.append(make_player(position=Position.WR))
        needs = analyzer.analyze_team_needs(players)

        assert Position.QB not in needs
        assert needs[Position.WR] == 4

    def test_needs_from_counts(self, analyzer):
        needs = analyzer.needs_from_counts({Position.K: 1, Position.P: 0})
        assert Position.K not in needs
        assert needs[Position.P] == 1

    def test_position_deficit(self, analyzer):
        counts = {Position.WR: 2, Position.QB: 4}
        assert analyzer.position_deficit(counts, Position.WR) == 3
        assert analyzer.position_deficit(counts, Position.QB) == -2
        assert analyzer.position_deficit({}, Position.K) == 1
        # Agrees with the full needs map wherever there is a need
        for position, deficit in analyzer.needs_from_counts(counts).items():
            assert analyzer.position_deficit(counts, position) == deficit

    def test_custom_ideal_counts(self, make_player):
        analyzer = TeamNeedsAnalyzer({Position.QB: 2, Position.K: 1})
        assert analyzer.analyze_team_needs([make_player(position=Position.QB)]) == {
            Position.QB: 1, Position.K: 1
        }

    def test_analyze_state(self, analyzer, initial_league, empty_league):
        assert analyzer.analyze_state(initial_league, 1) == {}
        assert sum(analyzer.analyze_state(empty_league, 1).values()) == 47
