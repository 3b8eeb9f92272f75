"""
Unit Tests for StandingsCalculator

Tests standings calculation including:
- Division, conference and league ordering
- Tiebreak chain (win %, division %, conference %, point differential, team ID)
- Playoff field: 4 division winners + 3 wildcards per conference
- Prior-year division order for scheduling
"""

import pytest

from constants.league_structure import NFL_DIVISIONS, all_team_ids
from league_state.team_models import TeamRecord
from scheduling.schedule_models import ScheduleComponent, ScheduledGame
from standings.standings_calculator import (
    StandingsCalculator, calculate_standings, previous_year_division_standings
)


def record(wins, losses, ties=0, points_for=0, points_against=0, division_wins=0, conference_wins=0):
    return TeamRecord(
        wins=wins, losses=losses, ties=ties,
        points_for=points_for, points_against=points_against,
        division_wins=division_wins, division_losses=max(0, 6 - division_wins),
        conference_wins=conference_wins, conference_losses=max(0, 12 - conference_wins),
    )


class TestStandingsCalculator:
    """Test suite for StandingsCalculator"""

    @pytest.fixture
    def calculator(self):
        return StandingsCalculator()

    @pytest.fixture
    def records(self):
        """
        32 records where a higher team ID within each division is better.

        Within a division the last team finishes 1st; across divisions the
        win totals overlap so wildcards come from several divisions.
        """
        records = {}
        for members in NFL_DIVISIONS.values():
            for rank, team_id in enumerate(members):
                wins = 5 + rank * 2 + (team_id % 3)
                records[team_id] = record(wins, 17 - wins, points_for=20 * wins, points_against=300)
        return records

    @pytest.fixture
    def standings(self, calculator, records):
        return calculator.from_records(records, season=2025)

    def test_every_team_ranked(self, standings):
        assert sorted(standings.league) == all_team_ids()
        assert sorted(t.league_rank for t in standings.teams.values()) == list(range(1, 33))

    def test_division_order_best_first(self, standings, records):
        for division, order in standings.divisions.items():
            percentages = [records[t].win_percentage for t in order]
            assert percentages == sorted(percentages, reverse=True)
            assert standings.teams[order[0]].is_division_winner

    def test_division_rank(self, standings):
        for order in standings.divisions.values():
            assert [standings.division_rank(t) for t in order] == [1, 2, 3, 4]
        assert standings.division_rank(99) is None

    def test_conference_lists_have_16_teams(self, standings):
        assert len(standings.conferences['AFC']) == 16
        assert len(standings.conferences['NFC']) == 16

    def test_playoff_field_is_division_winners_plus_wildcards(self, calculator, standings):
        field = calculator.determine_playoff_teams(standings)
        for conference, team_ids in field.items():
            assert len(team_ids) == 7
            winners = team_ids[:4]
            assert all(standings.teams[t].is_division_winner for t in winners)
            assert not any(standings.teams[t].is_division_winner for t in team_ids[4:])

    def test_is_playoff_team(self, calculator, standings):
        field = calculator.determine_playoff_teams(standings)
        for team_id in all_team_ids():
            expected = team_id in field['AFC'] or team_id in field['NFC']
            assert calculator.is_playoff_team(standings, team_id) == expected

    def test_previous_year_division_standings(self, standings):
        prior = previous_year_division_standings(standings)
        assert set(prior) == set(NFL_DIVISIONS)
        for division, members in NFL_DIVISIONS.items():
            assert sorted(prior[division]) == members
        assert previous_year_division_standings(None) is None

    def test_to_dict_records(self, standings, records):
        data = standings.to_dict()
        assert data['season'] == 2025
        assert data['records'][1] == records[1].record_string


class TestTiebreakers:
    """Test suite for the tiebreak chain"""

    @pytest.fixture
    def calculator(self):
        return StandingsCalculator()

    @pytest.fixture
    def base_records(self):
        return {team_id: record(8, 9) for team_id in all_team_ids()}

    def test_division_record_breaks_tie(self, calculator, base_records):
        base_records[1] = record(10, 7, division_wins=2)
        base_records[2] = record(10, 7, division_wins=5)
        standings = calculator.from_records(base_records)
        assert standings.divisions['AFC East'][:2] == [2, 1]

    def test_conference_record_breaks_tie(self, calculator, base_records):
        base_records[5] = record(10, 7, division_wins=3, conference_wins=6)
        base_records[6] = record(10, 7, division_wins=3, conference_wins=9)
        standings = calculator.from_records(base_records)
        assert standings.divisions['AFC North'][:2] == [6, 5]

    def test_point_differential_breaks_tie(self, calculator, base_records):
        base_records[9] = record(10, 7, points_for=300, points_against=310)
        base_records[10] = record(10, 7, points_for=350, points_against=300)
        standings = calculator.from_records(base_records)
        assert standings.divisions['AFC South'][:2] == [10, 9]

    def test_team_id_is_final_tiebreak(self, calculator, base_records):
        standings = calculator.from_records(base_records)
        assert standings.league == all_team_ids()
        assert standings.divisions['NFC West'] == [29, 30, 31, 32]

    def test_ties_count_as_half_win(self, calculator, base_records):
        base_records[13] = record(8, 8, ties=1)
        standings = calculator.from_records(base_records)
        assert standings.divisions['AFC West'][0] == 13


class TestCalculateFromGames:
    """Test suite for standings built directly from completed games"""

    def test_single_game(self):
        games = [
            ScheduledGame("g1", 1, 1, 2, ScheduleComponent.DIVISIONAL).with_result(27, 10),
            ScheduledGame("g2", 1, 3, 4, ScheduleComponent.DIVISIONAL),
        ]
        standings = calculate_standings(games, all_team_ids(), season=2025)

        assert standings.get(1).wins == 1
        assert standings.get(2).losses == 1
        assert standings.get(3).record.games_played == 0
        assert standings.divisions['AFC East'][0] == 1
        assert standings.divisions['AFC East'][-1] == 2

    def test_calculate_from_teams_matches_records(self, empty_league):
        standings = StandingsCalculator().calculate_from_teams(empty_league.teams, season=2025)
        assert standings.season == 2025
        assert len(standings.teams) == 32
