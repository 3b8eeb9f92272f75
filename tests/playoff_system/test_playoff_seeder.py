"""
Unit Tests for PlayoffSeeder

Tests playoff seeding including:
- Seeds 1-4 are division winners, seeds 5-7 wildcards
- A division winner outranks every wildcard regardless of record
- Wild card matchups 2v7, 3v6, 4v5
- Incomplete leagues raising InvalidSeedingException
"""

import pytest

from constants.league_structure import NFL_DIVISIONS, NFL_CONFERENCES, all_team_ids
from league_state.team_models import TeamRecord
from playoff_system.playoff_exceptions import InvalidSeedingException
from playoff_system.playoff_seeder import PlayoffSeeder
from standings.standings_calculator import StandingsCalculator


def make_standings(wins_by_team, season=2025):
    records = {
        team_id: TeamRecord(wins=wins, losses=17 - wins, points_for=wins * 25, points_against=300)
        for team_id, wins in wins_by_team.items()
    }
    return StandingsCalculator().from_records(records, season=season)


@pytest.fixture
def standings():
    """
    League where team N has a win total driven by its ID.

    AFC East winner (team 4, 7 wins) is worse than several AFC wildcards.
    """
    wins = {team_id: 4 + (team_id * 5) % 11 for team_id in all_team_ids()}
    wins[1], wins[2], wins[3], wins[4] = 3, 4, 5, 7
    return make_standings(wins)


class TestPlayoffSeeder:
    """Test suite for PlayoffSeeder"""

    @pytest.fixture
    def seeder(self):
        return PlayoffSeeder()

    @pytest.fixture
    def seeding(self, seeder, standings):
        return seeder.calculate_seeding(standings)

    def test_seven_seeds_per_conference(self, seeding):
        for conference in (seeding.afc, seeding.nfc):
            assert [s.seed for s in conference.seeds] == [1, 2, 3, 4, 5, 6, 7]
            assert len(set(conference.team_ids)) == 7

    def test_seeds_stay_in_conference(self, seeding):
        assert set(seeding.afc.team_ids) <= set(NFL_CONFERENCES['AFC'])
        assert set(seeding.nfc.team_ids) <= set(NFL_CONFERENCES['NFC'])

    def test_division_winners_take_top_four(self, seeding, standings):
        for conference in (seeding.afc, seeding.nfc):
            winners = conference.division_winners
            assert [s.seed for s in winners] == [1, 2, 3, 4]
            assert {s.division_name for s in winners} == {
                d for d in NFL_DIVISIONS if d.startswith(conference.conference)
            }
            assert all(standings.teams[s.team_id].is_division_winner for s in winners)

    def test_weak_division_winner_still_seeded_above_wildcards(self, seeding):
        afc_east_winner = seeding.get_seed(4)
        assert afc_east_winner.division_winner
        assert afc_east_winner.seed <= 4
        for wildcard in seeding.afc.wildcards:
            assert wildcard.seed > afc_east_winner.seed
            assert wildcard.win_percentage >= afc_east_winner.win_percentage

    def test_division_winners_sorted_by_record(self, seeding):
        percentages = [s.win_percentage for s in seeding.nfc.division_winners]
        assert percentages == sorted(percentages, reverse=True)

    def test_wildcards_are_best_remaining(self, seeding, standings):
        for conference in (seeding.afc, seeding.nfc):
            seeded = set(conference.team_ids)
            worst_wildcard = min(s.win_percentage for s in conference.wildcards)
            for team_id in standings.conferences[conference.conference]:
                if team_id not in seeded:
                    assert standings.teams[team_id].win_percentage <= worst_wildcard

    def test_wild_card_matchups(self, seeding):
        matchups = seeding.get_matchups()
        afc = seeding.afc
        assert matchups['AFC'] == [
            (afc.get_seed_by_number(2).team_id, afc.get_seed_by_number(7).team_id),
            (afc.get_seed_by_number(3).team_id, afc.get_seed_by_number(6).team_id),
            (afc.get_seed_by_number(4).team_id, afc.get_seed_by_number(5).team_id),
        ]

    def test_non_playoff_team_has_no_seed(self, seeding):
        assert not seeding.is_in_playoffs(1)
        assert seeding.get_seed(1) is None

    def test_seed_labels(self, seeding):
        assert seeding.afc.get_seed_by_number(1).seed_label == "#1 Seed (Bye)"
        assert "Wild Card" in seeding.afc.get_seed_by_number(6).seed_label

    def test_missing_conference_raises(self, seeder):
        afc_only = make_standings({team_id: 8 for team_id in NFL_CONFERENCES['AFC']})
        with pytest.raises(InvalidSeedingException):
            seeder.calculate_seeding(afc_only)

    def test_to_dict(self, seeding):
        data = seeding.to_dict()
        assert data['season'] == 2025
        assert len(data['afc']) == 7
        assert data['nfc'][0]['seed'] == 1
