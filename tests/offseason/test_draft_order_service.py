"""
Unit Tests for the draft order service

Tests draft order calculation including:
- Non-playoff teams drafting first (picks 1-18), worst record first
- Playoff teams ordered by elimination round, champion last
- Point differential and team ID tiebreakers
- Reconciliation of incomplete brackets and unknown/duplicate teams
- Multi-round pick generation (7 rounds, 224 picks)
"""

import pytest

from constants.league_structure import all_team_ids
from league_state.team_models import TeamRecord
from offseason.draft_order_service import (
    NON_PLAYOFF, RECONCILED, PartialDraftOrder, build_draft_picks, calculate_draft_order,
    compute_primary, reconcile
)
from playoff_system.bracket_models import PlayoffRound
from standings.standings_calculator import StandingsCalculator


class FakePlayoffResults:
    """Minimal playoff outcome: participants plus where each went out."""

    def __init__(self, elimination_rounds):
        self.elimination_rounds = dict(elimination_rounds)

    @property
    def participants(self):
        return list(self.elimination_rounds)

    def elimination_round(self, team_id):
        return self.elimination_rounds.get(team_id)


class TestDraftOrderService:
    """Test suite for draft order calculation"""

    @pytest.fixture
    def standings(self):
        """
        Team N has N-1 wins (capped at 16), so lower IDs have worse records.

        Teams 15 and 16 share a 14-3 record but differ on point differential.
        """
        records = {}
        for team_id in all_team_ids():
            wins = min(16, team_id - 1) if team_id <= 17 else (team_id - 17)
            records[team_id] = TeamRecord(
                wins=wins, losses=17 - wins, points_for=300, points_against=300
            )
        records[15] = TeamRecord(wins=14, losses=3, points_for=400, points_against=300)
        records[16] = TeamRecord(wins=14, losses=3, points_for=350, points_against=300)
        return StandingsCalculator().from_records(records, season=2025)

    @pytest.fixture
    def playoff_results(self):
        """
        14 playoff teams:
        - Wild Card losers: 19, 20, 21, 22, 23, 24
        - Divisional losers: 25, 26, 27, 28
        - Conference losers: 29, 30
        - Super Bowl loser: 31, winner: 32
        """
        rounds = {}
        for team_id in (19, 20, 21, 22, 23, 24):
            rounds[team_id] = PlayoffRound.WILD_CARD
        for team_id in (25, 26, 27, 28):
            rounds[team_id] = PlayoffRound.DIVISIONAL
        rounds[29] = PlayoffRound.CONFERENCE_CHAMPIONSHIP
        rounds[30] = PlayoffRound.CONFERENCE_CHAMPIONSHIP
        rounds[31] = PlayoffRound.SUPER_BOWL
        rounds[32] = PlayoffRound.COMPLETE
        return FakePlayoffResults(rounds)

    def test_every_team_once(self, standings, playoff_results):
        order = calculate_draft_order(standings, playoff_results)
        assert len(order) == 32
        assert sorted(order.team_ids) == all_team_ids()
        assert not order.used_fallback

    def test_non_playoff_teams_first(self, standings, playoff_results):
        order = calculate_draft_order(standings, playoff_results)
        assert set(order.team_ids[:18]) == set(range(1, 19))
        assert all(order.reasons[t] == NON_PLAYOFF for t in order.team_ids[:18])

    def test_worst_record_picks_first(self, standings, playoff_results):
        order = calculate_draft_order(standings, playoff_results)
        # Team 1 (0-17) and team 18 (1-16 NFC) are the two worst
        assert order.team_ids[0] == 1
        assert order.pick_for(1) == 1

    def test_point_differential_tiebreak(self, standings, playoff_results):
        """Equal records: worse point differential picks earlier"""
        order = calculate_draft_order(standings, playoff_results)
        assert order.pick_for(16) < order.pick_for(15)

    def test_playoff_rounds_in_order(self, standings, playoff_results):
        order = calculate_draft_order(standings, playoff_results)
        assert set(order.team_ids[18:24]) == {19, 20, 21, 22, 23, 24}
        assert set(order.team_ids[24:28]) == {25, 26, 27, 28}
        assert set(order.team_ids[28:30]) == {29, 30}
        assert order.team_ids[30] == 31
        assert order.team_ids[31] == 32
        assert order.reasons[32] == "super_bowl_win"

    def test_no_playoffs_orders_by_record(self, standings):
        order = calculate_draft_order(standings, None)
        assert len(order) == 32
        assert order.team_ids[0] == 1

    def test_incomplete_bracket_is_reconciled(self, standings, playoff_results):
        """Teams still alive in an unfinished bracket are appended"""
        partial_rounds = dict(playoff_results.elimination_rounds)
        for team_id in (29, 30, 31, 32):
            partial_rounds[team_id] = None
        order = calculate_draft_order(standings, FakePlayoffResults(partial_rounds))

        assert sorted(order.team_ids) == all_team_ids()
        assert set(order.appended_team_ids) == {29, 30, 31, 32}
        assert order.used_fallback
        assert all(order.reasons[t] == RECONCILED for t in (29, 30, 31, 32))

    def test_compute_primary_reports_unplaced(self, standings):
        results = FakePlayoffResults({32: PlayoffRound.COMPLETE, 31: None})
        partial = compute_primary(standings, results)
        assert partial.unplaced_team_ids == (31,)
        assert 31 not in partial.team_ids
        assert partial.team_ids[-1] == 32

    def test_reconcile_drops_unknown_and_duplicates(self):
        partial = PartialDraftOrder(team_ids=(3, 3, 99, 1), reasons={3: NON_PLAYOFF, 1: NON_PLAYOFF})
        order = reconcile(partial, team_ids=[1, 2, 3])

        assert order.team_ids == (3, 1, 2)
        assert order.dropped_team_ids == (3, 99)
        assert order.appended_team_ids == (2,)

    def test_reconcile_custom_league(self, standings, playoff_results):
        order = calculate_draft_order(standings, playoff_results, team_ids=range(1, 33))
        assert len(order) == 32


class TestBuildDraftPicks:
    """Test suite for pick generation"""

    def test_seven_rounds_of_32(self):
        order = list(range(32, 0, -1))
        picks = build_draft_picks(order, 2026)

        assert len(picks) == 224
        assert [p.overall_pick for p in picks] == list(range(1, 225))
        assert picks[0].current_team_id == 32
        assert picks[32].round == 2
        assert picks[32].current_team_id == 32
        assert picks[-1].pick_in_round == 32

    def test_pick_ids_are_unique_and_formatted(self):
        picks = build_draft_picks(all_team_ids(), 2026)
        assert len({p.pick_id for p in picks}) == len(picks)
        assert picks[0].pick_id == "pick-2026-1-1"
        assert picks[40].pick_id == "pick-2026-2-41"

    def test_custom_round_count(self):
        picks = build_draft_picks(all_team_ids(), 2030, rounds=3)
        assert len(picks) == 96
        assert all(p.year == 2030 for p in picks)
        assert not any(p.is_traded for p in picks)
