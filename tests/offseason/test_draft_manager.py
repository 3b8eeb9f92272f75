"""
Unit Tests for DraftManager

Tests the automated draft including:
- Draft board ordering
- Need-weighted prospect selection
- Every pick used and tagged with its player
- Rookie-scale contracts for drafted players
- Undrafted prospects joining the free agent pool
"""

import random

import pytest

from constants.positions import Position
from league_state.draft_models import DraftClass, DraftPick
from league_state.player_models import Prospect
from offseason.draft_manager import (
    DraftManager, process_ai_draft, resolve_draft_class, resolve_draft_picks
)
from offseason.draft_order_service import build_draft_picks
from offseason.offseason_models import OffseasonContext
from salary_cap.rookie_scale import ROOKIE_CONTRACT_YEARS


def prospect(prospect_id, position, potential, overall=60):
    return Prospect(prospect_id, "Draft", prospect_id, position, 21, overall, potential, 1)


class TestDraftBoard:
    """Test suite for board ordering and pick selection"""

    @pytest.fixture
    def manager(self, offseason_context):
        return DraftManager(offseason_context)

    def test_board_best_potential_first(self, manager):
        draft_class = DraftClass(2026, (
            prospect("a", Position.QB, 70),
            prospect("b", Position.WR, 90),
            prospect("c", Position.CB, 80, overall=65),
            prospect("d", Position.ILB, 80, overall=55),
        ))
        board = manager.get_draft_board(draft_class)
        assert [p.prospect_id for p in board] == ["b", "c", "d", "a"]

    def test_need_outweighs_small_talent_gap(self, manager):
        board = [prospect("qb", Position.QB, 80), prospect("wr", Position.WR, 78)]
        assert manager.select_prospect(board, {Position.WR: 3}) == 1

    def test_best_available_without_needs(self, manager):
        board = [prospect("qb", Position.QB, 90), prospect("wr", Position.WR, 60)]
        assert manager.select_prospect(board, {}) == 0


class TestSimulateDraft:
    """Test suite for a small hand-made draft"""

    @pytest.fixture
    def draft_class(self):
        return DraftClass(2026, (
            prospect("p1", Position.QB, 88),
            prospect("p2", Position.WR, 84),
            prospect("p3", Position.CB, 75),
        ))

    @pytest.fixture
    def picks(self):
        return build_draft_picks([3, 7], 2026, rounds=1)

    def test_picks_become_players(self, empty_league, offseason_context, draft_class, picks):
        result = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, picks)
        state = result.state

        assert len(result.report.selections) == 2
        for selection in result.report.selections:
            player = state.players[selection.player_id]
            assert player.team_id == selection.team_id
            assert player.experience == 0
            assert selection.player_id in state.teams[selection.team_id].roster

    def test_rookie_contracts(self, empty_league, offseason_context, draft_class, picks):
        state = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, picks).state
        drafted = [p for p in state.players.values() if p.team_id is not None]

        for player in drafted:
            contract = state.contracts[player.contract_id]
            assert contract.is_rookie_contract
            assert contract.total_years == ROOKIE_CONTRACT_YEARS
            assert contract.signed_year == 2026
            assert contract.player_id == player.player_id

    def test_undrafted_become_free_agents(self, empty_league, offseason_context, draft_class, picks):
        result = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, picks)
        state = result.state

        assert result.report.details['undrafted'] == 1
        assert len(state.free_agent_ids) == 1
        udfa = state.players[state.free_agent_ids[0]]
        assert udfa.team_id is None
        assert udfa.contract_id is None

    def test_used_picks_carry_player(self, empty_league, offseason_context, draft_class, picks):
        state = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, picks).state
        assert len(state.draft_picks) == 2
        assert all(pick.player_id is not None for pick in state.draft_picks)
        assert state.draft_class is None

    def test_unknown_team_pick_skipped(self, empty_league, offseason_context, draft_class):
        orphan = DraftPick(DraftPick.make_id(2026, 1, 1), 2026, 1, 1, 1, 99, 99)
        result = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, [orphan])

        assert result.report.selections == ()
        assert result.report.details['undrafted'] == 3

    def test_picks_outnumber_prospects(self, empty_league, offseason_context, draft_class):
        picks = build_draft_picks(list(range(1, 33)), 2026, rounds=1)
        result = DraftManager(offseason_context).simulate_draft(empty_league, draft_class, picks)

        assert len(result.report.selections) == 3
        assert result.report.details['undrafted'] == 0
        assert [s.overall_pick for s in result.report.selections] == [1, 2, 3]


class TestProcessAIDraft:
    """Test suite for the draft stage over a generated league"""

    @pytest.fixture(scope="class")
    def draft_result(self, initial_league):
        context = OffseasonContext(year=2025, rng=random.Random(8), draft_order=tuple(range(1, 33)))
        return process_ai_draft(initial_league, context)

    def test_every_pick_used(self, draft_result):
        assert len(draft_result.report.selections) == 224
        picks_2026 = [p for p in draft_result.state.draft_picks if p.year == 2026]
        assert len(picks_2026) == 224
        assert all(p.player_id is not None for p in picks_2026)

    def test_seven_picks_per_team(self, draft_result, initial_league):
        for team_id in initial_league.team_ids:
            before = initial_league.teams[team_id].roster_size
            assert draft_result.state.teams[team_id].roster_size == before + 7

    def test_remaining_class_goes_undrafted(self, draft_result, initial_league):
        class_size = len(initial_league.draft_class)
        assert draft_result.report.details['undrafted'] == class_size - 224
        assert len(draft_result.state.free_agent_ids) == (
            len(initial_league.free_agent_ids) + class_size - 224
        )

    def test_selected_players_are_unique(self, draft_result):
        player_ids = [s.player_id for s in draft_result.report.selections]
        assert len(set(player_ids)) == 224


class TestResolveDraftInputs:
    """Test suite for draft class and pick resolution"""

    def test_state_class_used_for_next_year(self, initial_league, offseason_context):
        assert resolve_draft_class(initial_league, offseason_context) is initial_league.draft_class

    def test_class_generated_when_missing(self, empty_league, offseason_context):
        draft_class = resolve_draft_class(empty_league, offseason_context)
        assert draft_class.year == 2026
        assert len(draft_class) == offseason_context.settings.draft_class_size

    def test_picks_from_draft_order(self, empty_league, offseason_context):
        picks = resolve_draft_picks(empty_league, offseason_context)
        assert len(picks) == 224
        assert picks[0].current_team_id == 1

    def test_picks_from_state_without_order(self, initial_league, rng):
        context = OffseasonContext(year=2025, rng=rng)
        picks = resolve_draft_picks(initial_league, context)
        assert len(picks) == 224
        assert all(p.year == 2026 for p in picks)
