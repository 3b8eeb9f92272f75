"""
Unit Tests for RosterManager

Tests final roster sizing including:
- Cutting oversized rosters down to 53 (lowest rated first)
- Cut players losing their contract and joining free agency
- Filling short rosters with depth players at positions of need
"""

import pytest

from constants.positions import IDEAL_POSITION_COUNTS, Position
from offseason.roster_manager import RosterManager, process_roster_maintenance, roster_keep_order
from player_generation.player_generator import ROSTER_FLEX_POSITIONS


class TestRosterManager:
    """Test suite for RosterManager"""

    @pytest.fixture
    def manager(self, offseason_context):
        return RosterManager(offseason_context)

    @pytest.fixture
    def oversized_state(self, empty_league, make_player, make_contract):
        """Team 1 carries 60 players rated 40-99."""
        players = [
            make_player(overall=40 + i, team_id=1, contract_id=f"contract-os-{i}", player_id=f"os-{i:02d}")
            for i in range(60)
        ]
        contracts = {
            f"contract-os-{i}": make_contract(p.player_id, 1, contract_id=f"contract-os-{i}")
            for i, p in enumerate(players)
        }
        team = empty_league.teams[1].with_roster(p.player_id for p in players)
        return (
            empty_league.with_players({p.player_id: p for p in players})
            .with_contracts(contracts)
            .with_teams({1: team})
        )

    def test_keep_order_prefers_tier_then_overall(self, make_player):
        players = [make_player(overall=o, player_id=f"k{o}") for o in (60, 90, 75, 74)]
        ordered = sorted(players, key=roster_keep_order)
        assert [p.overall for p in ordered] == [90, 75, 74, 60]

    def test_select_cuts(self, manager, make_player):
        players = [make_player(overall=40 + i) for i in range(56)]
        cuts = manager.select_cuts(players)
        assert sorted(p.overall for p in cuts) == [40, 41, 42]

    def test_no_cuts_under_limit(self, manager, make_player):
        assert manager.select_cuts([make_player() for _ in range(50)]) == []

    def test_fill_positions_needs_first(self, manager):
        positions = manager.fill_positions([], 3)
        # Largest ideal depth (WR and CB at 5) first
        assert positions == [Position.WR, Position.CB, Position.DE]

    def test_fill_positions_spreads_across_needs(self, manager, make_player):
        # Two short at QB, one short at K, everything else at full depth
        roster = [
            make_player(position=position)
            for position, count in IDEAL_POSITION_COUNTS.items()
            if position not in (Position.QB, Position.K)
            for _ in range(count)
        ]
        positions = manager.fill_positions(roster, 4)
        assert positions[:3] == [Position.QB, Position.K, Position.QB]
        assert positions[3] == list(ROSTER_FLEX_POSITIONS)[0]

    def test_fill_positions_flex_when_no_needs(self, manager, make_player):
        full_depth = [
            make_player(position=position)
            for position, count in IDEAL_POSITION_COUNTS.items()
            for _ in range(count)
        ]
        open_spots = 53 - len(full_depth)
        assert manager.fill_positions(full_depth, open_spots) == list(ROSTER_FLEX_POSITIONS)[:open_spots]

    def test_oversized_roster_cut_to_limit(self, manager, oversized_state):
        result = manager.finalize_rosters(oversized_state)
        state = result.state
        team = state.teams[1]

        assert team.roster_size == 53
        for i in range(7):
            player_id = f"os-{i:02d}"
            assert player_id not in team.roster
            assert player_id in state.free_agent_ids
            assert state.players[player_id].team_id is None
            assert f"contract-os-{i}" not in state.contracts

    def test_every_roster_exactly_limit(self, manager, oversized_state):
        result = manager.finalize_rosters(oversized_state)
        state = result.state

        assert set(state.roster_sizes().values()) == {53}
        assert result.report.details['cut'] == 7
        assert result.report.details['depth_signings'] == 31 * 53

    def test_depth_players_signed(self, manager, oversized_state):
        state = manager.finalize_rosters(oversized_state).state
        for player in state.roster_players(2):
            assert player.team_id == 2
            contract = state.contracts[player.contract_id]
            assert contract.signed_year == 2026
            assert contract.player_id == player.player_id

    def test_stage_function(self, initial_league, offseason_context):
        result = process_roster_maintenance(initial_league, offseason_context)
        assert result.report.details == {'cut': 0, 'depth_signings': 0}
        assert result.state.roster_sizes() == initial_league.roster_sizes()
