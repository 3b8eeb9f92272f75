"""
Unit Tests for the player, draft class, coach and contract generators

Tests generation including:
- Full 53-man rosters following the depth chart template
- Tier-controlled ratings and potential headroom
- Draft classes ranked best first with projected rounds
- Coaching staffs with role-based contract lengths
- Initial, rookie, market and minimum contracts
"""

import random
from collections import Counter

import pytest

from constants.positions import IDEAL_POSITION_COUNTS, MAX_ROSTER_SIZE, Position
from league_state.coach_models import CoachRole
from league_state.player_models import PlayerTier
from player_generation.coach_generator import CONTRACT_YEARS, CoachGenerator
from player_generation.contract_generator import ContractGenerator
from player_generation.draft_class_generator import UNDRAFTED_ROUND, DraftClassGenerator
from player_generation.player_generator import (
    ROSTER_FLEX_POSITIONS, TIER_RATING_RANGES, PlayerGenerator, new_entity_id, roster_template
)
from salary_cap.rookie_scale import ROOKIE_CONTRACT_YEARS


class TestPlayerGenerator:
    """Test suite for PlayerGenerator"""

    @pytest.fixture
    def generator(self):
        return PlayerGenerator(random.Random(99))

    def test_roster_template(self):
        template = roster_template()
        counts = Counter(template)
        assert len(template) == MAX_ROSTER_SIZE
        for position, ideal in IDEAL_POSITION_COUNTS.items():
            assert counts[position] >= ideal
        assert sum(IDEAL_POSITION_COUNTS.values()) + len(ROSTER_FLEX_POSITIONS) == MAX_ROSTER_SIZE

    def test_generate_roster(self, generator):
        roster = generator.generate_roster(team_id=7)
        assert len(roster) == 53
        assert all(p.team_id == 7 for p in roster)
        assert all(p.contract_id is None for p in roster)
        assert len({p.player_id for p in roster}) == 53

    def test_tier_weights_control_ratings(self, generator):
        low, high = TIER_RATING_RANGES[PlayerTier.ELITE]
        for _ in range(20):
            player = generator.generate_player(Position.QB, tier_weights={PlayerTier.ELITE: 1.0})
            assert low <= player.overall <= high
            assert player.tier == PlayerTier.ELITE

    def test_potential_never_below_overall(self, generator):
        for _ in range(50):
            player = generator.generate_player(Position.CB, age_range=(22, 35))
            assert player.overall <= player.potential <= 99

    def test_older_players_have_no_headroom(self, generator):
        for _ in range(20):
            player = generator.generate_player(Position.WR, age_range=(29, 33))
            assert player.potential == player.overall

    def test_depth_players_are_young_reserves(self, generator):
        for _ in range(20):
            player = generator.generate_depth_player(Position.DT, team_id=3)
            assert 22 <= player.age <= 28
            assert player.tier in (PlayerTier.BACKUP, PlayerTier.FRINGE)

    def test_seeded_generation_repeats(self):
        first = PlayerGenerator(random.Random(5)).generate_roster(1)
        second = PlayerGenerator(random.Random(5)).generate_roster(1)
        assert first == second

    def test_entity_ids(self):
        rng = random.Random(1)
        ids = {new_entity_id(rng, "player") for _ in range(100)}
        assert len(ids) == 100
        assert all(i.startswith("player-") for i in ids)


class TestDraftClassGenerator:
    """Test suite for DraftClassGenerator"""

    @pytest.fixture
    def draft_class(self):
        return DraftClassGenerator(PlayerGenerator(random.Random(12))).generate_draft_class(2026)

    def test_class_size(self, draft_class):
        assert draft_class.year == 2026
        assert len(draft_class) == 256

    def test_sorted_best_first(self, draft_class):
        keys = [(p.potential, p.overall) for p in draft_class.prospects]
        assert keys == sorted(keys, reverse=True)

    def test_projected_rounds(self, draft_class):
        rounds = [p.projected_round for p in draft_class.prospects]
        assert rounds[0] == 1
        assert rounds[31] == 1
        assert rounds[32] == 2
        assert rounds[-1] == UNDRAFTED_ROUND
        assert rounds == sorted(rounds)

    def test_prospects_are_young(self, draft_class):
        assert all(21 <= p.age <= 23 for p in draft_class.prospects)
        assert all(p.potential > p.overall or p.potential == 99 for p in draft_class.prospects)

    def test_custom_size_and_position(self):
        generator = DraftClassGenerator(PlayerGenerator(random.Random(3)), class_size=10)
        assert len(generator.generate_draft_class(2030)) == 10
        assert len(generator.generate_draft_class(2030, size=4)) == 4
        assert generator.generate_prospect(Position.K).position == Position.K

    def test_lookup_by_id(self, draft_class):
        prospect = draft_class.prospects[5]
        assert draft_class.get_prospect(prospect.prospect_id) == prospect
        assert draft_class.get_prospect("missing") is None

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            DraftClassGenerator(PlayerGenerator(random.Random(3)), class_size=0)


class TestCoachGenerator:
    """Test suite for CoachGenerator"""

    def test_staff_roles(self):
        staff = CoachGenerator(random.Random(4)).generate_staff(team_id=9, year=2025)
        assert [c.role for c in staff] == [
            CoachRole.HEAD_COACH, CoachRole.OFFENSIVE_COORDINATOR, CoachRole.DEFENSIVE_COORDINATOR
        ]
        assert all(c.team_id == 9 and c.hired_year == 2025 for c in staff)

    def test_contract_lengths_by_role(self):
        generator = CoachGenerator(random.Random(4))
        for role, (low, high) in CONTRACT_YEARS.items():
            for _ in range(10):
                assert low <= generator.generate_coach(role, 1, 2025).contract_years_remaining <= high

    def test_iq_bounds(self):
        generator = CoachGenerator(random.Random(4))
        for _ in range(100):
            assert 20 <= generator.generate_coach(CoachRole.HEAD_COACH, None, 2025).game_day_iq <= 95


class TestContractGenerator:
    """Test suite for ContractGenerator"""

    @pytest.fixture
    def generator(self, settings):
        return ContractGenerator(random.Random(6), salary_cap=settings.salary_cap)

    def test_market_contract(self, generator, make_player):
        player = make_player(position=Position.QB, age=28, overall=88)
        contract = generator.generate_contract(player, team_id=4, year=2026)

        assert contract.player_id == player.player_id
        assert contract.team_id == 4
        assert contract.signed_year == 2026
        assert len(contract.annual_cap_hits) == contract.total_years
        # Base salaries escalate
        assert contract.annual_cap_hits[-1] >= contract.annual_cap_hits[0]

    def test_minimum_contract(self, generator, make_player):
        player = make_player(experience=4)
        contract = generator.generate_minimum_contract(player, team_id=2, year=2026)
        assert contract.total_years == 1
        assert contract.annual_cap_hits == (generator.minimum_salary(player),)

    def test_rookie_contract(self, generator):
        contract = generator.generate_rookie_contract("player-r", team_id=8, year=2026, overall_pick=1)
        assert contract.is_rookie_contract
        assert contract.total_years == ROOKIE_CONTRACT_YEARS
        assert contract.signed_year == 2026

    def test_roster_contracts_in_progress(self, generator):
        roster = PlayerGenerator(random.Random(2)).generate_roster(team_id=11)
        contracts, players = generator.generate_roster_contracts(roster, team_id=11, year=2025)

        assert len(contracts) == len(players) == 53
        by_id = {c.contract_id: c for c in contracts}
        for player in players:
            contract = by_id[player.contract_id]
            assert player.team_id == 11
            assert contract.player_id == player.player_id
            assert not contract.is_expired
            # The 2025 season is the contract's current year
            assert contract.signed_year + contract.current_year - 1 == 2025
            assert contract.cap_hit_for_year(2025) > 0

    def test_young_players_on_rookie_deals(self, generator, make_player):
        rookie = make_player(age=23, experience=1, overall=70)
        contract = generator.generate_initial_contract(rookie, team_id=1, year=2025)
        assert contract.is_rookie_contract
        assert contract.signed_year == 2024
        assert contract.current_year == 2
