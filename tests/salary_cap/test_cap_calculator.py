"""
Unit Tests for CapCalculator

Tests the core salary cap formulas including:
- Cap usage as the sum of active cap hits
- Cap space and future commitments
- Compliance reporting
- Signing bonus proration (5-year max rule)
"""

import pytest

from league_state.contract_models import Contract
from salary_cap.cap_calculator import CapCalculator


SALARY_CAP = 255_400_000


@pytest.fixture
def cap_calculator():
    return CapCalculator(SALARY_CAP)


def contract(contract_id, team_id, cap_hits, signed_year=2025, current_year=1):
    return Contract(
        contract_id=contract_id,
        player_id=f"player-{contract_id}",
        team_id=team_id,
        signed_year=signed_year,
        total_years=len(cap_hits),
        annual_cap_hits=tuple(cap_hits),
        current_year=current_year,
    )


class TestCapUsage:
    """Test cap usage and space for a team."""

    @pytest.fixture
    def contracts(self):
        return [
            contract("a", 1, [10_000_000, 12_000_000, 14_000_000]),
            contract("b", 1, [5_000_000, 5_000_000]),
            contract("c", 2, [30_000_000]),
        ]

    def test_usage_sums_team_cap_hits(self, cap_calculator, contracts):
        assert cap_calculator.calculate_team_cap_usage(contracts, 1, 2025) == 15_000_000
        assert cap_calculator.calculate_team_cap_usage(contracts, 1, 2026) == 17_000_000
        assert cap_calculator.calculate_team_cap_usage(contracts, 2, 2025) == 30_000_000

    def test_seasons_outside_contract_count_nothing(self, cap_calculator, contracts):
        assert cap_calculator.calculate_team_cap_usage(contracts, 1, 2024) == 0
        assert cap_calculator.calculate_team_cap_usage(contracts, 2, 2026) == 0

    def test_expired_contracts_ignored(self, cap_calculator):
        expired = contract("x", 1, [9_000_000], current_year=2)
        assert expired.is_expired
        assert cap_calculator.calculate_team_cap_usage([expired], 1, 2025) == 0

    def test_cap_space(self, cap_calculator, contracts):
        assert cap_calculator.calculate_team_cap_space(contracts, 1, 2025) == SALARY_CAP - 15_000_000
        assert cap_calculator.calculate_team_cap_space([], 1, 2025) == SALARY_CAP

    def test_build_finances(self, cap_calculator, contracts):
        finances = cap_calculator.build_finances(contracts, 1, 2025)

        assert finances.salary_cap == SALARY_CAP
        assert finances.cap_usage == 15_000_000
        assert finances.cap_space == SALARY_CAP - 15_000_000
        assert finances.next_year_commitments == 17_000_000
        assert finances.two_year_commitments == 14_000_000
        assert finances.three_year_commitments == 0

    def test_compliance(self, cap_calculator, contracts):
        assert cap_calculator.check_cap_compliance(contracts, 1, 2025) == (True, 0)

        over = contracts + [contract("big", 1, [SALARY_CAP])]
        assert cap_calculator.check_cap_compliance(over, 1, 2025) == (False, 15_000_000)

    def test_non_positive_cap_rejected(self):
        with pytest.raises(ValueError):
            CapCalculator(0)


class TestSigningBonusProration:
    """Test signing bonus proration formula with 5-year max rule."""

    def test_four_year_contract(self, cap_calculator):
        assert cap_calculator.calculate_signing_bonus_proration(20_000_000, 4) == 5_000_000

    def test_seven_year_contract_uses_five_years(self, cap_calculator):
        """Bonuses are never prorated beyond 5 years."""
        assert cap_calculator.calculate_signing_bonus_proration(35_000_000, 7) == 7_000_000

    def test_zero_bonus(self, cap_calculator):
        assert cap_calculator.calculate_signing_bonus_proration(0, 4) == 0

    def test_invalid_years(self, cap_calculator):
        with pytest.raises(ValueError):
            cap_calculator.calculate_signing_bonus_proration(10_000_000, 0)
