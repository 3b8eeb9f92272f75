"""
Salary Cap Calculator

Pure cap arithmetic over the league's contract set:
- Cap usage, cap space and future commitments per team
- Signing bonus proration (5-year max rule)
- Compliance check (reported only; the engine never forces compliance)

A team's cap usage for a season is exactly the sum of its active
contracts' cap hits for that season. Cap figures are opaque integers.
"""

from typing import Iterable, Tuple
import logging

from league_state.contract_models import Contract
from league_state.team_models import TeamFinances


class CapCalculator:
    """
    Core salary cap calculation engine.

    Usage:
        calculator = CapCalculator(salary_cap=255_400_000)
        finances = calculator.build_finances(state.contracts.values(), team_id=7, season=2026)
        finances.cap_space
    """

    MAX_PRORATION_YEARS = 5

    def __init__(self, salary_cap: int):
        """
        Initialize Cap Calculator.

        Args:
            salary_cap: League-wide cap for every season

        Raises:
            ValueError: If salary_cap is not positive
        """
        if salary_cap <= 0:
            raise ValueError(f"salary_cap must be positive, got {salary_cap!r}")
        self.salary_cap = salary_cap
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # CORE CAP SPACE CALCULATIONS
    # ========================================================================

    def calculate_team_cap_usage(
        self,
        contracts: Iterable[Contract],
        team_id: int,
        season: int
    ) -> int:
        """
        Sum of a team's active contract cap hits for a season.

        Expired contracts contribute nothing.
        """
        return sum(
            contract.cap_hit_for_year(season)
            for contract in contracts
            if contract.team_id == team_id and not contract.is_expired
        )

    def calculate_team_cap_space(
        self,
        contracts: Iterable[Contract],
        team_id: int,
        season: int
    ) -> int:
        """
        Available cap space (negative when over the cap).

        Formula:
            cap_space = salary_cap - cap_usage
        """
        return self.salary_cap - self.calculate_team_cap_usage(contracts, team_id, season)

    def calculate_future_commitments(
        self,
        contracts: Iterable[Contract],
        team_id: int,
        season: int,
        years_ahead: int
    ) -> int:
        """Cap already committed to season + years_ahead."""
        return self.calculate_team_cap_usage(contracts, team_id, season + years_ahead)

    def build_finances(
        self,
        contracts: Iterable[Contract],
        team_id: int,
        season: int
    ) -> TeamFinances:
        """
        Full cap position for a team.

        Args:
            contracts: All league contracts (filtered by team here)
            team_id: Team ID
            season: Upcoming league year

        Returns:
            TeamFinances with usage, space and 1-3 year commitments
        """
        team_contracts = [c for c in contracts if c.team_id == team_id and not c.is_expired]
        usage = self.calculate_team_cap_usage(team_contracts, team_id, season)
        return TeamFinances(
            salary_cap=self.salary_cap,
            cap_usage=usage,
            cap_space=self.salary_cap - usage,
            next_year_commitments=self.calculate_future_commitments(team_contracts, team_id, season, 1),
            two_year_commitments=self.calculate_future_commitments(team_contracts, team_id, season, 2),
            three_year_commitments=self.calculate_future_commitments(team_contracts, team_id, season, 3),
        )

    def check_cap_compliance(
        self,
        contracts: Iterable[Contract],
        team_id: int,
        season: int
    ) -> Tuple[bool, int]:
        """
        Check whether a team fits under the cap.

        Returns:
            (is_compliant, overage) where overage is 0 when compliant
        """
        space = self.calculate_team_cap_space(contracts, team_id, season)
        return space >= 0, max(0, -space)

    # ========================================================================
    # SIGNING BONUS PRORATION
    # ========================================================================

    def calculate_signing_bonus_proration(
        self,
        signing_bonus: int,
        contract_years: int
    ) -> int:
        """
        Calculate annual proration amount for signing bonus.

        Signing bonuses are prorated over the life of the contract with a
        MAXIMUM of 5 years, regardless of contract length.

        Examples:
            - 4-year, 20M bonus -> 5M/year
            - 7-year, 35M bonus -> 7M/year (35M / 5 years, NOT 7!)
        """
        if signing_bonus <= 0:
            return 0

        if contract_years <= 0:
            raise ValueError("Contract years must be positive")

        proration_years = min(contract_years, self.MAX_PRORATION_YEARS)
        return signing_bonus // proration_years
