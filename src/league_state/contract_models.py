"""
Contract Data Model

A player contract with a per-season cap hit schedule. Cap figures are
opaque integer currency units.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Contract:
    """
    Player contract.

    Covers seasons signed_year .. signed_year + total_years - 1.
    current_year is 1-based and advances once per offseason.
    """
    contract_id: str
    player_id: str
    team_id: Optional[int]
    signed_year: int
    total_years: int
    annual_cap_hits: Tuple[int, ...]     # One entry per contract year
    signing_bonus: int = 0
    guaranteed_money: int = 0
    current_year: int = 1
    is_rookie_contract: bool = False

    @property
    def end_year(self) -> int:
        """Last season covered by the contract."""
        return self.signed_year + self.total_years - 1

    @property
    def years_remaining(self) -> int:
        """Contract years left including the current one (0 = expired)."""
        return max(0, self.total_years - self.current_year + 1)

    @property
    def is_expired(self) -> bool:
        return self.years_remaining == 0

    @property
    def total_value(self) -> int:
        return sum(self.annual_cap_hits)

    @property
    def average_annual_value(self) -> int:
        if self.total_years == 0:
            return 0
        return self.total_value // self.total_years

    def cap_hit_for_year(self, season: int) -> int:
        """
        Get cap charge for a season.

        Args:
            season: Season year

        Returns:
            Cap hit, or 0 when the season is outside the contract
        """
        index = season - self.signed_year
        if 0 <= index < len(self.annual_cap_hits):
            return self.annual_cap_hits[index]
        return 0

    def advance_year(self) -> 'Contract':
        return replace(self, current_year=self.current_year + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'contract_id': self.contract_id,
            'player_id': self.player_id,
            'team_id': self.team_id,
            'signed_year': self.signed_year,
            'total_years': self.total_years,
            'years_remaining': self.years_remaining,
            'annual_cap_hits': list(self.annual_cap_hits),
            'signing_bonus': self.signing_bonus,
            'guaranteed_money': self.guaranteed_money,
            'is_rookie_contract': self.is_rookie_contract,
        }
