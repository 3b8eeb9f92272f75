"""
Market Value Calculator

Calculates player market values for veteran contracts.
Based on position, overall rating, age, and experience.

All values are integer currency units scaled to the league salary cap, so
a cap change moves every market rate with it.
"""

from typing import Any, Dict

from constants.positions import Position


# Cap the base AAV tables were calibrated against
REFERENCE_SALARY_CAP = 255_000_000


class MarketValueCalculator:
    """
    Calculates estimated market value for player contracts.

    Based on:
    - Position market rates
    - Overall rating
    - Age curve
    - Years of experience
    """

    # Base Annual Average Value (AAV) for 85 overall player by position (in millions)
    POSITION_BASE_AAV = {
        # Tier 1: Premium positions
        Position.QB: 45.0,
        Position.DE: 25.0,  # Edge rusher
        Position.LT: 22.0,
        Position.RT: 22.0,

        # Tier 2: High-value positions
        Position.WR: 20.0,
        Position.CB: 18.0,
        Position.C: 15.0,

        # Tier 3: Standard positions
        Position.RB: 12.0,
        Position.OLB: 14.0,
        Position.ILB: 14.0,
        Position.FS: 13.0,
        Position.SS: 13.0,
        Position.LG: 14.0,
        Position.RG: 14.0,

        # Tier 4: Lower-value positions
        Position.TE: 11.0,
        Position.DT: 12.0,
        Position.K: 4.0,
        Position.P: 3.0
    }

    # Contract length by position (years)
    TYPICAL_CONTRACT_LENGTH = {
        Position.QB: 4,
        Position.DE: 4,
        Position.LT: 4,
        Position.RT: 4,
        Position.WR: 3,
        Position.CB: 3,
        Position.RB: 2,  # RBs get shorter deals
        Position.K: 3,
        Position.P: 3
    }

    # Peak age by position
    PEAK_AGE = {
        Position.QB: 28,
        Position.RB: 26,
        Position.WR: 27,
        Position.DE: 27,
        Position.LT: 28,
        Position.RT: 28,
        Position.CB: 27,
        Position.K: 30,
        Position.P: 30
    }

    PREMIUM_POSITIONS = (Position.QB, Position.DE, Position.LT, Position.RT)

    # Veteran minimum salary as a share of the cap, by years of experience
    MINIMUM_SALARY_CAP_PERCENT = (
        (0, 0.00329),
        (1, 0.00376),
        (2, 0.00423),
        (3, 0.00470),
        (4, 0.00493),
        (7, 0.00564),
    )

    def __init__(self, salary_cap: int = REFERENCE_SALARY_CAP):
        """
        Initialize market value calculator.

        Args:
            salary_cap: League salary cap (default: $255M)
        """
        if salary_cap <= 0:
            raise ValueError(f"salary_cap must be positive, got {salary_cap!r}")
        self.salary_cap = salary_cap
        self._cap_scale = salary_cap / REFERENCE_SALARY_CAP

    def calculate_player_value(
        self,
        position: Position,
        overall: int,
        age: int,
        years_pro: int
    ) -> Dict[str, Any]:
        """
        Calculate estimated market value for a player.

        Args:
            position: Player position
            overall: Overall rating (0-100)
            age: Player age
            years_pro: Years of league experience

        Returns:
            Dict with contract estimates:
            {
                'aav': Annual average value,
                'total_value': Total contract value,
                'years': Contract length,
                'guaranteed': Guaranteed money,
                'signing_bonus': Signing bonus,
                'guarantee_percentage': Guarantee percentage
            }
        """
        # Get base AAV for position
        base_aav = self.POSITION_BASE_AAV.get(position, 10.0)

        rating_multiplier = self._calculate_rating_multiplier(overall)
        age_multiplier = self._calculate_age_multiplier(position, age)
        experience_multiplier = self._calculate_experience_multiplier(years_pro)

        aav_millions = base_aav * rating_multiplier * age_multiplier * experience_multiplier
        aav = max(
            self.minimum_salary(years_pro),
            int(aav_millions * 1_000_000 * self._cap_scale)
        )

        years = self.calculate_contract_years(position, overall, age)
        total_value = aav * years

        guarantee_percentage = self._calculate_guarantee_percentage(overall, position)
        guaranteed = int(total_value * guarantee_percentage)

        # Signing bonus (typically 30-40% of total for spread)
        signing_bonus = int(total_value * 0.35)

        return {
            'aav': aav,
            'total_value': total_value,
            'years': years,
            'guaranteed': guaranteed,
            'signing_bonus': signing_bonus,
            'guarantee_percentage': round(guarantee_percentage * 100, 1)
        }

    def calculate_contract_years(self, position: Position, overall: int, age: int) -> int:
        """
        Contract length: position default, shortened for age and depth players.

        Young elite players get one extra year (max 5).
        """
        years = self.TYPICAL_CONTRACT_LENGTH.get(position, 3)

        # Older players get shorter deals
        if age > 30:
            years = min(years, 2)
        elif age > 28:
            years = min(years, 3)

        if overall < 60:
            years = 1
        elif overall < 72:
            years = min(years, 2)
        elif overall >= 85 and age < self.PEAK_AGE.get(position, 27) - 2:
            years = min(years + 1, 5)

        return max(1, years)

    def minimum_salary(self, years_pro: int) -> int:
        """League minimum for a player with the given experience."""
        percent = self.MINIMUM_SALARY_CAP_PERCENT[0][1]
        for threshold, cap_percent in self.MINIMUM_SALARY_CAP_PERCENT:
            if years_pro >= threshold:
                percent = cap_percent
        return int(self.salary_cap * percent)

    def _calculate_rating_multiplier(self, overall: int) -> float:
        """
        Calculate multiplier based on overall rating.

        85 overall = 1.0x (baseline)
        95 overall = 2.0x (elite)
        75 overall = 0.5x (below average starter)
        65 overall = 0.2x (backup)
        """
        if overall >= 90:
            # Elite players (90-99): 1.5x to 2.5x
            return 1.5 + ((overall - 90) / 10) * 1.0
        elif overall >= 85:
            # Good starters (85-89): 1.0x to 1.5x
            return 1.0 + ((overall - 85) / 5) * 0.5
        elif overall >= 75:
            # Average starters (75-84): 0.5x to 1.0x
            return 0.5 + ((overall - 75) / 10) * 0.5
        elif overall >= 65:
            # Backups (65-74): 0.2x to 0.5x
            return 0.2 + ((overall - 65) / 10) * 0.3
        else:
            # Deep backups (< 65): 0.02x to 0.1x
            return 0.02 + (max(0, overall) / 65) * 0.08

    def _calculate_age_multiplier(self, position: Position, age: int) -> float:
        """
        Calculate multiplier based on age curve.

        Peak age = 1.0x
        Age 23 = 0.9x (upside but unproven)
        Age 32 = 0.7x (decline phase)
        Age 35+ = 0.4x (near retirement)
        """
        peak = self.PEAK_AGE.get(position, 27)

        if age <= peak:
            years_before_peak = peak - age
            if years_before_peak <= 1:
                return 1.0
            else:
                return max(0.85, 1.0 - (years_before_peak * 0.05))
        else:
            years_past_peak = age - peak
            if years_past_peak <= 2:
                return max(0.85, 1.0 - (years_past_peak * 0.05))
            elif years_past_peak <= 5:
                return max(0.6, 0.85 - ((years_past_peak - 2) * 0.08))
            else:
                return max(0.3, 0.6 - ((years_past_peak - 5) * 0.1))

    def _calculate_experience_multiplier(self, years_pro: int) -> float:
        """
        Calculate multiplier based on experience.

        Young players (2-4 years) = 0.9x (first big contract)
        Prime players (5-8 years) = 1.0x (peak earning)
        Veterans (9+ years) = 0.95x (slight discount for age)
        """
        if years_pro <= 1:
            return 0.8
        elif years_pro <= 4:
            return 0.9
        elif years_pro <= 8:
            return 1.0
        else:
            return 0.95

    def _calculate_guarantee_percentage(self, overall: int, position: Position) -> float:
        """
        Calculate what percentage of contract should be guaranteed.

        Elite players: 60-70%
        Good starters: 50-60%
        Average starters: 40-50%
        Backups: 20-30%
        """
        if overall >= 90:
            base = 0.65
        elif overall >= 85:
            base = 0.55
        elif overall >= 80:
            base = 0.45
        elif overall >= 75:
            base = 0.35
        else:
            base = 0.25

        if position in self.PREMIUM_POSITIONS:
            base += 0.05

        return min(0.75, base)  # Cap at 75%
