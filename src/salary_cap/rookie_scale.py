"""
Rookie Wage Scale

Drafted players sign four-year deals whose value is a fixed share of the
salary cap, set by overall pick. Shares are interpolated between anchor
picks, so every slot is slightly cheaper than the one before it.

At a 255.4M cap:
- Pick #1: ~48.4M total (18.95% of cap)
- Pick #32: ~12M total (4.7% of cap)
- Picks #101 and later: ~4M total (1.57% of cap)
"""

from dataclasses import dataclass
from typing import Sequence, Tuple


ROOKIE_CONTRACT_YEARS = 4

# (overall pick, share of cap for the whole contract); linear between anchors
CAP_SHARE_ANCHORS: Tuple[Tuple[int, float], ...] = (
    (1, 0.1895),
    (32, 0.047),
    (64, 0.025),
    (100, 0.018),
)
LATE_ROUND_CAP_SHARE = 0.0157

# (last pick in band, signing bonus share of total value)
SIGNING_BONUS_BANDS: Tuple[Tuple[int, float], ...] = (
    (10, 0.665),
    (20, 0.55),
    (32, 0.50),
    (64, 0.40),
    (100, 0.30),
)
LATE_ROUND_BONUS_SHARE = 0.10

# Years 2-4 split of the value left after the bonus; year 1 pays the minimum
SALARY_ESCALATION = (0.25, 0.35, 0.40)

ROOKIE_MINIMUM_CAP_SHARE = 0.00329      # ~840K at a 255M cap
FIRST_ROUND_PICKS = 32


@dataclass(frozen=True)
class RookieContractValues:
    """Contract terms for one draft slot."""

    total_value: int
    signing_bonus: int
    base_salaries: Tuple[int, ...]
    guaranteed_amounts: Tuple[int, ...]
    has_fifth_year_option: bool

    @property
    def annual_cap_hits(self) -> Tuple[int, ...]:
        """Base salary plus the evenly prorated signing bonus, per year."""
        proration = self.signing_bonus // ROOKIE_CONTRACT_YEARS
        return tuple(salary + proration for salary in self.base_salaries)

    @property
    def guaranteed_money(self) -> int:
        return self.signing_bonus + sum(self.guaranteed_amounts)


def interpolate_share(pick: int, anchors: Sequence[Tuple[int, float]], floor: float) -> float:
    """Cap share for a pick, linear between the surrounding anchors."""
    if pick <= anchors[0][0]:
        return anchors[0][1]
    for (low_pick, low_share), (high_pick, high_share) in zip(anchors, anchors[1:]):
        if pick <= high_pick:
            progress = (pick - low_pick) / (high_pick - low_pick)
            return low_share + progress * (high_share - low_share)
    return floor


def band_share(pick: int, bands: Sequence[Tuple[int, float]], default: float) -> float:
    for last_pick, share in bands:
        if pick <= last_pick:
            return share
    return default


class RookieScaleCalculator:
    """
    Rookie contract values for a given salary cap.

    Shares never change; only the cap passed in does. First-round picks
    are fully guaranteed and carry a fifth-year option; later picks only
    have their signing bonus guaranteed.
    """

    def __init__(self, salary_cap: int):
        """
        Args:
            salary_cap: League salary cap (e.g., 255_400_000)

        Raises:
            ValueError: If salary_cap is not a positive integer
        """
        if not isinstance(salary_cap, int) or salary_cap <= 0:
            raise ValueError(
                f"salary_cap must be a positive integer, got {salary_cap!r}"
            )

        self.salary_cap = salary_cap
        self.rookie_minimum = int(salary_cap * ROOKIE_MINIMUM_CAP_SHARE)

    def calculate_contract(self, draft_pick: int) -> RookieContractValues:
        """
        Contract values for an overall pick.

        Args:
            draft_pick: Overall pick number (1 or higher; extra rounds
                past pick 224 use the late-round share)

        Raises:
            ValueError: If draft_pick is not a positive integer
        """
        if not isinstance(draft_pick, int) or draft_pick < 1:
            raise ValueError(
                f"draft_pick must be a positive integer, got {draft_pick!r}"
            )

        share = interpolate_share(draft_pick, CAP_SHARE_ANCHORS, LATE_ROUND_CAP_SHARE)
        total_value = int(self.salary_cap * share)
        signing_bonus = int(
            total_value * band_share(draft_pick, SIGNING_BONUS_BANDS, LATE_ROUND_BONUS_SHARE)
        )

        remaining = total_value - signing_bonus
        base_salaries = (self.rookie_minimum,) + tuple(
            int(remaining * portion) for portion in SALARY_ESCALATION
        )

        first_round = draft_pick <= FIRST_ROUND_PICKS
        return RookieContractValues(
            total_value=total_value,
            signing_bonus=signing_bonus,
            base_salaries=base_salaries,
            guaranteed_amounts=base_salaries if first_round else (0,) * ROOKIE_CONTRACT_YEARS,
            has_fifth_year_option=first_round,
        )
