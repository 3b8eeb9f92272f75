"""
Coach Data Model
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CoachRole(Enum):
    HEAD_COACH = "head_coach"
    OFFENSIVE_COORDINATOR = "offensive_coordinator"
    DEFENSIVE_COORDINATOR = "defensive_coordinator"


@dataclass(frozen=True)
class Coach:
    """A coaching staff member."""
    coach_id: str
    first_name: str
    last_name: str
    role: CoachRole
    team_id: Optional[int]
    game_day_iq: int                 # 0-100, 50 is league average
    contract_years_remaining: int
    hired_year: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

