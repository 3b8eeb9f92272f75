"""
Player Data Models

Players on rosters or in the free agent pool, and draft prospects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from constants.positions import Position


class PlayerTier(Enum):
    """Role value derived from overall rating."""
    ELITE = "elite"
    STARTER = "starter"
    BACKUP = "backup"
    FRINGE = "fringe"

    @property
    def rank(self) -> int:
        """Sort key, higher is better (elite=4 ... fringe=1)."""
        return {
            PlayerTier.ELITE: 4,
            PlayerTier.STARTER: 3,
            PlayerTier.BACKUP: 2,
            PlayerTier.FRINGE: 1,
        }[self]

    @classmethod
    def from_overall(cls, overall: int) -> 'PlayerTier':
        if overall >= 85:
            return cls.ELITE
        if overall >= 72:
            return cls.STARTER
        if overall >= 60:
            return cls.BACKUP
        return cls.FRINGE


class InjuryStatus(Enum):
    HEALTHY = "healthy"
    QUESTIONABLE = "questionable"
    OUT = "out"
    INJURED_RESERVE = "injured_reserve"


@dataclass(frozen=True)
class Player:
    """
    A professional player.

    team_id is None for free agents; contract_id is None when unsigned.
    """
    player_id: str
    first_name: str
    last_name: str
    position: Position
    age: int
    experience: int                  # Years in the league
    overall: int                     # Current true skill (0-99)
    potential: int                   # Ceiling the player can develop toward
    team_id: Optional[int] = None
    contract_id: Optional[str] = None
    injury_status: InjuryStatus = InjuryStatus.HEALTHY

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def tier(self) -> PlayerTier:
        return PlayerTier.from_overall(self.overall)

    @property
    def is_signed(self) -> bool:
        return self.contract_id is not None


@dataclass(frozen=True)
class Prospect:
    """A draft-eligible prospect in a year's draft class."""
    prospect_id: str
    first_name: str
    last_name: str
    position: Position
    age: int
    overall: int
    potential: int
    projected_round: int             # 1-7, 8 = likely undrafted

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_player(
        self,
        team_id: Optional[int] = None,
        contract_id: Optional[str] = None
    ) -> Player:
        """Convert a prospect into a rookie player (same ID)."""
        return Player(
            player_id=self.prospect_id,
            first_name=self.first_name,
            last_name=self.last_name,
            position=self.position,
            age=self.age,
            experience=0,
            overall=self.overall,
            potential=self.potential,
            team_id=team_id,
            contract_id=contract_id,
        )
