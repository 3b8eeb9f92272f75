"""
Draft Data Models

Draft picks and draft classes.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from league_state.player_models import Prospect


@dataclass(frozen=True)
class DraftPick:
    """
    A single draft selection slot.

    pick_id format: "pick-{year}-{round}-{overall}".
    """
    pick_id: str
    year: int
    round: int                       # 1-7
    pick_in_round: int               # 1-32
    overall_pick: int                # 1-224
    original_team_id: int
    current_team_id: int
    trade_history: Tuple[str, ...] = ()
    player_id: Optional[str] = None  # Set once the pick is used

    @property
    def is_traded(self) -> bool:
        return self.original_team_id != self.current_team_id

    @staticmethod
    def make_id(year: int, round_number: int, overall_pick: int) -> str:
        return f"pick-{year}-{round_number}-{overall_pick}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pick_id': self.pick_id,
            'year': self.year,
            'round': self.round,
            'pick_in_round': self.pick_in_round,
            'overall_pick': self.overall_pick,
            'original_team_id': self.original_team_id,
            'current_team_id': self.current_team_id,
            'trade_history': list(self.trade_history),
            'player_id': self.player_id,
        }


@dataclass(frozen=True)
class DraftClass:
    """All prospects eligible for one year's draft."""
    year: int
    prospects: Tuple[Prospect, ...]

    def __len__(self) -> int:
        return len(self.prospects)

    def get_prospect(self, prospect_id: str) -> Optional[Prospect]:
        for prospect in self.prospects:
            if prospect.prospect_id == prospect_id:
                return prospect
        return None
