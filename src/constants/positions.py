"""
Position Constants

Roster positions, position groups, and the ideal depth counts the AI uses
when drafting, signing free agents, and filling rosters.
"""

from enum import Enum
from typing import Dict, FrozenSet


class Position(Enum):
    """Roster positions (value is the underscore name used in data)."""
    QB = "quarterback"
    RB = "running_back"
    WR = "wide_receiver"
    TE = "tight_end"
    LT = "left_tackle"
    LG = "left_guard"
    C = "center"
    RG = "right_guard"
    RT = "right_tackle"
    DE = "defensive_end"
    DT = "defensive_tackle"
    OLB = "outside_linebacker"
    ILB = "inside_linebacker"
    CB = "cornerback"
    FS = "free_safety"
    SS = "strong_safety"
    K = "kicker"
    P = "punter"

    @property
    def abbreviation(self) -> str:
        """Short display name (e.g., 'QB')."""
        return self.name


OFFENSIVE_POSITIONS: FrozenSet[Position] = frozenset({
    Position.QB, Position.RB, Position.WR, Position.TE,
    Position.LT, Position.LG, Position.C, Position.RG, Position.RT,
})

DEFENSIVE_POSITIONS: FrozenSet[Position] = frozenset({
    Position.DE, Position.DT, Position.OLB, Position.ILB,
    Position.CB, Position.FS, Position.SS,
})

SPECIAL_TEAMS_POSITIONS: FrozenSet[Position] = frozenset({Position.K, Position.P})

# Target depth per position for a 53-man roster (47 slots, 6 flex)
IDEAL_POSITION_COUNTS: Dict[Position, int] = {
    Position.QB: 2,
    Position.RB: 3,
    Position.WR: 5,
    Position.TE: 3,
    Position.LT: 2,
    Position.LG: 2,
    Position.C: 2,
    Position.RG: 2,
    Position.RT: 2,
    Position.DE: 4,
    Position.DT: 3,
    Position.OLB: 3,
    Position.ILB: 3,
    Position.CB: 5,
    Position.FS: 2,
    Position.SS: 2,
    Position.K: 1,
    Position.P: 1,
}

# Roster limits
MAX_ROSTER_SIZE = 53
MIN_ROSTER_SIZE = 45
