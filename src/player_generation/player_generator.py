"""
Player Generator

Seedable generation of players and full 53-man rosters. Ratings are drawn
inside a tier band chosen by weight, so callers control roster quality by
passing tier weights rather than raw ratings.
"""

import logging
import random
import uuid
from typing import Dict, List, Mapping, Optional, Tuple

from constants.positions import IDEAL_POSITION_COUNTS, MAX_ROSTER_SIZE, Position
from league_state.player_models import Player, PlayerTier
from player_generation.name_generator import NameGenerator


# Overall rating band per tier (inclusive)
TIER_RATING_RANGES: Dict[PlayerTier, Tuple[int, int]] = {
    PlayerTier.ELITE: (85, 95),
    PlayerTier.STARTER: (72, 84),
    PlayerTier.BACKUP: (60, 71),
    PlayerTier.FRINGE: (45, 59),
}

DEFAULT_TIER_WEIGHTS: Dict[PlayerTier, float] = {
    PlayerTier.ELITE: 0.04,
    PlayerTier.STARTER: 0.32,
    PlayerTier.BACKUP: 0.40,
    PlayerTier.FRINGE: 0.24,
}

# Depth players generated to fill out a roster
DEPTH_TIER_WEIGHTS: Dict[PlayerTier, float] = {
    PlayerTier.BACKUP: 0.2,
    PlayerTier.FRINGE: 0.8,
}

# Extra bodies on top of the ideal depth chart (47 + 6 = 53)
ROSTER_FLEX_POSITIONS: Tuple[Position, ...] = (
    Position.WR, Position.CB, Position.DE, Position.OLB, Position.DT, Position.SS,
)

DEFAULT_AGE_RANGE = (22, 33)


def new_entity_id(rng: random.Random, prefix: str) -> str:
    """Deterministic (per seed) unique id, e.g. 'player-1c9e...'."""
    return f"{prefix}-{uuid.UUID(int=rng.getrandbits(128), version=4)}"


def roster_template() -> List[Position]:
    """Positions for a full roster, ideal depth first then flex spots."""
    positions = []
    for position, count in IDEAL_POSITION_COUNTS.items():
        positions.extend([position] * count)
    positions.extend(ROSTER_FLEX_POSITIONS)
    return positions[:MAX_ROSTER_SIZE]


class PlayerGenerator:
    """
    Generates players.

    Usage:
        generator = PlayerGenerator(random.Random(42))
        qb = generator.generate_player(Position.QB, team_id=7)
        roster = generator.generate_roster(team_id=7)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        name_generator: Optional[NameGenerator] = None
    ):
        self.rng = rng or random.Random()
        self.name_generator = name_generator or NameGenerator(self.rng)
        self.logger = logging.getLogger(__name__)

    def generate_player(
        self,
        position: Position,
        team_id: Optional[int] = None,
        age_range: Tuple[int, int] = DEFAULT_AGE_RANGE,
        tier_weights: Optional[Mapping[PlayerTier, float]] = None
    ) -> Player:
        """
        Generate a single player.

        Args:
            position: Roster position
            team_id: Owning team, None for a free agent
            age_range: Inclusive (min, max) age
            tier_weights: Relative odds per tier (defaults to league-wide mix)

        Returns:
            Unsigned Player (contract_id is None)
        """
        tier = self._choose_tier(tier_weights or DEFAULT_TIER_WEIGHTS)
        low, high = TIER_RATING_RANGES[tier]
        overall = self.rng.randint(low, high)

        age = self.rng.randint(*age_range)
        experience = max(0, age - self.rng.randint(21, 23))
        first_name, last_name = self.name_generator.generate()

        return Player(
            player_id=new_entity_id(self.rng, "player"),
            first_name=first_name,
            last_name=last_name,
            position=position,
            age=age,
            experience=experience,
            overall=overall,
            potential=self._potential_for(overall, age),
            team_id=team_id,
        )

    def generate_roster(self, team_id: int) -> List[Player]:
        """Generate a full 53-man roster following the ideal depth chart."""
        roster = [
            self.generate_player(position, team_id=team_id)
            for position in roster_template()
        ]
        self.logger.debug(f"Generated {len(roster)} players for team {team_id}")
        return roster

    def generate_depth_player(self, position: Position, team_id: Optional[int]) -> Player:
        """Young backup/fringe player used to fill short rosters."""
        return self.generate_player(
            position,
            team_id=team_id,
            age_range=(22, 28),
            tier_weights=DEPTH_TIER_WEIGHTS,
        )

    def _choose_tier(self, weights: Mapping[PlayerTier, float]) -> PlayerTier:
        tiers = list(weights.keys())
        return self.rng.choices(tiers, weights=[weights[t] for t in tiers], k=1)[0]

    def _potential_for(self, overall: int, age: int) -> int:
        # Room to grow shrinks to zero by 28
        headroom = max(0, 28 - age) * 3
        return min(99, overall + self.rng.randint(0, headroom))
