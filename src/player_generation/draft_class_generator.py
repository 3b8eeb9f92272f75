"""
Draft Class Generator

Builds a year's pool of draft prospects, ordered best first so the top of
the list is what teams evaluate when they are on the clock.
"""

from dataclasses import replace
import logging
from typing import Optional

from constants.positions import IDEAL_POSITION_COUNTS, Position
from league_state.draft_models import DraftClass
from league_state.player_models import Prospect
from player_generation.player_generator import PlayerGenerator, new_entity_id


DEFAULT_CLASS_SIZE = 256      # 7 rounds x 32 picks + UDFA pool
PICKS_PER_ROUND = 32
UNDRAFTED_ROUND = 8

logger = logging.getLogger(__name__)


class DraftClassGenerator:
    """
    Generates draft classes.

    Usage:
        draft_gen = DraftClassGenerator(PlayerGenerator(rng))
        draft_class = draft_gen.generate_draft_class(2026)
    """

    def __init__(self, player_generator: PlayerGenerator, class_size: int = DEFAULT_CLASS_SIZE):
        if class_size < 1:
            raise ValueError(f"class_size must be positive, got {class_size}")
        self.player_generator = player_generator
        self.class_size = class_size

    @property
    def rng(self):
        return self.player_generator.rng

    def generate_draft_class(self, year: int, size: Optional[int] = None) -> DraftClass:
        """
        Generate all prospects for a draft year.

        Prospects are ranked by potential (then overall) and given a
        projected round from that rank; the tail projects as undrafted.
        """
        count = size or self.class_size
        prospects = [self.generate_prospect() for _ in range(count)]
        prospects.sort(key=lambda p: (p.potential, p.overall), reverse=True)

        ranked = tuple(
            _with_projected_round(prospect, rank) for rank, prospect in enumerate(prospects)
        )
        logger.debug(f"Generated {len(ranked)} prospects for the {year} draft")
        return DraftClass(year=year, prospects=ranked)

    def generate_prospect(self, position: Optional[Position] = None) -> Prospect:
        """Generate one prospect; position is drawn by roster demand if omitted."""
        rng = self.rng
        if position is None:
            positions = list(IDEAL_POSITION_COUNTS)
            position = rng.choices(
                positions, weights=[IDEAL_POSITION_COUNTS[p] for p in positions], k=1
            )[0]

        # Long tail: most prospects are raw, a handful are ready to start
        overall = min(80, int(45 + rng.betavariate(2, 4) * 40))
        potential = min(99, overall + rng.randint(5, 30))
        first_name, last_name = self.player_generator.name_generator.generate()

        return Prospect(
            prospect_id=new_entity_id(rng, "player"),
            first_name=first_name,
            last_name=last_name,
            position=position,
            age=rng.randint(21, 23),
            overall=overall,
            potential=potential,
            projected_round=UNDRAFTED_ROUND,
        )


def _with_projected_round(prospect: Prospect, rank: int) -> Prospect:
    return replace(prospect, projected_round=min(UNDRAFTED_ROUND, rank // PICKS_PER_ROUND + 1))
