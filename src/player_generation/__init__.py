"""
Player Generation

Seedable generators for the entities the league simulation creates:
players and rosters, draft classes, contracts, and coaching staff.
"""

from .name_generator import NameGenerator
from .player_generator import PlayerGenerator, new_entity_id, roster_template
from .draft_class_generator import DraftClassGenerator
from .contract_generator import ContractGenerator
from .coach_generator import CoachGenerator

__all__ = [
    'NameGenerator',
    'PlayerGenerator',
    'new_entity_id',
    'roster_template',
    'DraftClassGenerator',
    'ContractGenerator',
    'CoachGenerator',
]
