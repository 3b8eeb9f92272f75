"""
Playoff System

Seeding, the bracket state machine (with divisional reseeding), and the
quick-sim playoff simulator.
"""

from .seeding_models import PlayoffSeed, ConferenceSeeding, PlayoffSeeding
from .playoff_seeder import PlayoffSeeder
from .bracket_models import PlayoffBracket, PlayoffMatchup, PlayoffRound
from .playoff_state import advance, create_bracket, record_result, reseed
from .playoff_simulator import PlayoffResults, PlayoffSimulator

__all__ = [
    'PlayoffSeed',
    'ConferenceSeeding',
    'PlayoffSeeding',
    'PlayoffSeeder',
    'PlayoffBracket',
    'PlayoffMatchup',
    'PlayoffRound',
    'advance',
    'create_bracket',
    'record_result',
    'reseed',
    'PlayoffResults',
    'PlayoffSimulator',
]
