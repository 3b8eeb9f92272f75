"""
Constants package for the league simulation

Contains league structure (conferences, divisions, team IDs) and roster
position constants used throughout the simulation system.
"""

from .league_structure import (
    TOTAL_TEAMS, CONFERENCES, DIVISION_NAMES, NFL_DIVISIONS, NFL_CONFERENCES,
    all_team_ids, get_conference, get_division, get_division_index
)
from .positions import (
    Position, OFFENSIVE_POSITIONS, DEFENSIVE_POSITIONS, IDEAL_POSITION_COUNTS,
    MAX_ROSTER_SIZE, MIN_ROSTER_SIZE
)

__all__ = [
    'TOTAL_TEAMS',
    'CONFERENCES',
    'DIVISION_NAMES',
    'NFL_DIVISIONS',
    'NFL_CONFERENCES',
    'all_team_ids',
    'get_conference',
    'get_division',
    'get_division_index',
    'Position',
    'OFFENSIVE_POSITIONS',
    'DEFENSIVE_POSITIONS',
    'IDEAL_POSITION_COUNTS',
    'MAX_ROSTER_SIZE',
    'MIN_ROSTER_SIZE',
]
