"""
Standings Module

Ordered, tie-broken standings computed from completed games, and the
playoff field derived from them.
"""

from .standings_models import LeagueStandings, TeamStanding
from .standings_calculator import (
    StandingsCalculator, calculate_standings, records_from_games, sort_standings,
    tiebreak_key, previous_year_division_standings
)

__all__ = [
    'LeagueStandings',
    'TeamStanding',
    'StandingsCalculator',
    'calculate_standings',
    'records_from_games',
    'sort_standings',
    'tiebreak_key',
    'previous_year_division_standings',
]
