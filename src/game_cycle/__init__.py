"""
Game Cycle - quick season simulation.

Resolves games from team strength instead of play-by-play, runs the
regular season week by week, and folds results into team records.
"""

from .quick_game_simulator import QuickGameSimulator, QuickGameResult, TeamStrength, BoxScore
from .season_simulator import (
    SeasonSimulator, SeasonSimulationResult, reset_current_records, update_team_records
)

__all__ = [
    "QuickGameSimulator",
    "QuickGameResult",
    "TeamStrength",
    "BoxScore",
    "SeasonSimulator",
    "SeasonSimulationResult",
    "reset_current_records",
    "update_team_records",
]
