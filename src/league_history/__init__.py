"""
League History

Multi-year history simulation: season loop, offseason, summaries,
invariant checks, the initial league bootstrap, and a Qt progress bridge
(LeagueHistoryController, imported from league_history.history_controller
so the core simulator does not require Qt).
"""

from .history_exceptions import (
    HistorySimulationException,
    LeagueInvariantException,
    SimulationCancelledException,
)
from .history_models import (
    HistoricalSeasonSummary,
    HistorySimulationResult,
    SeasonCycleResult,
    SeasonOutcome,
)
from .invariants import find_invariant_violations, validate_league_invariants
from .league_bootstrap import create_initial_league
from .league_history_simulator import LeagueHistorySimulator

__all__ = [
    'HistorySimulationException',
    'LeagueInvariantException',
    'SimulationCancelledException',
    'HistoricalSeasonSummary',
    'HistorySimulationResult',
    'SeasonCycleResult',
    'SeasonOutcome',
    'find_invariant_violations',
    'validate_league_invariants',
    'create_initial_league',
    'LeagueHistorySimulator',
]
