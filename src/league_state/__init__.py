"""
League State Package

Immutable data model for the league simulation: teams, players, contracts,
coaches, draft picks, and the LeagueState snapshot threaded through every
season and offseason stage.
"""

from .coach_models import Coach, CoachRole
from .contract_models import Contract
from .draft_models import DraftClass, DraftPick
from .player_models import InjuryStatus, Player, PlayerTier, Prospect
from .team_models import AllTimeRecord, Team, TeamFinances, TeamRecord
from .league_state import LeagueState

__all__ = [
    'Coach',
    'CoachRole',
    'Contract',
    'DraftClass',
    'DraftPick',
    'InjuryStatus',
    'Player',
    'PlayerTier',
    'Prospect',
    'AllTimeRecord',
    'Team',
    'TeamFinances',
    'TeamRecord',
    'LeagueState',
]
