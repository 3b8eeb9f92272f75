"""
Team Needs Analyzer

Analyzes a team roster to identify positional shortfalls.
Used by AI to make draft, free agency and roster-fill decisions.
"""

from collections import Counter
from typing import Dict, Iterable, Mapping

from constants.positions import IDEAL_POSITION_COUNTS, Position
from league_state.league_state import LeagueState
from league_state.player_models import Player


class TeamNeedsAnalyzer:
    """
    Compares a roster's position counts with the ideal depth chart.

    A need is the deficit at a position: ideal count minus current count,
    only when positive.
    """

    def __init__(self, ideal_counts: Mapping[Position, int] = IDEAL_POSITION_COUNTS):
        self.ideal_counts = dict(ideal_counts)

    def position_counts(self, players: Iterable[Player]) -> Counter:
        return Counter(player.position for player in players)

    def analyze_team_needs(self, players: Iterable[Player]) -> Dict[Position, int]:
        """
        Positional deficits for a roster.

        Args:
            players: Players currently on the roster

        Returns:
            Position -> deficit, largest deficit first (ties in depth chart order)
        """
        return self.needs_from_counts(self.position_counts(players))

    def needs_from_counts(self, counts: Mapping[Position, int]) -> Dict[Position, int]:
        """Deficits from precomputed position counts (same ordering as analyze_team_needs)."""
        needs = {
            position: ideal - counts.get(position, 0)
            for position, ideal in self.ideal_counts.items()
            if ideal - counts.get(position, 0) > 0
        }
        order = list(self.ideal_counts)
        return dict(sorted(needs.items(), key=lambda item: (-item[1], order.index(item[0]))))

    def position_deficit(self, counts: Mapping[Position, int], position: Position) -> int:
        """Ideal minus current count at one position; negative when overstocked."""
        return self.ideal_counts.get(position, 0) - counts.get(position, 0)

    def analyze_state(self, state: LeagueState, team_id: int) -> Dict[Position, int]:
        """Needs for a team in a league state (unknown team = every position)."""
        return self.analyze_team_needs(state.roster_players(team_id))
