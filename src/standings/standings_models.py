"""
Standings Data Models

Ordered standings for one season: per-team entries plus division,
conference and league orderings produced by the tiebreak chain.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from league_state.team_models import TeamRecord


@dataclass(frozen=True)
class TeamStanding:
    """A team's final record with its rank in each grouping (1-based)."""
    team_id: int
    conference: str
    division: str
    record: TeamRecord
    division_rank: int = 0
    conference_rank: int = 0
    league_rank: int = 0

    @property
    def wins(self) -> int:
        return self.record.wins

    @property
    def losses(self) -> int:
        return self.record.losses

    @property
    def ties(self) -> int:
        return self.record.ties

    @property
    def win_percentage(self) -> float:
        return self.record.win_percentage

    @property
    def point_differential(self) -> int:
        return self.record.point_differential

    @property
    def is_division_winner(self) -> bool:
        return self.division_rank == 1

    def tiebreak_values(self) -> Tuple[float, float, float, int]:
        """Values compared by the tiebreak chain, best first when larger."""
        return (
            self.record.win_percentage,
            self.record.division_win_percentage,
            self.record.conference_win_percentage,
            self.record.point_differential,
        )


@dataclass(frozen=True)
class LeagueStandings:
    """
    Complete standings.

    divisions / conferences / league hold team IDs best first.
    """
    season: int
    teams: Mapping[int, TeamStanding]
    divisions: Mapping[str, List[int]]
    conferences: Mapping[str, List[int]]
    league: List[int]

    def get(self, team_id: int) -> Optional[TeamStanding]:
        return self.teams.get(team_id)

    def division_rank(self, team_id: int) -> Optional[int]:
        standing = self.teams.get(team_id)
        return standing.division_rank if standing else None

    def division_winners(self, conference: str) -> List[int]:
        """Division winners of a conference, ordered by the tiebreak chain."""
        return [
            team_id for team_id in self.conferences.get(conference, [])
            if self.teams[team_id].is_division_winner
        ]

    def previous_year_division_standings(self) -> Dict[str, List[int]]:
        """Division finish order in the format the schedule generator expects."""
        return {division: list(order) for division, order in self.divisions.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'season': self.season,
            'divisions': {name: list(order) for name, order in self.divisions.items()},
            'conferences': {name: list(order) for name, order in self.conferences.items()},
            'league': list(self.league),
            'records': {
                team_id: standing.record.record_string
                for team_id, standing in self.teams.items()
            },
        }
