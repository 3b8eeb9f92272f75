"""
Schedule Data Models

Scheduled games and the complete season schedule.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from constants.league_structure import same_conference, same_division
from scheduling.config import ScheduleStrategy


class ScheduleComponent(Enum):
    """Which part of the schedule formula produced a game."""
    DIVISIONAL = "A"          # Home and away vs each division rival
    INTRA_CONFERENCE = "B"    # Rotating same-conference division
    INTER_CONFERENCE = "C"    # Rotating opposite-conference division
    STANDINGS_BASED = "D"     # Same-finish teams, two remaining divisions
    SEVENTEENTH_GAME = "E"    # Same-finish team, opposite conference
    RANDOM_PAIRING = "R"      # Fallback pairing


@dataclass(frozen=True)
class ScheduledGame:
    """A regular season game slot, with its result once played."""
    game_id: str
    week: int                          # 1-18
    home_team_id: int
    away_team_id: int
    component: ScheduleComponent
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    is_completed: bool = False

    @property
    def is_divisional(self) -> bool:
        return same_division(self.home_team_id, self.away_team_id)

    @property
    def is_conference(self) -> bool:
        return same_conference(self.home_team_id, self.away_team_id)

    @property
    def is_tie(self) -> bool:
        return self.is_completed and self.home_score == self.away_score

    @property
    def winner_id(self) -> Optional[int]:
        """Winning team ID, or None when unplayed or tied."""
        if not self.is_completed or self.home_score == self.away_score:
            return None
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    @property
    def loser_id(self) -> Optional[int]:
        winner = self.winner_id
        if winner is None:
            return None
        return self.away_team_id if winner == self.home_team_id else self.home_team_id

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def opponent_of(self, team_id: int) -> int:
        return self.away_team_id if team_id == self.home_team_id else self.home_team_id

    def with_result(self, home_score: int, away_score: int) -> 'ScheduledGame':
        return replace(self, home_score=home_score, away_score=away_score, is_completed=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'game_id': self.game_id,
            'week': self.week,
            'home_team_id': self.home_team_id,
            'away_team_id': self.away_team_id,
            'component': self.component.value,
            'home_score': self.home_score,
            'away_score': self.away_score,
            'is_completed': self.is_completed,
        }


@dataclass(frozen=True)
class SeasonSchedule:
    """
    Complete regular season schedule.

    bye_weeks maps team_id -> the single week the team does not play.
    """
    season_year: int
    games: Tuple[ScheduledGame, ...]
    bye_weeks: Mapping[int, int]
    strategy: ScheduleStrategy
    total_weeks: int = 18

    @property
    def total_games(self) -> int:
        return len(self.games)

    @property
    def is_complete(self) -> bool:
        return all(game.is_completed for game in self.games)

    def get_week_games(self, week: int) -> List[ScheduledGame]:
        return [game for game in self.games if game.week == week]

    def get_team_games(self, team_id: int) -> List[ScheduledGame]:
        """All games for a team ordered by week."""
        return sorted(
            (game for game in self.games if game.involves(team_id)),
            key=lambda game: game.week
        )

    def completed_games(self) -> List[ScheduledGame]:
        return [game for game in self.games if game.is_completed]

    def get_matchup(self, team_a: int, team_b: int) -> List[ScheduledGame]:
        return [
            game for game in self.games
            if game.involves(team_a) and game.involves(team_b)
        ]

    def with_games(self, games: Tuple[ScheduledGame, ...]) -> 'SeasonSchedule':
        return replace(self, games=tuple(games))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'season_year': self.season_year,
            'strategy': self.strategy.value,
            'total_weeks': self.total_weeks,
            'bye_weeks': dict(self.bye_weeks),
            'games': [game.to_dict() for game in self.games],
        }


def make_game_id(season_year: int, week: int, away_team_id: int, home_team_id: int) -> str:
    return f"{season_year}-W{week:02d}-{away_team_id}@{home_team_id}"
