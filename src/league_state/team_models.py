"""
Team Data Models

Team value objects: season record, all-time record, finances, and the
team itself. All models are frozen; updates return new instances.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from constants.league_structure import TEAM_INFO, get_conference, get_division


@dataclass(frozen=True)
class TeamRecord:
    """Current-season record with the splits used by the tiebreak chain."""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: int = 0
    points_against: int = 0
    division_wins: int = 0
    division_losses: int = 0
    division_ties: int = 0
    conference_wins: int = 0
    conference_losses: int = 0
    conference_ties: int = 0
    streak: int = 0              # +N = N straight wins, -N = N straight losses

    @property
    def games_played(self) -> int:
        """Total games played"""
        return self.wins + self.losses + self.ties

    @property
    def win_percentage(self) -> float:
        """Win percentage with ties counted as half a win."""
        return _percentage(self.wins, self.losses, self.ties)

    @property
    def division_win_percentage(self) -> float:
        return _percentage(self.division_wins, self.division_losses, self.division_ties)

    @property
    def conference_win_percentage(self) -> float:
        return _percentage(self.conference_wins, self.conference_losses, self.conference_ties)

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    @property
    def record_string(self) -> str:
        """Get record as string (e.g., '13-4' or '10-6-1')."""
        if self.ties > 0:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    def with_game(
        self,
        points_for: int,
        points_against: int,
        is_divisional: bool,
        is_conference: bool
    ) -> 'TeamRecord':
        """
        Fold one completed game into the record.

        Args:
            points_for: Points scored by this team
            points_against: Points allowed
            is_divisional: Game was against a division rival
            is_conference: Game was against a conference opponent

        Returns:
            New TeamRecord including the game
        """
        won = points_for > points_against
        tied = points_for == points_against

        changes: Dict[str, int] = {
            'points_for': self.points_for + points_for,
            'points_against': self.points_against + points_against,
        }

        if tied:
            outcome = 'ties'
            streak = self.streak
        elif won:
            outcome = 'wins'
            streak = self.streak + 1 if self.streak > 0 else 1
        else:
            outcome = 'losses'
            streak = self.streak - 1 if self.streak < 0 else -1

        changes[outcome] = getattr(self, outcome) + 1
        changes['streak'] = streak
        if is_divisional:
            key = f"division_{outcome}"
            changes[key] = getattr(self, key) + 1
        if is_conference:
            key = f"conference_{outcome}"
            changes[key] = getattr(self, key) + 1

        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'wins': self.wins,
            'losses': self.losses,
            'ties': self.ties,
            'points_for': self.points_for,
            'points_against': self.points_against,
            'division_record': f"{self.division_wins}-{self.division_losses}-{self.division_ties}",
            'conference_record': f"{self.conference_wins}-{self.conference_losses}-{self.conference_ties}",
            'streak': self.streak,
        }


@dataclass(frozen=True)
class AllTimeRecord:
    """Franchise totals accumulated across every simulated season."""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    championships: int = 0
    last_championship_year: Optional[int] = None
    playoff_appearances: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    def fold_season(
        self,
        season: TeamRecord,
        year: int,
        made_playoffs: bool = False,
        won_championship: bool = False
    ) -> 'AllTimeRecord':
        """Add a finished season to the franchise totals."""
        return AllTimeRecord(
            wins=self.wins + season.wins,
            losses=self.losses + season.losses,
            ties=self.ties + season.ties,
            championships=self.championships + (1 if won_championship else 0),
            last_championship_year=year if won_championship else self.last_championship_year,
            playoff_appearances=self.playoff_appearances + (1 if made_playoffs else 0),
        )


@dataclass(frozen=True)
class TeamFinances:
    """Cap position for the upcoming league year (currency units are opaque ints)."""
    salary_cap: int = 0
    cap_usage: int = 0
    cap_space: int = 0
    next_year_commitments: int = 0
    two_year_commitments: int = 0
    three_year_commitments: int = 0


@dataclass(frozen=True)
class Team:
    """
    A franchise. Persists across the whole multi-year run.

    The roster holds player IDs only; player and contract details live in
    the LeagueState lookups.
    """
    team_id: int                             # 1-32
    city: str
    nickname: str
    abbreviation: str
    conference: str                          # "AFC" or "NFC"
    division: str                            # e.g., "AFC North"
    roster: Tuple[str, ...] = ()
    head_coach_id: Optional[str] = None
    offensive_coordinator_id: Optional[str] = None
    defensive_coordinator_id: Optional[str] = None
    current_record: TeamRecord = TeamRecord()
    all_time_record: AllTimeRecord = AllTimeRecord()
    finances: TeamFinances = TeamFinances()
    playoff_seed: Optional[int] = None

    @classmethod
    def create(cls, team_id: int, salary_cap: int = 0) -> 'Team':
        """Build a team shell from the league structure tables."""
        city, nickname, abbreviation = TEAM_INFO[team_id]
        return cls(
            team_id=team_id,
            city=city,
            nickname=nickname,
            abbreviation=abbreviation,
            conference=get_conference(team_id),
            division=get_division(team_id),
            finances=TeamFinances(salary_cap=salary_cap, cap_space=salary_cap),
        )

    @property
    def name(self) -> str:
        return f"{self.city} {self.nickname}"

    @property
    def roster_size(self) -> int:
        return len(self.roster)

    @property
    def coach_ids(self) -> Tuple[str, ...]:
        """IDs of the staff currently assigned (head coach first)."""
        return tuple(
            coach_id for coach_id in (
                self.head_coach_id,
                self.offensive_coordinator_id,
                self.defensive_coordinator_id,
            ) if coach_id
        )

    def with_roster(self, player_ids: Iterable[str]) -> 'Team':
        return replace(self, roster=tuple(player_ids))

    def add_player(self, player_id: str) -> 'Team':
        if player_id in self.roster:
            return self
        return replace(self, roster=self.roster + (player_id,))

    def remove_players(self, player_ids: Iterable[str]) -> 'Team':
        removed = set(player_ids)
        if not removed.intersection(self.roster):
            return self
        return replace(self, roster=tuple(pid for pid in self.roster if pid not in removed))


def _percentage(wins: int, losses: int, ties: int) -> float:
    games = wins + losses + ties
    if games == 0:
        return 0.0
    return (wins + ties * 0.5) / games
