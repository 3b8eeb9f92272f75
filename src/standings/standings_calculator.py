"""
Standings Calculator

Pure calculation of ordered standings from completed games.

Tiebreak chain (strict, deterministic):
1. Win percentage (ties count as half a win)
2. Same-division win percentage
3. Conference win percentage
4. Point differential
5. Team ID (only reached by fully equal teams; keeps results reproducible)
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional

from constants.league_structure import (
    CONFERENCES, NFL_DIVISIONS, get_conference, get_division
)
from league_state.team_models import Team, TeamRecord
from scheduling.schedule_models import ScheduledGame
from standings.standings_models import LeagueStandings, TeamStanding


PLAYOFF_TEAMS_PER_CONFERENCE = 7
WILDCARDS_PER_CONFERENCE = 3


def tiebreak_key(standing: TeamStanding):
    """Sort key placing the best team first."""
    win_pct, div_pct, conf_pct, point_diff = standing.tiebreak_values()
    return (-win_pct, -div_pct, -conf_pct, -point_diff, standing.team_id)


def sort_standings(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    return sorted(standings, key=tiebreak_key)


def records_from_games(
    games: Iterable[ScheduledGame],
    team_ids: Iterable[int]
) -> Dict[int, TeamRecord]:
    """Build season records for the given teams from completed games."""
    records = {team_id: TeamRecord() for team_id in team_ids}

    for game in sorted(games, key=lambda g: (g.week, g.game_id)):
        if not game.is_completed:
            continue
        if game.home_team_id not in records or game.away_team_id not in records:
            continue
        divisional, conference = game.is_divisional, game.is_conference
        records[game.home_team_id] = records[game.home_team_id].with_game(
            game.home_score, game.away_score, divisional, conference
        )
        records[game.away_team_id] = records[game.away_team_id].with_game(
            game.away_score, game.home_score, divisional, conference
        )

    return records


class StandingsCalculator:
    """
    Turns records into ordered, tie-broken standings.

    Usage:
        calculator = StandingsCalculator()
        standings = calculator.calculate(schedule.games, team_ids, season=2025)
        playoff_teams = calculator.determine_playoff_teams(standings)
    """

    def calculate(
        self,
        games: Iterable[ScheduledGame],
        team_ids: Iterable[int],
        season: int = 0
    ) -> LeagueStandings:
        """
        Calculate standings from completed games.

        Args:
            games: Season games (unplayed games are ignored)
            team_ids: Every team to rank (teams without games rank with 0.000)
            season: Season year

        Returns:
            LeagueStandings
        """
        return self.from_records(records_from_games(games, team_ids), season)

    def calculate_from_teams(self, teams: Mapping[int, Team], season: int = 0) -> LeagueStandings:
        """Calculate standings from each team's current record."""
        return self.from_records(
            {team_id: team.current_record for team_id, team in teams.items()},
            season
        )

    def from_records(self, records: Mapping[int, TeamRecord], season: int = 0) -> LeagueStandings:
        base = {
            team_id: TeamStanding(
                team_id=team_id,
                conference=get_conference(team_id),
                division=get_division(team_id),
                record=record,
            )
            for team_id, record in records.items()
        }

        by_division: Dict[str, List[TeamStanding]] = defaultdict(list)
        by_conference: Dict[str, List[TeamStanding]] = defaultdict(list)
        for standing in base.values():
            by_division[standing.division].append(standing)
            by_conference[standing.conference].append(standing)

        divisions = {
            name: [s.team_id for s in sort_standings(by_division.get(name, []))]
            for name in NFL_DIVISIONS
        }
        conferences = {
            name: [s.team_id for s in sort_standings(by_conference.get(name, []))]
            for name in CONFERENCES
        }
        league = [s.team_id for s in sort_standings(base.values())]

        ranked: Dict[int, TeamStanding] = {}
        for team_id, standing in base.items():
            ranked[team_id] = TeamStanding(
                team_id=team_id,
                conference=standing.conference,
                division=standing.division,
                record=standing.record,
                division_rank=divisions[standing.division].index(team_id) + 1,
                conference_rank=conferences[standing.conference].index(team_id) + 1,
                league_rank=league.index(team_id) + 1,
            )

        return LeagueStandings(
            season=season,
            teams=ranked,
            divisions=divisions,
            conferences=conferences,
            league=league,
        )

    def determine_playoff_teams(self, standings: LeagueStandings) -> Dict[str, List[int]]:
        """
        Playoff field per conference.

        The top finisher of each division plus the next three best
        conference records (division winners first, then wildcards).

        Returns:
            Conference -> 7 team IDs (fewer only for an incomplete league)
        """
        field: Dict[str, List[int]] = {}
        for conference in CONFERENCES:
            winners = standings.division_winners(conference)
            wildcards = self.wildcard_teams(standings, conference)
            field[conference] = winners + wildcards
        return field

    def wildcard_teams(
        self,
        standings: LeagueStandings,
        conference: str,
        count: int = WILDCARDS_PER_CONFERENCE
    ) -> List[int]:
        return [
            team_id for team_id in standings.conferences.get(conference, [])
            if not standings.teams[team_id].is_division_winner
        ][:count]

    def is_playoff_team(self, standings: LeagueStandings, team_id: int) -> bool:
        conference = get_conference(team_id)
        return team_id in self.determine_playoff_teams(standings).get(conference, [])


def calculate_standings(
    games: Iterable[ScheduledGame],
    team_ids: Iterable[int],
    season: int = 0
) -> LeagueStandings:
    """Module-level shortcut for StandingsCalculator().calculate()."""
    return StandingsCalculator().calculate(games, team_ids, season)


def previous_year_division_standings(standings: Optional[LeagueStandings]) -> Optional[Dict[str, List[int]]]:
    """Division orders for scheduling, or None when there is no prior season."""
    if standings is None:
        return None
    return standings.previous_year_division_standings()
