"""
Regular season runner for game_cycle.

Simulates every scheduled game with the quick game simulator and folds the
results into each team's current-season record. Team strengths are computed
once per season since rosters do not change between weeks.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from game_cycle.quick_game_simulator import QuickGameResult, QuickGameSimulator, TeamStrength
from league_state.league_state import LeagueState
from league_state.team_models import Team, TeamRecord
from scheduling.schedule_models import ScheduledGame, SeasonSchedule


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeasonSimulationResult:
    """Regular season outcome: the updated state plus every game result."""
    state: LeagueState
    results: List[QuickGameResult]

    @property
    def total_games(self) -> int:
        return len(self.results)

    @property
    def tie_count(self) -> int:
        return sum(1 for result in self.results if result.is_tie)


def reset_current_records(state: LeagueState) -> LeagueState:
    """Clear every team's current record and playoff seed for a new season."""
    teams = {
        team_id: _reset_team(team) for team_id, team in state.teams.items()
    }
    return state.evolve(teams=teams)


def _reset_team(team: Team) -> Team:
    return replace(team, current_record=TeamRecord(), playoff_seed=None)


def update_team_records(
    teams: Mapping[int, Team],
    games: Iterable[ScheduledGame]
) -> Dict[int, Team]:
    """
    Fold completed games into current records.

    Unplayed games and games involving unknown teams are ignored.

    Args:
        teams: Current teams by ID
        games: Games to apply (typically one week)

    Returns:
        New team mapping including every team
    """
    records = {team_id: team.current_record for team_id, team in teams.items()}

    for game in sorted(games, key=lambda g: (g.week, g.game_id)):
        if not game.is_completed:
            continue
        if game.home_team_id not in records or game.away_team_id not in records:
            logger.debug(f"Skipping game {game.game_id}: unknown team")
            continue

        divisional, conference = game.is_divisional, game.is_conference
        records[game.home_team_id] = records[game.home_team_id].with_game(
            game.home_score, game.away_score, divisional, conference
        )
        records[game.away_team_id] = records[game.away_team_id].with_game(
            game.away_score, game.home_score, divisional, conference
        )

    return {
        team_id: replace(team, current_record=records[team_id])
        for team_id, team in teams.items()
    }


class SeasonSimulator:
    """
    Runs a regular season week by week.

    Usage:
        simulator = SeasonSimulator(QuickGameSimulator(rng))
        outcome = simulator.simulate_regular_season(state)
        outcome.state.schedule.is_complete  # True
    """

    def __init__(self, game_simulator: QuickGameSimulator, logger: logging.Logger = None):
        self.game_simulator = game_simulator
        self.logger = logger or logging.getLogger(__name__)

    def compute_strengths(self, state: LeagueState) -> Dict[int, TeamStrength]:
        """Per-team strength for the current rosters and staffs."""
        return {
            team_id: self.game_simulator.calculate_strength(
                team_id,
                state.roster_players(team_id),
                state.team_coaches(team_id),
            )
            for team_id in state.team_ids
        }

    def simulate_week(
        self,
        schedule: SeasonSchedule,
        week: int,
        strengths: Mapping[int, TeamStrength]
    ) -> Tuple[SeasonSchedule, List[QuickGameResult]]:
        """
        Simulate every unplayed game of one week.

        Returns:
            (schedule with the week's results, results in game order)
        """
        results: List[QuickGameResult] = []
        played: Dict[str, ScheduledGame] = {}

        for game in sorted(schedule.get_week_games(week), key=lambda g: g.game_id):
            if game.is_completed:
                continue
            result = self.game_simulator.simulate_game(
                strengths[game.home_team_id],
                strengths[game.away_team_id],
            )
            played[game.game_id] = game.with_result(result.home_score, result.away_score)
            results.append(result)

        games = tuple(played.get(game.game_id, game) for game in schedule.games)
        return schedule.with_games(games), results

    def simulate_regular_season(
        self,
        state: LeagueState,
        schedule: Optional[SeasonSchedule] = None
    ) -> SeasonSimulationResult:
        """
        Simulate a full regular season and update current records.

        Args:
            state: League state (current records already reset)
            schedule: Schedule to play; defaults to state.schedule

        Returns:
            SeasonSimulationResult with the updated state
        """
        schedule = schedule or state.schedule
        if schedule is None:
            raise ValueError(f"No schedule available for season {state.year}")

        strengths = self.compute_strengths(state)
        teams = dict(state.teams)
        all_results: List[QuickGameResult] = []

        for week in range(1, schedule.total_weeks + 1):
            already_played = {g.game_id for g in schedule.get_week_games(week) if g.is_completed}
            schedule, results = self.simulate_week(schedule, week, strengths)
            teams = update_team_records(
                teams,
                [g for g in schedule.get_week_games(week) if g.game_id not in already_played]
            )
            all_results.extend(results)

        self.logger.debug(
            f"Season {schedule.season_year}: {len(all_results)} games, "
            f"{sum(1 for r in all_results if r.is_tie)} ties"
        )
        return SeasonSimulationResult(
            state=state.evolve(teams=teams, schedule=schedule),
            results=all_results,
        )
