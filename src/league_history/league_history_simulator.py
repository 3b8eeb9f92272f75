"""
League History Simulator

Pre-simulates N years of league history so the league a user takes over
already has records, champions, veterans and rookies built up over time.

Each year runs:
    reset records -> schedule -> regular season -> standings -> seeding ->
    playoffs -> draft order -> all-time records -> offseason -> next year

After the last year the calendar sits at start_year with fresh picks, a
fresh draft class, reset records and a clean schedule.

Usage:
    simulator = LeagueHistorySimulator(rng=random.Random(42))
    state = create_initial_league(2025, rng=simulator.rng)
    result = simulator.simulate_history(state, years=20)
"""

from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence
import logging
import random

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from game_cycle.quick_game_simulator import QuickGameSimulator
from game_cycle.season_simulator import SeasonSimulator, reset_current_records
from league_history.history_exceptions import SimulationCancelledException
from league_history.history_models import (
    HistoricalSeasonSummary, HistorySimulationResult, SeasonCycleResult, SeasonOutcome
)
from league_history.invariants import check_draft_order, validate_league_invariants
from league_history.league_bootstrap import create_initial_league
from league_state.league_state import LeagueState
from offseason.draft_order_service import build_draft_picks, calculate_draft_order
from offseason.offseason_models import OffseasonContext, OffseasonResult
from offseason.offseason_processor import OffseasonProcessor
from player_generation.draft_class_generator import DraftClassGenerator
from player_generation.player_generator import PlayerGenerator
from playoff_system.playoff_seeder import PlayoffSeeder
from playoff_system.playoff_simulator import PlayoffSimulator
from scheduling.schedule_generator import ScheduleGenerator
from standings.standings_calculator import StandingsCalculator
from standings.standings_models import LeagueStandings


ProgressCallback = Callable[[int, int, str], None]
CancelCheck = Callable[[], bool]

PHASE_SEASON = "season"
PHASE_OFFSEASON = "offseason"


def rebase_calendar(state: LeagueState, year: int) -> LeagueState:
    """
    Move a state to a different league year.

    Contract and hire years shift with the calendar so cap hits stay
    aligned with seasons. Year-specific artifacts (schedule, draft class,
    draft picks) are dropped; the season loop regenerates them.
    """
    delta = year - state.year
    if delta == 0:
        return state

    contracts = {
        contract_id: replace(contract, signed_year=contract.signed_year + delta)
        for contract_id, contract in state.contracts.items()
    }
    coaches = {
        coach_id: replace(coach, hired_year=coach.hired_year + delta)
        for coach_id, coach in state.coaches.items()
    }
    return state.with_contracts(contracts).with_coaches(coaches).evolve(
        year=year,
        schedule=None,
        draft_class=None,
        draft_picks=(),
    )


class LeagueHistorySimulator:
    """
    Orchestrates multi-year league history.

    One random.Random drives every collaborator, so a seed reproduces the
    whole run.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        settings: SimulationSettings = DEFAULT_SETTINGS,
        offseason_processor: Optional[OffseasonProcessor] = None,
        validate_invariants: bool = True,
        logger: logging.Logger = None
    ):
        """
        Initialize league history simulator.

        Args:
            rng: Shared random source (unseeded when omitted)
            settings: Simulation tunables
            offseason_processor: Stage pipeline (defaults to all eight stages)
            validate_invariants: Check the final state before returning
            logger: Optional logger
        """
        self.rng = rng or random.Random()
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.validate_invariants = validate_invariants

        self.game_simulator = QuickGameSimulator(self.rng, settings)
        self.season_simulator = SeasonSimulator(self.game_simulator)
        self.playoff_simulator = PlayoffSimulator(self.game_simulator)
        self.schedule_generator = ScheduleGenerator(rng=self.rng)
        self.standings_calculator = StandingsCalculator()
        self.seeder = PlayoffSeeder(self.standings_calculator)
        self.offseason_processor = offseason_processor or OffseasonProcessor()

    # ========================================================================
    # BOOTSTRAP
    # ========================================================================

    def create_initial_league(self, start_year: int) -> LeagueState:
        """Fresh league driven by this simulator's random source."""
        return create_initial_league(start_year, rng=self.rng, settings=self.settings)

    # ========================================================================
    # SEASON
    # ========================================================================

    def simulate_season(
        self,
        state: LeagueState,
        prior_standings: Optional[LeagueStandings] = None
    ) -> SeasonOutcome:
        """
        Play the state.year regular season and playoffs.

        Uses state.schedule when it belongs to state.year and is unplayed;
        otherwise generates one from the prior season's division finishes.
        All-time records absorb the finished season.
        """
        year = state.year
        state = reset_current_records(state)

        schedule = state.schedule
        if schedule is None or schedule.season_year != year or schedule.completed_games():
            prior = prior_standings.previous_year_division_standings() if prior_standings else None
            schedule = self.schedule_generator.generate_season(year, state.team_ids, prior)

        state = self.season_simulator.simulate_regular_season(state, schedule).state
        standings = self.standings_calculator.calculate_from_teams(state.teams, season=year)

        seeding = self.seeder.calculate_seeding(standings)
        strengths = self.season_simulator.compute_strengths(state)
        playoff_results = self.playoff_simulator.simulate(seeding, strengths)

        draft_order = calculate_draft_order(standings, playoff_results, state.team_ids)

        champion = state.teams[playoff_results.champion_id]
        summary = HistoricalSeasonSummary(
            year=year,
            champion_id=playoff_results.champion_id,
            champion_record=champion.current_record,
            runner_up_id=playoff_results.runner_up_id,
            playoff_team_ids=tuple(playoff_results.participants),
            draft_order=tuple(draft_order.team_ids),
        )

        participants = set(playoff_results.participants)
        teams = {}
        for team_id, team in state.teams.items():
            seed = seeding.get_seed(team_id)
            teams[team_id] = replace(
                team,
                playoff_seed=seed.seed if seed else None,
                all_time_record=team.all_time_record.fold_season(
                    team.current_record,
                    year,
                    made_playoffs=team_id in participants,
                    won_championship=team_id == playoff_results.champion_id,
                ),
            )
        state = state.with_teams(teams)

        self.logger.info(
            f"{year} season: champion {champion.abbreviation} ({summary.champion_record_string}), "
            f"runner-up team {playoff_results.runner_up_id}"
        )
        return SeasonOutcome(
            state=state,
            standings=standings,
            playoff_results=playoff_results,
            draft_order=tuple(draft_order.team_ids),
            summary=summary,
        )

    # ========================================================================
    # OFFSEASON
    # ========================================================================

    def run_offseason(self, outcome: SeasonOutcome) -> OffseasonResult:
        """Run the offseason after a season and roll the calendar forward."""
        state = outcome.state
        context = OffseasonContext(
            year=state.year,
            rng=self.rng,
            draft_order=outcome.draft_order,
            settings=self.settings,
            season_records={team_id: team.current_record for team_id, team in state.teams.items()},
        )
        result = self.offseason_processor.process_offseason(state, context)
        return replace(result, state=result.state.evolve(year=context.next_year, schedule=None))

    def simulate_season_cycle(
        self,
        state: LeagueState,
        prior_standings: Optional[LeagueStandings] = None
    ) -> SeasonCycleResult:
        """One full league year: season, playoffs, offseason."""
        outcome = self.simulate_season(state, prior_standings)
        offseason = self.run_offseason(outcome)
        return SeasonCycleResult(
            state=offseason.state,
            summary=outcome.summary,
            offseason=offseason,
            standings=outcome.standings,
        )

    # ========================================================================
    # HISTORY
    # ========================================================================

    def simulate_history(
        self,
        state: LeagueState,
        years: int,
        start_year: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
        should_cancel: Optional[CancelCheck] = None
    ) -> HistorySimulationResult:
        """
        Simulate `years` seasons ending just before start_year.

        Args:
            state: Starting league (rebased to start_year - years)
            years: Number of seasons to simulate
            start_year: Season the league is handed over at (defaults to state.year)
            progress_callback: Called with (year_index, total_years, phase) at the
                start of each season and each offseason; year_index is 1-based
            should_cancel: Checked at the same points; True aborts the run

        Returns:
            HistorySimulationResult with the league ready for start_year

        Raises:
            SimulationCancelledException: should_cancel returned True
            LeagueInvariantException: Final state is structurally broken
        """
        if years < 0:
            raise ValueError(f"years must be non-negative, got {years}")

        start_year = state.year if start_year is None else start_year
        state = rebase_calendar(state, start_year - years)

        summaries: List[HistoricalSeasonSummary] = []
        totals: Dict[str, int] = {
            'retirements': 0, 'draft_picks': 0, 'fa_signings': 0, 'coaching_changes': 0,
        }
        standings: Optional[LeagueStandings] = None

        self.logger.info(f"Simulating {years} years of history ({state.year}-{start_year - 1})")
        for index in range(1, years + 1):
            self._checkpoint(index, years, PHASE_SEASON, progress_callback, should_cancel)
            outcome = self.simulate_season(state, standings)
            standings = outcome.standings
            summaries.append(outcome.summary)

            self._checkpoint(index, years, PHASE_OFFSEASON, progress_callback, should_cancel)
            offseason = self.run_offseason(outcome)
            state = offseason.state

            totals['retirements'] += offseason.retirements
            totals['draft_picks'] += offseason.draft_picks_made
            totals['fa_signings'] += offseason.free_agent_signings
            totals['coaching_changes'] += len(offseason.coaching_changes)

        state = self.prepare_start_year(state, start_year, standings, summaries)

        if self.validate_invariants:
            validate_league_invariants(state, self.settings)

        result = HistorySimulationResult(
            state=state,
            season_summaries=summaries,
            total_retirements=totals['retirements'],
            total_draft_picks=totals['draft_picks'],
            total_fa_signings=totals['fa_signings'],
            total_coaching_changes=totals['coaching_changes'],
        )
        self.logger.info(f"History complete: {result.summary()}")
        return result

    def prepare_start_year(
        self,
        state: LeagueState,
        start_year: int,
        standings: Optional[LeagueStandings] = None,
        summaries: Sequence[HistoricalSeasonSummary] = ()
    ) -> LeagueState:
        """
        Final reset for the handover season.

        Calendar at start_year, fresh picks and draft class for the draft
        after start_year, current records cleared, clean schedule.
        """
        state = reset_current_records(rebase_calendar(state, start_year))

        order = list(summaries[-1].draft_order) if summaries else state.team_ids
        if check_draft_order(order, state.team_ids):
            order = state.team_ids

        draft_year = start_year + 1
        picks = tuple(p for p in state.draft_picks if p.year != draft_year)
        picks += build_draft_picks(order, draft_year, self.settings.draft_rounds)
        draft_class = DraftClassGenerator(
            PlayerGenerator(self.rng), self.settings.draft_class_size
        ).generate_draft_class(draft_year)

        prior = standings.previous_year_division_standings() if standings else None
        schedule = self.schedule_generator.generate_season(start_year, state.team_ids, prior)

        return state.evolve(draft_picks=picks, draft_class=draft_class, schedule=schedule)

    def _checkpoint(
        self,
        index: int,
        total: int,
        phase: str,
        progress_callback: Optional[ProgressCallback],
        should_cancel: Optional[CancelCheck]
    ) -> None:
        if should_cancel is not None and should_cancel():
            self.logger.info(f"History simulation cancelled at year {index}/{total} ({phase})")
            raise SimulationCancelledException(index, total, phase)
        if progress_callback is not None:
            progress_callback(index, total, phase)
