"""
Unit Tests for LeagueHistorySimulator

Tests multi-year history simulation including:
- One summary per simulated season, ending the year before handover
- Final state reset for the handover season
- Contract calendar alignment after rebasing
- Seeded determinism
- Progress reporting and cooperative cancellation
"""

import random
import time

import pytest

from league_history.history_exceptions import SimulationCancelledException
from league_history.invariants import find_invariant_violations
from league_history.league_history_simulator import (
    PHASE_OFFSEASON, PHASE_SEASON, LeagueHistorySimulator, rebase_calendar
)


class TestSimulateHistory:
    """Test suite for a three-year history run"""

    @pytest.fixture(scope="class")
    def result(self):
        simulator = LeagueHistorySimulator(rng=random.Random(42))
        state = simulator.create_initial_league(2025)
        return simulator.simulate_history(state, years=3)

    def test_one_summary_per_year(self, result):
        assert result.years_simulated == 3
        assert [s.year for s in result.season_summaries] == [2022, 2023, 2024]

    def test_season_summaries(self, result):
        for summary in result.season_summaries:
            assert len(summary.playoff_team_ids) == 14
            assert summary.champion_id in summary.playoff_team_ids
            assert summary.runner_up_id in summary.playoff_team_ids
            assert summary.champion_id != summary.runner_up_id
            assert sorted(summary.draft_order) == list(range(1, 33))
            # The champion picks last
            assert summary.draft_order[-1] == summary.champion_id

    def test_totals(self, result):
        assert result.total_draft_picks == 3 * 224
        assert result.total_retirements > 0
        summary = result.summary()
        assert summary['years'] == 3
        assert summary['draft_picks'] == 3 * 224
        assert sum(result.championships_by_team().values()) == 3

    def test_final_state_ready_for_handover(self, result):
        state = result.state
        assert state.year == 2025
        assert set(state.roster_sizes().values()) == {53}
        assert find_invariant_violations(state) == []

    def test_fresh_schedule_and_draft(self, result):
        state = result.state
        assert state.schedule.season_year == 2025
        assert not state.schedule.completed_games()
        assert state.draft_class.year == 2026
        picks_2026 = [p for p in state.draft_picks if p.year == 2026]
        assert len(picks_2026) == 224
        assert all(p.player_id is None for p in picks_2026)

    def test_handover_draft_follows_last_season(self, result):
        first_round = sorted(
            (p for p in result.state.draft_picks if p.year == 2026 and p.round == 1),
            key=lambda p: p.pick_in_round,
        )
        assert [p.original_team_id for p in first_round] == list(result.season_summaries[-1].draft_order)

    def test_records_reset_history_kept(self, result):
        for team in result.state.teams.values():
            assert team.current_record.games_played == 0
            assert team.playoff_seed is None
            assert team.all_time_record.games_played == 3 * 17

    def test_champions_credited(self, result):
        for summary in result.season_summaries:
            record = result.state.teams[summary.champion_id].all_time_record
            assert record.championships >= 1
            assert record.playoff_appearances >= 1

    def test_contracts_aligned_with_calendar(self, result):
        for contract in result.state.contracts.values():
            assert contract.signed_year + contract.current_year - 1 == 2025

    def test_summaries_serialize(self, result):
        data = result.season_summaries[0].to_dict()
        assert data['year'] == 2022
        assert data['champion_record'].count('-') >= 1


class TestHistoryRunControl:
    """Test suite for argument handling, progress and cancellation"""

    @pytest.fixture
    def simulator(self):
        return LeagueHistorySimulator(rng=random.Random(3))

    def test_seeded_runs_repeat(self, initial_league):
        first = LeagueHistorySimulator(rng=random.Random(8)).simulate_history(initial_league, years=1)
        second = LeagueHistorySimulator(rng=random.Random(8)).simulate_history(initial_league, years=1)

        assert [s.to_dict() for s in first.season_summaries] == [s.to_dict() for s in second.season_summaries]
        assert first.summary() == second.summary()
        assert first.state.summary() == second.state.summary()

    def test_zero_years(self, simulator, initial_league):
        result = simulator.simulate_history(initial_league, years=0)
        assert result.season_summaries == []
        assert result.state.year == 2025
        assert find_invariant_violations(result.state) == []

    def test_negative_years_rejected(self, simulator, initial_league):
        with pytest.raises(ValueError):
            simulator.simulate_history(initial_league, years=-1)

    def test_explicit_start_year(self, simulator, initial_league):
        result = simulator.simulate_history(initial_league, years=1, start_year=2030)
        assert [s.year for s in result.season_summaries] == [2029]
        assert result.state.year == 2030
        assert result.state.draft_class.year == 2031

    def test_progress_reported(self, simulator, initial_league):
        calls = []
        simulator.simulate_history(
            initial_league, years=2, progress_callback=lambda *args: calls.append(args)
        )
        assert calls == [
            (1, 2, PHASE_SEASON), (1, 2, PHASE_OFFSEASON),
            (2, 2, PHASE_SEASON), (2, 2, PHASE_OFFSEASON),
        ]

    def test_cancel_before_offseason(self, simulator, initial_league):
        checks = []
        progress = []

        def should_cancel():
            checks.append(True)
            return len(checks) == 2

        with pytest.raises(SimulationCancelledException) as exc_info:
            simulator.simulate_history(
                initial_league, years=3,
                progress_callback=lambda *args: progress.append(args),
                should_cancel=should_cancel,
            )

        assert exc_info.value.year_index == 1
        assert exc_info.value.total_years == 3
        assert exc_info.value.phase == PHASE_OFFSEASON
        # Cancellation is checked before progress is reported
        assert progress == [(1, 3, PHASE_SEASON)]


class TestLongHistory:
    """Test suite for longer runs"""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_five_years_five_championships(self, seed, initial_league):
        result = LeagueHistorySimulator(rng=random.Random(seed)).simulate_history(initial_league, years=5)

        assert [s.year for s in result.season_summaries] == [2020, 2021, 2022, 2023, 2024]
        assert sum(result.championships_by_team().values()) == 5
        titles = sum(team.all_time_record.championships for team in result.state.teams.values())
        assert titles == 5

    @pytest.mark.slow
    def test_twenty_years_in_seconds(self):
        simulator = LeagueHistorySimulator(rng=random.Random(9))
        state = simulator.create_initial_league(2025)

        started = time.perf_counter()
        result = simulator.simulate_history(state, years=20)
        elapsed = time.perf_counter() - started

        assert result.years_simulated == 20
        assert find_invariant_violations(result.state) == []
        assert elapsed < 10, f"20 years took {elapsed:.1f}s"


class TestSingleSeason:
    """Test suite for simulate_season and the calendar helpers"""

    @pytest.fixture(scope="class")
    def outcome(self, initial_league):
        return LeagueHistorySimulator(rng=random.Random(11)).simulate_season(initial_league)

    def test_uses_existing_schedule(self, outcome, initial_league):
        assert outcome.summary.year == 2025
        schedule = outcome.state.schedule
        assert schedule.is_complete
        assert [g.game_id for g in schedule.games] == [g.game_id for g in initial_league.schedule.games]

    def test_every_team_plays_seventeen(self, outcome):
        for team in outcome.state.teams.values():
            assert team.current_record.games_played == 17
            assert team.all_time_record.games_played == 17

    def test_playoff_field_seeded(self, outcome):
        seeded = [t for t in outcome.state.teams.values() if t.playoff_seed is not None]
        assert sorted(t.team_id for t in seeded) == sorted(outcome.summary.playoff_team_ids)
        champion = outcome.state.teams[outcome.summary.champion_id]
        assert champion.all_time_record.championships == 1
        assert champion.all_time_record.last_championship_year == 2025

    def test_draft_order(self, outcome):
        assert sorted(outcome.draft_order) == list(range(1, 33))
        assert outcome.summary.draft_order == outcome.draft_order

    def test_offseason_rolls_year(self, initial_league):
        simulator = LeagueHistorySimulator(rng=random.Random(12))
        cycle = simulator.simulate_season_cycle(initial_league)
        assert cycle.summary.year == 2025
        assert cycle.state.year == 2026
        assert cycle.state.schedule is None
        assert cycle.offseason.draft_picks_made == 224


class TestRebaseCalendar:
    """Test suite for rebase_calendar"""

    def test_same_year_is_noop(self, initial_league):
        assert rebase_calendar(initial_league, 2025) is initial_league

    def test_shifts_contract_and_coach_years(self, initial_league):
        rebased = rebase_calendar(initial_league, 2015)
        assert rebased.year == 2015
        for contract_id, contract in list(initial_league.contracts.items())[:25]:
            assert rebased.contracts[contract_id].signed_year == contract.signed_year - 10
            assert rebased.contracts[contract_id].cap_hit_for_year(2015) == contract.cap_hit_for_year(2025)
        for coach_id, coach in initial_league.coaches.items():
            assert rebased.coaches[coach_id].hired_year == coach.hired_year - 10

    def test_drops_year_specific_artifacts(self, initial_league):
        rebased = rebase_calendar(initial_league, 2020)
        assert rebased.schedule is None
        assert rebased.draft_class is None
        assert rebased.draft_picks == ()
        assert rebased.players == initial_league.players
