"""
Unit Tests for ScheduleGenerator

Tests season schedule generation including:
- 272 games, 17 games and exactly one bye per team
- Divisional home-and-away series under the formula strategy
- Bye weeks inside the configured window
- Prior-year division standings driving the place-based games
- Random pairing fallback when the formula cannot be satisfied
- Seeded reproducibility
"""

import random
from collections import Counter

import pytest

from constants.league_structure import NFL_DIVISIONS, all_team_ids
from scheduling.config import ByeWeekConfig, ScheduleConfig, ScheduleStrategy
from scheduling.formula_scheduler import FormulaScheduler, default_division_standings
from scheduling.random_pairing_scheduler import RandomPairingScheduler
from scheduling.schedule_exceptions import (
    InvalidScheduleConfigException, ScheduleConstraintException
)
from scheduling.schedule_generator import ScheduleGenerator, create_schedule_generator
from scheduling.schedule_models import ScheduleComponent
from scheduling.schedule_validator import ScheduleValidator


def assert_every_team_plays_17_with_one_bye(schedule):
    games_per_team = Counter()
    for game in schedule.games:
        assert game.home_team_id != game.away_team_id
        games_per_team[game.home_team_id] += 1
        games_per_team[game.away_team_id] += 1

    assert schedule.total_games == 272
    for team_id in all_team_ids():
        assert games_per_team[team_id] == 17
        weeks = [g.week for g in schedule.get_team_games(team_id)]
        assert len(set(weeks)) == 17
        assert set(range(1, 19)) - set(weeks) == {schedule.bye_weeks[team_id]}


class TestFormulaSchedule:
    """Test suite for the rotation formula strategy"""

    @pytest.fixture
    def generator(self):
        """Generator with a fixed seed"""
        return ScheduleGenerator(rng=random.Random(42))

    @pytest.fixture
    def schedule(self, generator):
        """2025 schedule with default standings"""
        return generator.generate_season(2025)

    def test_every_team_plays_17_games_with_one_bye(self, schedule):
        assert_every_team_plays_17_with_one_bye(schedule)

    def test_uses_formula_strategy(self, schedule, generator):
        assert schedule.strategy == ScheduleStrategy.NFL_FORMULA
        assert generator.fallback_count == 0

    def test_division_rivals_meet_home_and_away(self, schedule):
        for members in NFL_DIVISIONS.values():
            for team_a in members:
                for team_b in members:
                    if team_a == team_b:
                        continue
                    venues = [(g.home_team_id, g.away_team_id) for g in schedule.get_matchup(team_a, team_b)]
                    assert sorted(venues) == sorted([(team_a, team_b), (team_b, team_a)])

    def test_byes_fall_inside_window(self, schedule):
        counts = Counter(schedule.bye_weeks.values())
        for week, count in counts.items():
            assert 6 <= week <= 14
            assert 2 <= count <= 6

    def test_component_counts_per_team(self, schedule):
        """Each team: 6 A, 4 B, 4 C, 2 D, 1 E"""
        expected = {
            ScheduleComponent.DIVISIONAL: 6,
            ScheduleComponent.INTRA_CONFERENCE: 4,
            ScheduleComponent.INTER_CONFERENCE: 4,
            ScheduleComponent.STANDINGS_BASED: 2,
            ScheduleComponent.SEVENTEENTH_GAME: 1,
        }
        for team_id in (1, 12, 22, 32):
            counts = Counter(g.component for g in schedule.get_team_games(team_id))
            assert counts == expected

    def test_passes_strict_validation(self, schedule):
        is_valid, errors = ScheduleValidator(ScheduleConfig.for_season(2025)).validate(
            schedule, all_team_ids(), strict=True
        )
        assert is_valid, errors

    def test_games_start_unplayed(self, schedule):
        assert schedule.completed_games() == []
        assert not schedule.is_complete

    def test_prior_standings_are_accepted(self, generator):
        """Reversed division finishes still give a valid schedule"""
        prior = {division: list(reversed(members)) for division, members in NFL_DIVISIONS.items()}
        schedule = generator.generate_season(2026, prior_standings=prior)

        assert schedule.strategy == ScheduleStrategy.NFL_FORMULA
        assert_every_team_plays_17_with_one_bye(schedule)

    def test_seeded_generators_match(self):
        first = ScheduleGenerator(rng=random.Random(7)).generate_season(2030)
        second = ScheduleGenerator(rng=random.Random(7)).generate_season(2030)
        assert first.games == second.games
        assert dict(first.bye_weeks) == dict(second.bye_weeks)

    @pytest.mark.parametrize("season_year", [2024, 2025, 2026, 2027])
    def test_rotation_years(self, season_year):
        schedule = ScheduleGenerator(rng=random.Random(season_year)).generate_season(season_year)
        assert_every_team_plays_17_with_one_bye(schedule)


class TestFormulaScheduler:
    """Test suite for FormulaScheduler constraint handling"""

    def test_mismatched_standings_raise_constraint_exception(self):
        prior = default_division_standings()
        prior['AFC East'] = [1, 2, 3, 5]
        scheduler = FormulaScheduler(ScheduleConfig.for_season(2025), random.Random(1))

        with pytest.raises(ScheduleConstraintException) as exc_info:
            scheduler.build(2025, prior)
        assert exc_info.value.violations

    def test_default_standings_cover_every_division(self):
        standings = default_division_standings()
        assert set(standings) == set(NFL_DIVISIONS)
        assert all(order == sorted(order) for order in standings.values())


class TestFallbackSchedule:
    """Test suite for the random pairing fallback"""

    def test_bad_prior_standings_fall_back(self):
        """A constraint failure in the formula is recovered locally"""
        generator = ScheduleGenerator(rng=random.Random(3))
        prior = default_division_standings()
        prior['NFC West'] = [29, 30, 31]

        schedule = generator.generate_season(2025, prior_standings=prior)

        assert schedule.strategy == ScheduleStrategy.RANDOM_PAIRING
        assert generator.fallback_count == 1
        assert_every_team_plays_17_with_one_bye(schedule)

    def test_random_pairing_strategy(self):
        config = ScheduleConfig(season_year=2025, strategy=ScheduleStrategy.RANDOM_PAIRING)
        schedule = ScheduleGenerator(config=config, rng=random.Random(5)).generate_season(2025)

        assert schedule.strategy == ScheduleStrategy.RANDOM_PAIRING
        assert_every_team_plays_17_with_one_bye(schedule)

    def test_random_pairing_has_no_repeated_opponents(self):
        scheduler = RandomPairingScheduler(ScheduleConfig.for_season(2025), random.Random(11))
        schedule = scheduler.build(2025, all_team_ids())

        for team_id in all_team_ids():
            opponents = [g.opponent_of(team_id) for g in schedule.get_team_games(team_id)]
            assert len(opponents) == len(set(opponents))

    def test_random_pairing_requires_32_teams(self):
        scheduler = RandomPairingScheduler(ScheduleConfig.for_season(2025), random.Random(1))
        with pytest.raises(ValueError):
            scheduler.build(2025, list(range(1, 29)))

    def test_factory_uses_requested_strategy(self):
        generator = create_schedule_generator(seed=9, strategy=ScheduleStrategy.RANDOM_PAIRING)
        schedule = generator.generate_season(2028)
        assert schedule.season_year == 2028
        assert schedule.strategy == ScheduleStrategy.RANDOM_PAIRING


class TestScheduleConfig:
    """Test suite for schedule configuration validation"""

    def test_default_config_is_valid(self):
        is_valid, errors = ScheduleConfig.for_season(2025).validate()
        assert is_valid, errors

    def test_bye_window_too_small(self):
        bye = ByeWeekConfig(start_week=6, end_week=7, max_teams_per_week=6)
        is_valid, errors = bye.validate()
        assert not is_valid
        assert any("capacity" in error for error in errors)

    def test_invalid_bye_config_raises(self):
        config = ScheduleConfig(season_year=2025, bye_week=ByeWeekConfig(start_week=10, end_week=8))
        with pytest.raises(InvalidScheduleConfigException):
            ScheduleGenerator(config=config, rng=random.Random(1)).generate_season(2025)

    def test_dict_round_trip_keeps_overrides(self):
        config = ScheduleConfig.for_season(2031, max_bye_plan_attempts=3)
        restored = ScheduleConfig.from_dict(config.to_dict())
        assert restored.season_year == 2031
        assert restored.max_bye_plan_attempts == 3
