"""
Season Schedule Generator

Generates one regular season schedule for all 32 teams:
- 18 weeks, 272 games
- 17 games and exactly one bye per team
- Divisional rivals home and away (formula strategy)
- Bye groups balanced inside the configured bye window

The formula scheduler is tried first. Any ScheduleConstraintException is
recovered locally by the random pairing fallback, which always satisfies
the 17-games-plus-one-bye invariant, so generate_season never fails for a
well-formed league.
"""

from typing import Iterable, Mapping, Optional, Sequence
import logging
import random

from constants.league_structure import all_team_ids
from scheduling.config import ScheduleConfig, ScheduleStrategy
from scheduling.formula_scheduler import FormulaScheduler
from scheduling.random_pairing_scheduler import RandomPairingScheduler
from scheduling.schedule_exceptions import (
    InvalidScheduleConfigException, ScheduleConstraintException, ScheduleException
)
from scheduling.schedule_models import SeasonSchedule
from scheduling.schedule_validator import ScheduleValidator


class ScheduleGenerator:
    """
    Builds validated season schedules with a mandatory fallback.

    Usage:
        generator = ScheduleGenerator(rng=random.Random(42))
        schedule = generator.generate_season(2025, prior_standings=division_orders)
    """

    def __init__(
        self,
        config: Optional[ScheduleConfig] = None,
        rng: Optional[random.Random] = None,
        logger: logging.Logger = None
    ):
        """
        Initialize schedule generator.

        Args:
            config: Base configuration (season_year is overridden per call)
            rng: Injected random source; a fresh unseeded one when omitted
            logger: Optional logger for tracking generation progress
        """
        self.config = config
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self.fallback_count = 0

    def generate_season(
        self,
        season_year: int,
        team_ids: Optional[Iterable[int]] = None,
        prior_standings: Optional[Mapping[str, Sequence[int]]] = None
    ) -> SeasonSchedule:
        """
        Generate a complete regular season schedule.

        Args:
            season_year: Season being scheduled
            team_ids: Teams to schedule (defaults to 1-32)
            prior_standings: Division name -> team IDs in last season's finish order

        Returns:
            Validated SeasonSchedule
        """
        teams = sorted(team_ids) if team_ids is not None else all_team_ids()
        config = self._config_for(season_year)

        if config.strategy == ScheduleStrategy.NFL_FORMULA:
            try:
                scheduler = FormulaScheduler(config, self.rng, self.logger)
                return scheduler.build(season_year, prior_standings)
            except ScheduleConstraintException as e:
                self.fallback_count += 1
                self.logger.warning(
                    f"Formula schedule for {season_year} failed ({e.message}); "
                    f"using random pairing fallback"
                )
                for violation in e.violations[:5]:
                    self.logger.debug(f"  violation: {violation}")

        return self._generate_fallback(season_year, teams, config)

    def _generate_fallback(
        self,
        season_year: int,
        teams: Sequence[int],
        config: ScheduleConfig
    ) -> SeasonSchedule:
        schedule = RandomPairingScheduler(config, self.rng, self.logger).build(season_year, teams)

        is_valid, errors = ScheduleValidator(config).validate(schedule, teams, strict=False)
        if not is_valid:
            # The fallback is constructive; a failure here is a programming error
            raise ScheduleException(
                f"Fallback schedule for {season_year} is invalid: {'; '.join(errors[:5])}",
                error_code="SCHEDULE_FALLBACK_003",
                context_dict={"season_year": season_year, "error_count": len(errors)},
            )

        self.logger.debug(f"Fallback schedule for {season_year}: {schedule.total_games} games")
        return schedule

    def _config_for(self, season_year: int) -> ScheduleConfig:
        if self.config is None:
            config = ScheduleConfig.for_season(season_year)
        else:
            config = ScheduleConfig.from_dict({**self.config.to_dict(), 'season_year': season_year})

        is_valid, errors = config.bye_week.validate(config.total_weeks)
        if not is_valid:
            raise InvalidScheduleConfigException(errors)
        return config


def create_schedule_generator(
    seed: Optional[int] = None,
    strategy: ScheduleStrategy = ScheduleStrategy.NFL_FORMULA,
    logger: logging.Logger = None
) -> ScheduleGenerator:
    """
    Factory for a schedule generator with a seeded random source.

    Args:
        seed: Random seed (None for non-deterministic schedules)
        strategy: Preferred schedule strategy
        logger: Optional logger

    Returns:
        Configured ScheduleGenerator
    """
    config = ScheduleConfig(season_year=2025, strategy=strategy)
    return ScheduleGenerator(config=config, rng=random.Random(seed), logger=logger)
