"""
Configuration for the Schedule Generator

Centralized configuration for schedule generation parameters and
bye week constraints.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple
from enum import Enum
import json


class ScheduleStrategy(Enum):
    """Schedule generation strategy"""
    NFL_FORMULA = "nfl_formula"        # Rotation formula, byes balanced in window
    RANDOM_PAIRING = "random_pairing"  # Looser grouped round robin (always succeeds)


@dataclass
class ByeWeekConfig:
    """Configuration for bye week scheduling"""
    start_week: int = 6           # Earliest bye week
    end_week: int = 14            # Latest bye week
    max_teams_per_week: int = 6   # Maximum teams on bye each week
    min_teams_per_week: int = 2   # Minimum teams on bye in any week that has byes

    @property
    def window(self) -> List[int]:
        """Weeks eligible for byes, in order."""
        return list(range(self.start_week, self.end_week + 1))

    def validate(self, total_weeks: int = 18, total_teams: int = 32) -> Tuple[bool, List[str]]:
        """Validate bye week configuration"""
        errors = []

        if self.start_week < 1 or self.end_week > total_weeks:
            errors.append(
                f"Bye window {self.start_week}-{self.end_week} outside weeks 1-{total_weeks}"
            )
        if self.start_week > self.end_week:
            errors.append(f"Bye window start {self.start_week} after end {self.end_week}")
        if self.min_teams_per_week < 2:
            errors.append("min_teams_per_week must be at least 2 (byes come in pairs)")
        if self.max_teams_per_week < self.min_teams_per_week:
            errors.append(
                f"max_teams_per_week ({self.max_teams_per_week}) below "
                f"min_teams_per_week ({self.min_teams_per_week})"
            )

        # Byes must come in pairs so the remaining teams can all play
        weeks_available = max(0, self.end_week - self.start_week + 1)
        pair_capacity = weeks_available * (self.max_teams_per_week // 2)
        if pair_capacity * 2 < total_teams:
            errors.append(
                f"Bye capacity {pair_capacity * 2} cannot hold {total_teams} teams"
            )

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, int]:
        return {
            'start_week': self.start_week,
            'end_week': self.end_week,
            'max_teams_per_week': self.max_teams_per_week,
            'min_teams_per_week': self.min_teams_per_week,
        }


@dataclass
class ScheduleConfig:
    """Complete configuration for schedule generation"""

    season_year: int
    strategy: ScheduleStrategy = ScheduleStrategy.NFL_FORMULA
    total_weeks: int = 18
    games_per_team: int = 17

    bye_week: ByeWeekConfig = field(default_factory=ByeWeekConfig)

    # Randomized search budget for spreading byes across the window
    max_bye_plan_attempts: int = 25
    max_bye_plan_nodes: int = 20000

    # Validation settings
    strict_validation: bool = True   # Also require divisional home-and-away

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate entire configuration"""
        errors = []

        if self.season_year < 1900 or self.season_year > 3000:
            errors.append(f"Invalid season year: {self.season_year}")

        if self.total_weeks != 18:
            errors.append(f"League uses 18 weeks, got {self.total_weeks}")

        if self.games_per_team != 17:
            errors.append(f"Teams play 17 games, got {self.games_per_team}")

        _, bye_errors = self.bye_week.validate(self.total_weeks)
        errors.extend(bye_errors)

        if self.max_bye_plan_attempts < 1:
            errors.append("Need at least 1 bye plan attempt")

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'season_year': self.season_year,
            'strategy': self.strategy.value,
            'total_weeks': self.total_weeks,
            'games_per_team': self.games_per_team,
            'bye_week': self.bye_week.to_dict(),
            'max_bye_plan_attempts': self.max_bye_plan_attempts,
            'max_bye_plan_nodes': self.max_bye_plan_nodes,
            'strict_validation': self.strict_validation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScheduleConfig':
        config = cls(season_year=data['season_year'])
        config.strategy = ScheduleStrategy(data.get('strategy', 'nfl_formula'))
        config.total_weeks = data.get('total_weeks', 18)
        config.games_per_team = data.get('games_per_team', 17)

        if 'bye_week' in data:
            bye_data = data['bye_week']
            config.bye_week = ByeWeekConfig(
                start_week=bye_data.get('start_week', 6),
                end_week=bye_data.get('end_week', 14),
                max_teams_per_week=bye_data.get('max_teams_per_week', 6),
                min_teams_per_week=bye_data.get('min_teams_per_week', 2),
            )

        config.max_bye_plan_attempts = data.get('max_bye_plan_attempts', 25)
        config.max_bye_plan_nodes = data.get('max_bye_plan_nodes', 20000)
        config.strict_validation = data.get('strict_validation', True)
        return config

    def to_json(self, filepath: str):
        """Save configuration to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'ScheduleConfig':
        """Load configuration from JSON file"""
        with open(filepath, 'r') as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def for_season(cls, season_year: int, **overrides) -> 'ScheduleConfig':
        """Default configuration for a season, with keyword overrides."""
        config = cls(season_year=season_year)
        for key, value in overrides.items():
            setattr(config, key, value)
        return config
