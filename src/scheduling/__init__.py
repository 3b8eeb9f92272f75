"""
Scheduling Module

Handles regular season schedule generation:
- 18-week, 272-game schedules (17 games + 1 bye per team)
- Rotation formula with divisional home-and-away series
- Balanced bye weeks inside a configurable window
- Mandatory random pairing fallback when constraints cannot be met
"""

from .config import ByeWeekConfig, ScheduleConfig, ScheduleStrategy
from .schedule_exceptions import (
    ScheduleException, ScheduleConstraintException, InvalidScheduleConfigException
)
from .schedule_models import ScheduleComponent, ScheduledGame, SeasonSchedule
from .schedule_validator import ScheduleValidator
from .schedule_generator import ScheduleGenerator, create_schedule_generator

__all__ = [
    'ByeWeekConfig',
    'ScheduleConfig',
    'ScheduleStrategy',
    'ScheduleException',
    'ScheduleConstraintException',
    'InvalidScheduleConfigException',
    'ScheduleComponent',
    'ScheduledGame',
    'SeasonSchedule',
    'ScheduleValidator',
    'ScheduleGenerator',
    'create_schedule_generator',
]
