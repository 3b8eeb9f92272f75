"""
Scheduling Exception Hierarchy

Exception Hierarchy:
    ScheduleException (base)
    ├── ScheduleConstraintException   (recovered by the fallback scheduler)
    └── InvalidScheduleConfigException
"""

from typing import List, Optional

from shared.exceptions import LeagueSimException, ExceptionSeverity, RecoveryStrategy


class ScheduleException(LeagueSimException):
    """Base exception for schedule generation errors."""

    def __init__(self, message: str, error_code: str = "SCHEDULE_000", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class ScheduleConstraintException(ScheduleException):
    """
    Raised when the formula scheduler cannot satisfy its constraints.

    Examples:
    - Prior-year division standings missing a team or division
    - Bye plan cannot fit the configured window
    - Generated schedule fails validation
    """

    def __init__(
        self,
        message: str,
        season_year: Optional[int] = None,
        violations: Optional[List[str]] = None,
        **kwargs
    ):
        context = {
            "season_year": season_year,
            "violations": violations or [],
            **kwargs.get('context_dict', {})
        }
        super().__init__(
            message=message,
            error_code="SCHEDULE_CONSTRAINT_001",
            severity=ExceptionSeverity.WARNING,
            recovery_strategy=RecoveryStrategy.FALLBACK,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )
        self.violations = violations or []


class InvalidScheduleConfigException(ScheduleException):
    """Raised when a ScheduleConfig fails validation."""

    def __init__(self, errors: List[str], **kwargs):
        super().__init__(
            message=f"Invalid schedule configuration: {'; '.join(errors)}",
            error_code="SCHEDULE_CONFIG_002",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict={"errors": errors, **kwargs.get('context_dict', {})},
        )
        self.errors = errors
