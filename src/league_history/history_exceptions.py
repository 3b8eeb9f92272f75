"""
League History Exception Hierarchy

Exception Hierarchy:
    HistorySimulationException (base)
    ├── SimulationCancelledException
    └── LeagueInvariantException

All exceptions carry the shared error_code / severity / recovery_strategy /
context fields from shared.exceptions.LeagueSimException.
"""

from typing import List, Optional, Sequence

from shared.exceptions import LeagueSimException, ExceptionSeverity, RecoveryStrategy


class HistorySimulationException(LeagueSimException):
    """Base exception for all league history simulation errors."""

    def __init__(self, message: str, error_code: str = "HISTORY_000", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class SimulationCancelledException(HistorySimulationException):
    """
    Raised when the caller's should_cancel check returns True.

    Cancellation is only observed at year and offseason boundaries, so the
    last completed year is always internally consistent.
    """

    def __init__(
        self,
        year_index: int,
        total_years: int,
        phase: str,
        message: Optional[str] = None,
        **kwargs
    ):
        self.year_index = year_index
        self.total_years = total_years
        self.phase = phase

        context = {
            "year_index": year_index,
            "total_years": total_years,
            "phase": phase,
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=message or f"History simulation cancelled before {phase} of year {year_index}/{total_years}",
            error_code="HISTORY_CANCEL_001",
            severity=ExceptionSeverity.INFO,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )


class LeagueInvariantException(HistorySimulationException):
    """
    Raised when a league state breaks a structural invariant.

    Examples:
    - Not exactly 32 teams
    - Roster over the limit after roster maintenance
    - A roster referencing a player that does not exist
    - Draft order missing a team
    """

    def __init__(
        self,
        violations: Sequence[str],
        year: Optional[int] = None,
        **kwargs
    ):
        self.violations: List[str] = list(violations)

        context = {
            "year": year,
            "violation_count": len(self.violations),
            "violations": self.violations[:10],
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=f"League state violates {len(self.violations)} invariant(s)",
            error_code="HISTORY_INVARIANT_002",
            severity=ExceptionSeverity.CRITICAL,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )
