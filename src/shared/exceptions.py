"""
League Simulation Exception Base

Shared base class for the per-package exception hierarchies
(scheduling, playoff_system, league_history).

All exceptions include:
- error_code: Unique identifier for programmatic handling
- severity: CRITICAL, ERROR, WARNING, INFO
- recovery_strategy: ABORT, RETRY, SKIP, FALLBACK, RESET, MANUAL
- context_dict: Relevant context (season, round, team_id, etc.)
- original_exception: Wrapped exception if from try/except
"""

from enum import Enum
from typing import Any, Dict, Optional
from datetime import datetime


class ExceptionSeverity(Enum):
    """Severity levels for exceptions"""
    CRITICAL = "critical"  # Invariant broken, immediate abort required
    ERROR = "error"        # Operation failed, cannot continue
    WARNING = "warning"    # Recovered locally, can continue
    INFO = "info"          # Informational only


class RecoveryStrategy(Enum):
    """Recovery strategies for exception handling"""
    ABORT = "abort"          # Stop all operations immediately
    RETRY = "retry"          # Retry the failed operation
    SKIP = "skip"            # Skip this operation and continue
    FALLBACK = "fallback"    # Use the looser fallback algorithm
    RESET = "reset"          # Reset state and restart
    MANUAL = "manual"        # Requires manual intervention


class LeagueSimException(Exception):
    """
    Base exception for all league simulation errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code (e.g., "SCHEDULE_001")
        severity: Exception severity level
        recovery_strategy: Recommended recovery action
        context_dict: Additional context (season, round, etc.)
        original_exception: Original exception if wrapping another exception
        timestamp: When the exception was raised
    """

    def __init__(
        self,
        message: str,
        error_code: str = "LEAGUE_000",
        severity: ExceptionSeverity = ExceptionSeverity.ERROR,
        recovery_strategy: RecoveryStrategy = RecoveryStrategy.ABORT,
        context_dict: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.recovery_strategy = recovery_strategy
        self.context_dict = context_dict or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now().isoformat()

        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        """Build error message with context"""
        lines = [
            f"[{self.error_code}] {self.message}",
            f"Severity: {self.severity.value}",
            f"Recovery: {self.recovery_strategy.value}",
        ]

        if self.context_dict:
            lines.append("Context:")
            for key, value in self.context_dict.items():
                lines.append(f"  {key}: {value}")

        if self.original_exception:
            lines.append(
                f"Original Error: {type(self.original_exception).__name__}: "
                f"{self.original_exception}"
            )

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "severity": self.severity.value,
            "recovery_strategy": self.recovery_strategy.value,
            "context": self.context_dict,
            "timestamp": self.timestamp,
            "original_error": str(self.original_exception) if self.original_exception else None
        }
