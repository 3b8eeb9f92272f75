"""
Playoff System Exception Hierarchy

Exception Hierarchy:
    PlayoffException (base)
    ├── InvalidRoundException
    ├── InvalidSeedingException
    ├── InvalidBracketException
    └── PlayoffStateException

All exceptions carry the shared error_code / severity / recovery_strategy /
context fields from shared.exceptions.LeagueSimException.
"""

from typing import Optional

from shared.exceptions import LeagueSimException, ExceptionSeverity, RecoveryStrategy


class PlayoffException(LeagueSimException):
    """Base exception for all playoff system errors."""

    def __init__(self, message: str, error_code: str = "PLAYOFF_000", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class InvalidRoundException(PlayoffException):
    """
    Raised when an invalid playoff round is specified or encountered.

    Examples:
    - Recording a result for a round that is not being played
    - Advancing a bracket that is already complete
    """

    def __init__(
        self,
        round_name: str,
        message: Optional[str] = None,
        valid_rounds: Optional[list] = None,
        **kwargs
    ):
        context = {
            "invalid_round": round_name,
            "valid_rounds": valid_rounds or [],
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=message or f"Invalid playoff round: {round_name}",
            error_code="PLAYOFF_ROUND_001",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )


class InvalidSeedingException(PlayoffException):
    """
    Raised when playoff seeding data is invalid or incomplete.

    Examples:
    - Not 7 seeds in a conference
    - Fewer than 4 division winners
    - Duplicate team IDs in seeding
    """

    def __init__(
        self,
        message: str,
        conference: Optional[str] = None,
        seed_number: Optional[int] = None,
        team_id: Optional[int] = None,
        **kwargs
    ):
        context = {
            "conference": conference,
            "seed_number": seed_number,
            "team_id": team_id,
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=message,
            error_code="PLAYOFF_SEED_002",
            severity=ExceptionSeverity.CRITICAL,
            recovery_strategy=RecoveryStrategy.RESET,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )


class InvalidBracketException(PlayoffException):
    """
    Raised when a playoff result or matchup is invalid.

    Examples:
    - Recording a tied playoff game
    - Recording a result for an unknown game
    - Same team on both sides of a matchup
    """

    def __init__(
        self,
        message: str,
        round_name: Optional[str] = None,
        game_id: Optional[str] = None,
        **kwargs
    ):
        context = {
            "round": round_name,
            "game_id": game_id,
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=message,
            error_code="PLAYOFF_BRACKET_003",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )


class PlayoffStateException(PlayoffException):
    """
    Raised when a bracket transition is not allowed.

    Examples:
    - Advancing a round that still has unplayed games
    - Reading results from an incomplete bracket
    """

    def __init__(
        self,
        message: str,
        current_round: Optional[str] = None,
        pending_games: Optional[int] = None,
        **kwargs
    ):
        context = {
            "current_round": current_round,
            "pending_games": pending_games,
            **kwargs.get('context_dict', {})
        }

        super().__init__(
            message=message,
            error_code="PLAYOFF_STATE_004",
            severity=ExceptionSeverity.ERROR,
            recovery_strategy=RecoveryStrategy.ABORT,
            context_dict=context,
            original_exception=kwargs.get('original_exception')
        )
