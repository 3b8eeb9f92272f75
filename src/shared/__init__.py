"""
Shared components used across league simulation packages.
"""

from .exceptions import LeagueSimException, ExceptionSeverity, RecoveryStrategy

__all__ = [
    'LeagueSimException',
    'ExceptionSeverity',
    'RecoveryStrategy',
]
