"""
Salary Cap System

Cap usage, space and commitments computed from the contract set, plus the
rookie wage scale used for drafted players.
"""

from .cap_calculator import CapCalculator
from .market_value_calculator import MarketValueCalculator
from .rookie_scale import RookieContractValues, RookieScaleCalculator, ROOKIE_CONTRACT_YEARS

__all__ = [
    'CapCalculator',
    'MarketValueCalculator',
    'RookieContractValues',
    'RookieScaleCalculator',
    'ROOKIE_CONTRACT_YEARS',
]
