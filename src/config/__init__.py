"""
Simulation configuration.
"""

from .simulation_settings import SimulationSettings, DEFAULT_SETTINGS

__all__ = ['SimulationSettings', 'DEFAULT_SETTINGS']
