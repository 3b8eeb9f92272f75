"""
Centralized Simulation Settings

Tunable constants for the league history simulation: roster limits, cap
figures, draft sizing, quick-sim scoring, and offseason toggles.

Usage:
    from config.simulation_settings import SimulationSettings

    settings = SimulationSettings()                  # defaults
    settings = SimulationSettings.from_json("sim.json")
    is_valid, errors = settings.validate()
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, List, Tuple
import json


@dataclass(frozen=True)
class SimulationSettings:
    """
    Simulation tunables.

    Defaults reproduce the standard 32-team, 53-man, 7-round league.
    """

    # ================================================================
    # ROSTER & CAP
    # ================================================================
    max_roster_size: int = 53
    min_roster_size: int = 45        # Floor for cap-compliance releases
    fa_interest_roster_size: int = 50  # Teams below this always shop in FA
    salary_cap: int = 255_400_000
    min_cap_space_to_bid: int = 1_000

    # ================================================================
    # DRAFT
    # ================================================================
    draft_rounds: int = 7
    draft_class_size: int = 256      # 224 picks + UDFA pool
    prospects_considered: int = 50   # Top prospects each team evaluates

    # ================================================================
    # QUICK SIM SCORING
    # ================================================================
    base_score: float = 22.0
    score_stddev: float = 10.0
    home_field_advantage: float = 3.0
    strength_weight: float = 14.0    # Max points swing from strength diff
    overtime_chance: float = 0.9     # Chance a tied regular season game is decided
    overtime_home_edge: float = 0.55

    # ================================================================
    # OFFSEASON TOGGLES
    # True  = stage runs normally
    # False = stage is skipped (faster, for testing)
    # ================================================================
    enable_retirements: bool = True
    enable_coaching_changes: bool = True
    enable_free_agency: bool = True

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Validate settings.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        errors = []

        if self.max_roster_size < 1:
            errors.append(f"max_roster_size must be positive, got {self.max_roster_size}")
        if self.min_roster_size > self.max_roster_size:
            errors.append(
                f"min_roster_size ({self.min_roster_size}) exceeds "
                f"max_roster_size ({self.max_roster_size})"
            )
        if self.salary_cap <= 0:
            errors.append(f"salary_cap must be positive, got {self.salary_cap}")
        if self.draft_rounds < 1:
            errors.append(f"draft_rounds must be at least 1, got {self.draft_rounds}")
        if self.draft_class_size < self.draft_rounds * 32:
            errors.append(
                f"draft_class_size ({self.draft_class_size}) smaller than "
                f"total picks ({self.draft_rounds * 32})"
            )
        if self.score_stddev < 0:
            errors.append("score_stddev cannot be negative")
        if not 0.0 <= self.overtime_chance <= 1.0:
            errors.append(f"overtime_chance must be within [0, 1], got {self.overtime_chance}")

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationSettings':
        """Build settings from a dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_json(self, filepath: str) -> None:
        """Save settings to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'SimulationSettings':
        """Load settings from JSON file"""
        with open(filepath, 'r') as f:
            return cls.from_dict(json.load(f))


DEFAULT_SETTINGS = SimulationSettings()
