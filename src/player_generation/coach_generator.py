"""
Coach Generator

Generates head coaches and coordinators with a game-day IQ around the
league average and a role-appropriate contract length.
"""

import random
from typing import List, Optional

from league_state.coach_models import Coach, CoachRole
from player_generation.name_generator import NameGenerator
from player_generation.player_generator import new_entity_id


CONTRACT_YEARS = {
    CoachRole.HEAD_COACH: (3, 5),
    CoachRole.OFFENSIVE_COORDINATOR: (2, 4),
    CoachRole.DEFENSIVE_COORDINATOR: (2, 4),
}

STAFF_ROLES = (
    CoachRole.HEAD_COACH,
    CoachRole.OFFENSIVE_COORDINATOR,
    CoachRole.DEFENSIVE_COORDINATOR,
)


class CoachGenerator:
    """Generates coaching staff members."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        name_generator: Optional[NameGenerator] = None
    ):
        self.rng = rng or random.Random()
        self.name_generator = name_generator or NameGenerator(self.rng)

    def generate_coach(self, role: CoachRole, team_id: Optional[int], year: int) -> Coach:
        """
        Generate a coach hired in the given year.

        Args:
            role: Staff role
            team_id: Hiring team (None for an unattached coach)
            year: Hire year
        """
        first_name, last_name = self.name_generator.generate()
        iq = int(round(self.rng.gauss(50, 12)))
        return Coach(
            coach_id=new_entity_id(self.rng, "coach"),
            first_name=first_name,
            last_name=last_name,
            role=role,
            team_id=team_id,
            game_day_iq=max(20, min(95, iq)),
            contract_years_remaining=self.contract_years(role),
            hired_year=year,
        )

    def contract_years(self, role: CoachRole) -> int:
        """Length of a new (or renewed) contract for the role."""
        low, high = CONTRACT_YEARS[role]
        return self.rng.randint(low, high)

    def generate_staff(self, team_id: int, year: int) -> List[Coach]:
        """Head coach, offensive and defensive coordinator for a team."""
        return [self.generate_coach(role, team_id, year) for role in STAFF_ROLES]
