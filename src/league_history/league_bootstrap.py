"""
Initial League Bootstrap

Builds a complete league from nothing: 32 teams with generated rosters,
contracts already in progress, coaching staffs, a free agent pool, the
next draft class with its picks, and the first season's schedule.
"""

import logging
import random
from dataclasses import replace
from typing import Dict, List, Optional

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from constants.league_structure import all_team_ids
from constants.positions import IDEAL_POSITION_COUNTS
from league_state.league_state import LeagueState
from league_state.player_models import Player, PlayerTier
from league_state.team_models import Team
from offseason.draft_order_service import build_draft_picks
from offseason.team_finances import update_team_finances
from player_generation.coach_generator import CoachGenerator
from player_generation.contract_generator import ContractGenerator
from player_generation.draft_class_generator import DraftClassGenerator
from player_generation.player_generator import PlayerGenerator
from scheduling.schedule_generator import ScheduleGenerator


logger = logging.getLogger(__name__)

INITIAL_FREE_AGENT_POOL_SIZE = 96

FREE_AGENT_TIER_WEIGHTS: Dict[PlayerTier, float] = {
    PlayerTier.STARTER: 0.05,
    PlayerTier.BACKUP: 0.35,
    PlayerTier.FRINGE: 0.60,
}


def generate_free_agent_pool(
    player_generator: PlayerGenerator,
    size: int = INITIAL_FREE_AGENT_POOL_SIZE
) -> List[Player]:
    """Unsigned veterans, positions weighted like a roster."""
    positions = list(IDEAL_POSITION_COUNTS)
    weights = [IDEAL_POSITION_COUNTS[p] for p in positions]
    return [
        player_generator.generate_player(
            player_generator.rng.choices(positions, weights=weights, k=1)[0],
            team_id=None,
            age_range=(23, 34),
            tier_weights=FREE_AGENT_TIER_WEIGHTS,
        )
        for _ in range(size)
    ]


def create_initial_league(
    start_year: int,
    rng: Optional[random.Random] = None,
    settings: SimulationSettings = DEFAULT_SETTINGS,
    free_agent_pool_size: int = INITIAL_FREE_AGENT_POOL_SIZE
) -> LeagueState:
    """
    Create a fresh league ready to play the start_year season.

    Args:
        start_year: First season the league will play
        rng: Random source driving every generator
        settings: Cap, roster and draft tunables
        free_agent_pool_size: Unsigned players available from day one

    Returns:
        LeagueState with year = start_year
    """
    rng = rng or random.Random()
    player_generator = PlayerGenerator(rng)
    contract_generator = ContractGenerator(rng, salary_cap=settings.salary_cap)
    coach_generator = CoachGenerator(rng)

    teams: Dict[int, Team] = {}
    players: Dict[str, Player] = {}
    contracts = {}
    coaches = {}

    for team_id in all_team_ids():
        roster = player_generator.generate_roster(team_id)
        team_contracts, signed = contract_generator.generate_roster_contracts(roster, team_id, start_year)
        staff = coach_generator.generate_staff(team_id, start_year)

        players.update({p.player_id: p for p in signed})
        contracts.update({c.contract_id: c for c in team_contracts})
        coaches.update({c.coach_id: c for c in staff})

        head_coach, offensive_coordinator, defensive_coordinator = staff
        team = Team.create(team_id, salary_cap=settings.salary_cap).with_roster(p.player_id for p in signed)
        teams[team_id] = replace(
            team,
            head_coach_id=head_coach.coach_id,
            offensive_coordinator_id=offensive_coordinator.coach_id,
            defensive_coordinator_id=defensive_coordinator.coach_id,
        )

    free_agents = generate_free_agent_pool(player_generator, free_agent_pool_size)
    players.update({p.player_id: p for p in free_agents})

    draft_class = DraftClassGenerator(player_generator, settings.draft_class_size).generate_draft_class(start_year + 1)
    draft_picks = build_draft_picks(all_team_ids(), start_year + 1, settings.draft_rounds)
    schedule = ScheduleGenerator(rng=rng).generate_season(start_year, all_team_ids())

    state = LeagueState(
        year=start_year,
        teams=teams,
        players=players,
        contracts=contracts,
        coaches=coaches,
        free_agent_ids=tuple(p.player_id for p in free_agents),
        draft_class=draft_class,
        draft_picks=draft_picks,
        schedule=schedule,
    )
    state = update_team_finances(state, start_year, settings.salary_cap)

    logger.info(f"Created initial league for {start_year}: {state.summary()}")
    return state

