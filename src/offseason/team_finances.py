"""
Team Finances

Offseason stage 8 (recompute every team's cap position for the coming
league year) and the optional cap compliance pass that releases the most
overpaid players until a team fits under the cap.

The offseason pipeline only reports cap overages; enforce_cap_compliance
is never called by it.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from league_state.league_state import LeagueState
from league_state.player_models import Player
from offseason.offseason_models import OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage
from salary_cap.cap_calculator import CapCalculator


logger = logging.getLogger(__name__)


def update_team_finances(state: LeagueState, season: int, salary_cap: int) -> LeagueState:
    """Recompute TeamFinances for every team against the given season."""
    calculator = CapCalculator(salary_cap)
    contracts = list(state.contracts.values())
    teams = {
        team_id: replace(team, finances=calculator.build_finances(contracts, team_id, season))
        for team_id, team in state.teams.items()
    }
    return state.with_teams(teams)


def process_finance_update(state: LeagueState, context: OffseasonContext) -> StageResult:
    """Offseason stage 8: refresh cap usage and space for next year."""
    new_state = update_team_finances(state, context.next_year, context.settings.salary_cap)

    calculator = CapCalculator(context.settings.salary_cap)
    contracts = list(new_state.contracts.values())
    overages = {}
    for team_id in new_state.team_ids:
        is_compliant, overage = calculator.check_cap_compliance(contracts, team_id, context.next_year)
        if not is_compliant:
            overages[team_id] = overage
    if overages:
        logger.info(f"Teams over the {context.next_year} cap: {sorted(overages)}")

    return StageResult(
        state=new_state,
        report=StageReport(
            stage=OffseasonStage.FINANCES,
            details={'teams_over_cap': len(overages), 'cap_overages': overages},
        ),
    )


def enforce_cap_compliance(
    state: LeagueState,
    team_id: int,
    season: Optional[int] = None,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> Tuple[LeagueState, List[str]]:
    """
    Release players until a team is under the cap or at the roster floor.

    Players are released most overpaid first: cap hit divided by tier
    rank, highest first. Released players lose their contract and become
    free agents.

    Args:
        state: Current league state
        team_id: Team to bring under the cap
        season: Cap season (defaults to state.year)
        settings: Cap figure and roster floor

    Returns:
        (new_state, released_player_ids)
    """
    season = state.year if season is None else season
    calculator = CapCalculator(settings.salary_cap)
    team = state.get_team(team_id)
    if team is None:
        return state, []

    usage = calculator.calculate_team_cap_usage(state.contracts.values(), team_id, season)

    def cap_hit(player: Player) -> int:
        contract = state.get_contract(player.contract_id)
        return contract.cap_hit_for_year(season) if contract else 0

    candidates = sorted(
        state.roster_players(team_id),
        key=lambda p: (-cap_hit(p) / p.tier.rank, p.player_id),
    )

    roster_size = team.roster_size
    released: List[Player] = []
    for player in candidates:
        if usage <= settings.salary_cap or roster_size <= settings.min_roster_size:
            break
        usage -= cap_hit(player)
        roster_size -= 1
        released.append(player)

    if not released:
        return state, []

    released_ids = [p.player_id for p in released]
    new_state = (
        state.with_players({p.player_id: replace(p, team_id=None, contract_id=None) for p in released})
        .with_contracts(removed=[p.contract_id for p in released if p.contract_id])
        .with_teams({team_id: team.remove_players(released_ids)})
        .with_free_agents(list(state.free_agent_ids) + released_ids)
    )
    new_state = new_state.with_teams({
        team_id: replace(
            new_state.teams[team_id],
            finances=calculator.build_finances(new_state.contracts.values(), team_id, season),
        )
    })

    logger.info(
        f"Team {team_id} released {len(released)} players for cap compliance "
        f"(usage now {usage:,} of {settings.salary_cap:,})"
    )
    return new_state, released_ids
