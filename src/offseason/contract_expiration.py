"""
Contract Expiration

Offseason stage 3: advance every contract by one year. Contracts with no
years left are voided and their players become unsigned free agents.
"""

import logging
from dataclasses import replace

from league_state.league_state import LeagueState
from offseason.offseason_models import OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage


logger = logging.getLogger(__name__)


def process_contract_expirations(state: LeagueState, context: OffseasonContext) -> StageResult:
    """
    Roll every contract forward into the next league year.

    Returns:
        StageResult whose report lists the new free agents
    """
    advanced = {}
    expired = []
    for contract_id in sorted(state.contracts):
        contract = state.contracts[contract_id].advance_year()
        if contract.is_expired:
            expired.append(contract)
        else:
            advanced[contract_id] = contract

    players = {}
    released_by_team = {}
    new_free_agents = []
    for contract in expired:
        player = state.get_player(contract.player_id)
        if player is None:
            logger.debug(f"Contract {contract.contract_id} has no player, voiding only")
            continue
        players[player.player_id] = replace(player, team_id=None, contract_id=None)
        new_free_agents.append(player.player_id)
        for team_id in {contract.team_id, player.team_id}:
            if team_id is not None:
                released_by_team.setdefault(team_id, set()).add(player.player_id)

    teams = {}
    for team_id, player_ids in released_by_team.items():
        team = state.get_team(team_id)
        if team is not None:
            teams[team_id] = team.remove_players(player_ids)

    new_state = (
        state.with_contracts(advanced, removed=[c.contract_id for c in expired])
        .with_players(players)
        .with_teams(teams)
        .with_free_agents(list(state.free_agent_ids) + new_free_agents)
    )

    logger.debug(
        f"{len(expired)} contracts expired going into {context.next_year}; "
        f"{len(new_free_agents)} new free agents"
    )
    return StageResult(
        state=new_state,
        report=StageReport(
            stage=OffseasonStage.CONTRACT_EXPIRATION,
            player_ids=tuple(new_free_agents),
            details={'contracts_expired': len(expired)},
        ),
    )
