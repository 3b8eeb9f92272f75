"""
Player Retirement

Offseason stage 2. Retirement probability increases significantly with
age and decreases with role value; quarterbacks and kickers last longer,
running backs leave earlier.
"""

import logging
import random

from constants.positions import Position
from league_state.league_state import LeagueState
from league_state.player_models import Player, PlayerTier
from offseason.offseason_models import OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage


logger = logging.getLogger(__name__)

MIN_RETIREMENT_AGE = 28

# (minimum age, base chance), oldest band first
AGE_RETIREMENT_CHANCE = (
    (40, 0.85),
    (38, 0.60),
    (36, 0.35),
    (34, 0.20),
    (32, 0.10),
    (30, 0.04),
    (28, 0.01),
)

POSITION_MULTIPLIERS = {
    Position.QB: 0.6,
    Position.K: 0.5,
    Position.P: 0.5,
    Position.RB: 1.4,
}

TIER_MULTIPLIERS = {
    PlayerTier.ELITE: 0.5,
    PlayerTier.STARTER: 0.7,
    PlayerTier.BACKUP: 1.0,
    PlayerTier.FRINGE: 1.3,
}


def retirement_chance(player: Player) -> float:
    """Probability that a player retires this offseason."""
    if player.age < MIN_RETIREMENT_AGE:
        return 0.0

    chance = 0.0
    for min_age, base_chance in AGE_RETIREMENT_CHANCE:
        if player.age >= min_age:
            chance = base_chance
            break

    chance *= POSITION_MULTIPLIERS.get(player.position, 1.0)
    chance *= TIER_MULTIPLIERS[player.tier]
    return min(1.0, chance)


def should_player_retire(player: Player, rng: random.Random) -> bool:
    chance = retirement_chance(player)
    # No draw for players who cannot retire, so young rosters don't shift the stream
    return chance > 0 and rng.random() < chance


def process_retirements(state: LeagueState, context: OffseasonContext) -> StageResult:
    """
    Retire players and remove them everywhere at once.

    A retired player leaves the player table, their contract is voided,
    and they drop off any roster and the free agent list.
    """
    if not context.settings.enable_retirements:
        return StageResult(state, StageReport(stage=OffseasonStage.RETIREMENT))

    retired = [
        player_id for player_id in sorted(state.players)
        if should_player_retire(state.players[player_id], context.rng)
    ]
    if not retired:
        return StageResult(state, StageReport(stage=OffseasonStage.RETIREMENT))

    retired_set = set(retired)
    voided = [
        contract_id for contract_id, contract in state.contracts.items()
        if contract.player_id in retired_set
    ]
    teams = {
        team_id: team.remove_players(retired_set)
        for team_id, team in state.teams.items()
        if retired_set.intersection(team.roster)
    }

    new_state = (
        state.with_players(removed=retired)
        .with_contracts(removed=voided)
        .with_teams(teams)
        .with_free_agents(pid for pid in state.free_agent_ids if pid not in retired_set)
    )

    logger.debug(f"{len(retired)} players retired after the {context.year} season")
    return StageResult(
        state=new_state,
        report=StageReport(
            stage=OffseasonStage.RETIREMENT,
            player_ids=tuple(retired),
            details={'contracts_voided': len(voided)},
        ),
    )
