"""
League Invariant Checks

Structural checks run on a league state at stage boundaries:
- Team set (exactly the 32 league teams)
- Roster limits and roster/player consistency
- Free agent pool consistency
- Contract and coach references
- Schedule shape (17 games plus one bye per team)
- Draft picks (every team once per round)

find_invariant_violations() reports problems as strings;
validate_league_invariants() raises LeagueInvariantException on any.
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from constants.league_structure import all_team_ids
from league_history.history_exceptions import LeagueInvariantException
from league_state.league_state import LeagueState
from scheduling.config import ScheduleConfig
from scheduling.schedule_validator import ScheduleValidator


logger = logging.getLogger(__name__)


def check_teams(state: LeagueState) -> List[str]:
    expected = all_team_ids()
    if sorted(state.teams) != expected:
        return [f"teams: expected ids 1-{len(expected)}, got {sorted(state.teams)}"]
    return []


def check_rosters(state: LeagueState, max_roster_size: int) -> List[str]:
    errors = []
    seen: Dict[str, int] = {}
    for team_id in state.team_ids:
        team = state.teams[team_id]
        if team.roster_size > max_roster_size:
            errors.append(f"rosters: team {team_id} has {team.roster_size} players (max {max_roster_size})")

        for player_id in team.roster:
            if player_id in seen:
                errors.append(f"rosters: player {player_id} on teams {seen[player_id]} and {team_id}")
                continue
            seen[player_id] = team_id

            player = state.get_player(player_id)
            if player is None:
                errors.append(f"rosters: team {team_id} lists unknown player {player_id}")
            elif player.team_id != team_id:
                errors.append(f"rosters: player {player_id} on team {team_id} has team_id {player.team_id}")
    return errors


def check_free_agents(state: LeagueState) -> List[str]:
    errors = []
    for player_id in state.free_agent_ids:
        player = state.get_player(player_id)
        if player is None:
            errors.append(f"free_agents: unknown player {player_id}")
        elif player.team_id is not None:
            errors.append(f"free_agents: {player_id} is on team {player.team_id}")
    return errors


def check_contracts(state: LeagueState) -> List[str]:
    errors = []
    for player in state.players.values():
        if player.contract_id is None:
            continue
        contract = state.get_contract(player.contract_id)
        if contract is None:
            errors.append(f"contracts: player {player.player_id} references missing {player.contract_id}")
        elif contract.player_id != player.player_id:
            errors.append(f"contracts: {contract.contract_id} belongs to {contract.player_id}, "
                          f"not {player.player_id}")
    for contract in state.contracts.values():
        if contract.player_id not in state.players:
            errors.append(f"contracts: {contract.contract_id} has no player")
    return errors


def check_coaches(state: LeagueState) -> List[str]:
    errors = []
    for team_id in state.team_ids:
        for coach_id in state.teams[team_id].coach_ids:
            if coach_id not in state.coaches:
                errors.append(f"coaches: team {team_id} references missing coach {coach_id}")
    return errors


def check_schedule(state: LeagueState) -> List[str]:
    if state.schedule is None:
        return []
    validator = ScheduleValidator(ScheduleConfig.for_season(state.schedule.season_year))
    is_valid, errors = validator.validate(state.schedule, state.team_ids, strict=False)
    return [] if is_valid else [f"schedule: {error}" for error in errors]


def check_draft_order(order: Sequence[int], team_ids: Optional[Sequence[int]] = None) -> List[str]:
    """An order must contain every team exactly once."""
    expected = sorted(team_ids) if team_ids is not None else all_team_ids()
    if sorted(order) != expected:
        counts = Counter(order)
        duplicates = sorted(t for t, n in counts.items() if n > 1)
        missing = sorted(set(expected) - set(order))
        return [f"draft_order: missing {missing}, duplicated {duplicates}"]
    return []


def check_draft_picks(state: LeagueState) -> List[str]:
    errors = []
    rounds = defaultdict(list)
    for pick in state.draft_picks:
        rounds[(pick.year, pick.round)].append(pick.original_team_id)
    for (year, round_number), team_ids in sorted(rounds.items()):
        for error in check_draft_order(team_ids, state.team_ids):
            errors.append(f"draft_picks {year} round {round_number}: {error}")
    return errors


def find_invariant_violations(
    state: LeagueState,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> List[str]:
    """Every invariant violation in a state (empty when the state is sound)."""
    violations = []
    violations.extend(check_teams(state))
    violations.extend(check_rosters(state, settings.max_roster_size))
    violations.extend(check_free_agents(state))
    violations.extend(check_contracts(state))
    violations.extend(check_coaches(state))
    violations.extend(check_schedule(state))
    violations.extend(check_draft_picks(state))
    return violations


def validate_league_invariants(
    state: LeagueState,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> None:
    """
    Raise if the state breaks any structural invariant.

    Raises:
        LeagueInvariantException: One or more violations found
    """
    violations = find_invariant_violations(state, settings)
    if violations:
        for violation in violations[:10]:
            logger.error(f"Invariant violation: {violation}")
        raise LeagueInvariantException(violations, year=state.year)
