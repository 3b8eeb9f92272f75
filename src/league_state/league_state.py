"""
League State

Immutable snapshot of the whole league. Every season and offseason stage
consumes one LeagueState and returns a new one; nothing is mutated in
place. Lookup tables are exposed as read-only mappings so accidental
writes fail loudly instead of leaking between stages.

Usage:
    state = state.with_teams({team.team_id: team.with_roster(new_ids)})
    state = state.with_players(updated_players, removed={retired_id})
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from league_state.coach_models import Coach
from league_state.contract_models import Contract
from league_state.draft_models import DraftClass, DraftPick
from league_state.player_models import Player
from league_state.team_models import Team
from scheduling.schedule_models import SeasonSchedule


def _frozen(mapping) -> Mapping:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True, eq=False)
class LeagueState:
    """
    Complete league state for one point in the calendar.

    year is the league year the state belongs to; during the offseason it is
    the season that just finished until the orchestrator rolls it forward.
    """
    year: int
    teams: Mapping[int, Team]
    players: Mapping[str, Player] = field(default_factory=dict)
    contracts: Mapping[str, Contract] = field(default_factory=dict)
    coaches: Mapping[str, Coach] = field(default_factory=dict)
    free_agent_ids: Tuple[str, ...] = ()
    draft_class: Optional[DraftClass] = None
    draft_picks: Tuple[DraftPick, ...] = ()
    schedule: Optional[SeasonSchedule] = None

    def __post_init__(self):
        object.__setattr__(self, 'teams', _frozen(self.teams))
        object.__setattr__(self, 'players', _frozen(self.players))
        object.__setattr__(self, 'contracts', _frozen(self.contracts))
        object.__setattr__(self, 'coaches', _frozen(self.coaches))
        object.__setattr__(self, 'free_agent_ids', tuple(self.free_agent_ids))
        object.__setattr__(self, 'draft_picks', tuple(self.draft_picks))

    # ========== Lookups ==========

    @property
    def team_ids(self) -> List[int]:
        return sorted(self.teams)

    def get_team(self, team_id: int) -> Optional[Team]:
        return self.teams.get(team_id)

    def get_player(self, player_id: str) -> Optional[Player]:
        return self.players.get(player_id)

    def get_contract(self, contract_id: Optional[str]) -> Optional[Contract]:
        if contract_id is None:
            return None
        return self.contracts.get(contract_id)

    def get_coach(self, coach_id: Optional[str]) -> Optional[Coach]:
        if coach_id is None:
            return None
        return self.coaches.get(coach_id)

    def roster_players(self, team_id: int) -> List[Player]:
        """Players on a team's roster; IDs with no player record are skipped."""
        team = self.teams.get(team_id)
        if team is None:
            return []
        return [self.players[pid] for pid in team.roster if pid in self.players]

    def team_coaches(self, team_id: int) -> List[Coach]:
        team = self.teams.get(team_id)
        if team is None:
            return []
        return [self.coaches[cid] for cid in team.coach_ids if cid in self.coaches]

    def team_contracts(self, team_id: int) -> List[Contract]:
        return [c for c in self.contracts.values() if c.team_id == team_id]

    def free_agents(self) -> List[Player]:
        return [self.players[pid] for pid in self.free_agent_ids if pid in self.players]

    # ========== Copy-on-write updates ==========

    def evolve(self, **changes) -> 'LeagueState':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_teams(self, updated: Mapping[int, Team]) -> 'LeagueState':
        if not updated:
            return self
        teams = dict(self.teams)
        teams.update(updated)
        return replace(self, teams=teams)

    def with_players(
        self,
        updated: Mapping[str, Player] = None,
        removed: Iterable[str] = ()
    ) -> 'LeagueState':
        players = _merge(self.players, updated, removed)
        return replace(self, players=players)

    def with_contracts(
        self,
        updated: Mapping[str, Contract] = None,
        removed: Iterable[str] = ()
    ) -> 'LeagueState':
        contracts = _merge(self.contracts, updated, removed)
        return replace(self, contracts=contracts)

    def with_coaches(
        self,
        updated: Mapping[str, Coach] = None,
        removed: Iterable[str] = ()
    ) -> 'LeagueState':
        coaches = _merge(self.coaches, updated, removed)
        return replace(self, coaches=coaches)

    def with_free_agents(self, player_ids: Iterable[str]) -> 'LeagueState':
        """Replace the free agent list, dropping duplicates but keeping order."""
        return replace(self, free_agent_ids=tuple(dict.fromkeys(player_ids)))

    # ========== Summary ==========

    def roster_sizes(self) -> Dict[int, int]:
        return {team_id: team.roster_size for team_id, team in self.teams.items()}

    def summary(self) -> Dict[str, int]:
        return {
            'year': self.year,
            'teams': len(self.teams),
            'players': len(self.players),
            'contracts': len(self.contracts),
            'coaches': len(self.coaches),
            'free_agents': len(self.free_agent_ids),
            'draft_picks': len(self.draft_picks),
        }


def _merge(base: Mapping, updated: Optional[Mapping], removed: Iterable) -> Dict:
    merged = dict(base)
    if updated:
        merged.update(updated)
    for key in removed:
        merged.pop(key, None)
    return merged
