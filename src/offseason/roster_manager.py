"""
Roster Manager

Offseason stage 7: bring every roster to exactly the regular season limit.
- Final roster cuts (keep the best players, cut the rest to free agency)
- Depth signings for short rosters (positions of need first)
"""

import logging
from dataclasses import replace
from itertools import cycle
from typing import Dict, Iterable, List, Tuple

from league_state.contract_models import Contract
from league_state.league_state import LeagueState
from league_state.player_models import Player
from offseason.offseason_models import OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage
from offseason.team_needs_analyzer import TeamNeedsAnalyzer
from player_generation.player_generator import ROSTER_FLEX_POSITIONS


logger = logging.getLogger(__name__)


def roster_keep_order(player: Player) -> Tuple[int, int, str]:
    """Best tier first, then overall, then ID."""
    return (-player.tier.rank, -player.overall, player.player_id)


class RosterManager:
    """
    Manages final cuts and depth signings.

    Usage:
        manager = RosterManager(context)
        result = manager.finalize_rosters(state)
    """

    def __init__(self, context: OffseasonContext):
        self.context = context
        self.roster_limit = context.settings.max_roster_size
        self.needs_analyzer = TeamNeedsAnalyzer()

    def select_cuts(self, players: Iterable[Player]) -> List[Player]:
        """Players below the roster limit line, in cut order."""
        ranked = sorted(players, key=roster_keep_order)
        return ranked[self.roster_limit:]

    def fill_positions(self, players: Iterable[Player], open_spots: int) -> List:
        """
        Positions for depth signings.

        Positions of need come first, one body per need per pass (largest
        deficit first) until every deficit is covered; remaining spots
        rotate through the flex positions.
        """
        remaining = self.needs_analyzer.analyze_team_needs(players)
        positions = []
        while remaining and len(positions) < open_spots:
            for position in list(remaining):
                positions.append(position)
                remaining[position] -= 1
                if remaining[position] == 0:
                    del remaining[position]

        filler = cycle(ROSTER_FLEX_POSITIONS)
        while len(positions) < open_spots:
            positions.append(next(filler))
        return positions[:open_spots]

    def finalize_rosters(self, state: LeagueState) -> StageResult:
        """
        Cut and fill every roster to the limit.

        Cut players lose their contract and join the free agent pool;
        generated depth players get a market-value contract for next year.
        """
        year = self.context.next_year
        player_generator = self.context.player_generator
        contract_generator = self.context.contract_generator

        players: Dict[str, Player] = {}
        new_contracts: Dict[str, Contract] = {}
        voided_contracts: List[str] = []
        teams = {}
        cut_ids: List[str] = []
        added_ids: List[str] = []

        for team_id in state.team_ids:
            team = state.teams[team_id]
            roster = state.roster_players(team_id)
            if len(roster) == self.roster_limit and len(team.roster) == self.roster_limit:
                continue

            cuts = self.select_cuts(roster)
            cut_set = {p.player_id for p in cuts}
            for player in cuts:
                if player.contract_id is not None:
                    voided_contracts.append(player.contract_id)
                players[player.player_id] = replace(player, team_id=None, contract_id=None)
                cut_ids.append(player.player_id)

            kept = [p for p in roster if p.player_id not in cut_set]
            new_roster = [p.player_id for p in kept]

            for position in self.fill_positions(kept, self.roster_limit - len(kept)):
                depth = player_generator.generate_depth_player(position, team_id)
                contract = contract_generator.generate_contract(depth, team_id, year)
                players[depth.player_id] = replace(depth, contract_id=contract.contract_id)
                new_contracts[contract.contract_id] = contract
                new_roster.append(depth.player_id)
                added_ids.append(depth.player_id)

            teams[team_id] = team.with_roster(new_roster)
            if cuts or len(new_roster) != len(kept):
                logger.debug(
                    f"Team {team_id}: cut {len(cuts)}, signed {len(new_roster) - len(kept)} depth players"
                )

        new_state = (
            state.with_players(players)
            .with_contracts(new_contracts, removed=voided_contracts)
            .with_teams(teams)
            .with_free_agents(list(state.free_agent_ids) + cut_ids)
        )
        return StageResult(
            state=new_state,
            report=StageReport(
                stage=OffseasonStage.ROSTER_MAINTENANCE,
                player_ids=tuple(cut_ids + added_ids),
                details={'cut': len(cut_ids), 'depth_signings': len(added_ids)},
            ),
        )


def process_roster_maintenance(state: LeagueState, context: OffseasonContext) -> StageResult:
    """Offseason stage 7: every team leaves with exactly the roster limit."""
    return RosterManager(context).finalize_rosters(state)
