"""
Draft Manager

Handles the automated draft:
- Draft board construction (best prospects first)
- Need-weighted AI pick selection
- Rookie-scale contracts for drafted players
- Undrafted prospects released into the free agent pool (UDFA)
"""

import logging
import random
from collections import Counter
from dataclasses import replace
from typing import Dict, List, Mapping, Sequence

from constants.positions import Position
from league_state.contract_models import Contract
from league_state.draft_models import DraftClass, DraftPick
from league_state.league_state import LeagueState
from league_state.player_models import Player, Prospect
from offseason.draft_order_service import build_draft_picks
from offseason.offseason_models import DraftSelection, OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage
from offseason.team_needs_analyzer import TeamNeedsAnalyzer


logger = logging.getLogger(__name__)

NEED_BONUS_PER_DEFICIT = 15
NO_NEED_PENALTY = -10
EVALUATION_NOISE = 5


class DraftManager:
    """
    Runs every pick of a draft for AI teams.

    Usage:
        manager = DraftManager(context)
        result = manager.simulate_draft(state, draft_class, picks)
    """

    def __init__(self, context: OffseasonContext):
        """
        Initialize draft manager.

        Args:
            context: Offseason context (rng, settings, contract generator)
        """
        self.context = context
        self.rng: random.Random = context.rng
        self.prospects_considered = context.settings.prospects_considered
        self.needs_analyzer = TeamNeedsAnalyzer()

    def get_draft_board(self, draft_class: DraftClass) -> List[Prospect]:
        """Prospects best first (potential, then current overall)."""
        return sorted(
            draft_class.prospects,
            key=lambda p: (p.potential, p.overall),
            reverse=True,
        )

    def _evaluate_prospect(self, prospect: Prospect, team_needs: Mapping[Position, int]) -> float:
        """
        Evaluate prospect value for a specific team.

        Base value is the prospect's potential; positions the team is short
        at get +15 per missing player, positions it is already full at
        lose 10. Noise keeps identical boards from producing identical drafts.
        """
        deficit = team_needs.get(prospect.position, 0)
        need_bonus = deficit * NEED_BONUS_PER_DEFICIT if deficit > 0 else NO_NEED_PENALTY
        return prospect.potential + need_bonus + self.rng.randint(-EVALUATION_NOISE, EVALUATION_NOISE)

    def select_prospect(self, board: List[Prospect], team_needs: Mapping[Position, int]) -> int:
        """Index of the best-scoring prospect among the top of the board."""
        best_index = 0
        best_score = float('-inf')
        for index, prospect in enumerate(board[:self.prospects_considered]):
            score = self._evaluate_prospect(prospect, team_needs)
            if score > best_score:
                best_score = score
                best_index = index
        return best_index

    def simulate_draft(
        self,
        state: LeagueState,
        draft_class: DraftClass,
        picks: Sequence[DraftPick]
    ) -> StageResult:
        """
        Simulate the entire draft.

        Picks owned by unknown teams are skipped. When the board runs dry
        the remaining picks go unused.

        Returns:
            StageResult with drafted players, UDFAs in the free agent pool,
            and used picks carrying their player_id
        """
        year = self.context.next_year
        board = self.get_draft_board(draft_class)

        position_counts: Dict[int, Counter] = {
            team_id: Counter(p.position for p in state.roster_players(team_id))
            for team_id in state.team_ids
        }
        rosters: Dict[int, List[str]] = {
            team_id: list(team.roster) for team_id, team in state.teams.items()
        }

        players: Dict[str, Player] = {}
        contracts: Dict[str, Contract] = {}
        selections: List[DraftSelection] = []
        used_picks: List[DraftPick] = []

        for pick in sorted(picks, key=lambda p: p.overall_pick):
            team_id = pick.current_team_id
            if team_id not in rosters:
                logger.debug(f"Pick {pick.pick_id} owned by unknown team {team_id}, skipping")
                used_picks.append(pick)
                continue
            if not board:
                used_picks.append(pick)
                continue

            needs = self.needs_analyzer.needs_from_counts(position_counts[team_id])
            prospect = board.pop(self.select_prospect(board, needs))

            contract = self.context.contract_generator.generate_rookie_contract(
                prospect.prospect_id, team_id, year, pick.overall_pick
            )
            player = prospect.to_player(team_id=team_id, contract_id=contract.contract_id)

            players[player.player_id] = player
            contracts[contract.contract_id] = contract
            rosters[team_id].append(player.player_id)
            position_counts[team_id][player.position] += 1
            used_picks.append(replace(pick, player_id=player.player_id))
            selections.append(DraftSelection(
                pick_id=pick.pick_id,
                overall_pick=pick.overall_pick,
                round=pick.round,
                team_id=team_id,
                player_id=player.player_id,
            ))

        # Everyone left on the board goes undrafted
        undrafted = [prospect.to_player() for prospect in board]
        for player in undrafted:
            players[player.player_id] = player

        teams = {
            team_id: state.teams[team_id].with_roster(roster)
            for team_id, roster in rosters.items()
            if len(roster) != state.teams[team_id].roster_size
        }

        new_state = (
            state.with_players(players)
            .with_contracts(contracts)
            .with_teams(teams)
            .with_free_agents(list(state.free_agent_ids) + [p.player_id for p in undrafted])
            .evolve(draft_picks=_merge_picks(state.draft_picks, used_picks), draft_class=None)
        )

        logger.debug(f"{year} draft complete: {len(selections)} selections, {len(undrafted)} UDFAs")
        return StageResult(
            state=new_state,
            report=StageReport(
                stage=OffseasonStage.DRAFT,
                player_ids=tuple(s.player_id for s in selections),
                selections=tuple(selections),
                details={'undrafted': len(undrafted)},
            ),
        )


def _merge_picks(existing: Sequence[DraftPick], used: Sequence[DraftPick]) -> tuple:
    by_id = {pick.pick_id: pick for pick in existing}
    for pick in used:
        by_id[pick.pick_id] = pick
    return tuple(sorted(by_id.values(), key=lambda p: (p.year, p.overall_pick)))


def resolve_draft_class(state: LeagueState, context: OffseasonContext) -> DraftClass:
    """Draft class for next_year: context, then state, then freshly generated."""
    if context.draft_class is not None:
        return context.draft_class
    if state.draft_class is not None and state.draft_class.year == context.next_year:
        return state.draft_class
    return context.draft_class_generator.generate_draft_class(context.next_year)


def resolve_draft_picks(state: LeagueState, context: OffseasonContext) -> List[DraftPick]:
    """
    Picks for the next_year draft.

    A draft order from this season's results replaces any placeholder
    picks (pick IDs are per slot, so the new picks overwrite them); without
    one, the state's unused picks for the year are drafted as they stand.
    """
    if context.draft_order:
        return list(build_draft_picks(context.draft_order, context.next_year, context.settings.draft_rounds))
    return [
        pick for pick in state.draft_picks
        if pick.year == context.next_year and pick.player_id is None
    ]


def process_ai_draft(state: LeagueState, context: OffseasonContext) -> StageResult:
    """Offseason stage 5: draft for every team in draft order."""
    draft_class = resolve_draft_class(state, context)
    picks = resolve_draft_picks(state, context)
    if not picks:
        logger.debug(f"No draft order for {context.next_year}; every prospect goes undrafted")
    return DraftManager(context).simulate_draft(state, draft_class, picks)
