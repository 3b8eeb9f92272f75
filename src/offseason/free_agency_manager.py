"""
Free Agency Manager

Handles AI free agency:
- Free agent pool ordering (best players sign first)
- Team interest and need scoring
- Market-value signings with a one-year minimum deal fallback
- Cap checks against the upcoming league year
"""

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from league_state.contract_models import Contract
from league_state.league_state import LeagueState
from league_state.player_models import Player, PlayerTier
from offseason.offseason_models import OffseasonContext, Signing, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage
from offseason.team_needs_analyzer import TeamNeedsAnalyzer
from salary_cap.cap_calculator import CapCalculator


logger = logging.getLogger(__name__)

NEED_WEIGHT = 10
OPEN_SPOT_WEIGHT = 2
INTEREST_NOISE = 10

# Age limits for anyone still worth a contract
FRINGE_AGE_LIMIT = 36
NON_ELITE_AGE_LIMIT = 38


@dataclass
class _TeamBoard:
    """Running view of one team while free agency is in progress."""
    team_id: int
    roster: List[str]
    position_counts: Dict
    cap_usage: int
    signed: List[str] = field(default_factory=list)


class FreeAgencyManager:
    """
    Manages the AI free agency process.

    Usage:
        manager = FreeAgencyManager(context)
        result = manager.simulate_free_agency(state)
    """

    def __init__(self, context: OffseasonContext):
        """
        Initialize free agency manager.

        Args:
            context: Offseason context (rng, settings, contract generator)
        """
        self.context = context
        self.settings = context.settings
        self.rng: random.Random = context.rng
        self.needs_analyzer = TeamNeedsAnalyzer()
        self.cap_calculator = CapCalculator(self.settings.salary_cap)

    def get_free_agent_pool(self, state: LeagueState) -> List[Player]:
        """Unsigned free agents, best tier first, then overall, then ID."""
        return sorted(
            (p for p in state.free_agents() if p.team_id is None),
            key=lambda p: (-p.tier.rank, -p.overall, p.player_id),
        )

    def is_signable(self, player: Player) -> bool:
        """Old fringe players and old non-elite players stay unsigned."""
        if player.age > FRINGE_AGE_LIMIT and player.tier == PlayerTier.FRINGE:
            return False
        if player.age > NON_ELITE_AGE_LIMIT and player.tier != PlayerTier.ELITE:
            return False
        return True

    def can_bid(self, board: _TeamBoard) -> bool:
        """A team bids only with an open roster spot and cap space to spare."""
        if len(board.roster) >= self.settings.max_roster_size:
            return False
        return self.settings.salary_cap - board.cap_usage > self.settings.min_cap_space_to_bid

    def team_interest(self, board: _TeamBoard, player: Player) -> Optional[int]:
        """
        Need score of a team for a player, None when not interested.

        A team bids when it has a roster spot, enough cap space, and either
        a hole at the player's position or a thin roster.
        """
        if not self.can_bid(board):
            return None

        size = len(board.roster)
        deficit = self.needs_analyzer.position_deficit(board.position_counts, player.position)
        if deficit <= 0 and size >= self.settings.fa_interest_roster_size:
            return None

        return (
            max(0, deficit) * NEED_WEIGHT
            + (self.settings.max_roster_size - size) * OPEN_SPOT_WEIGHT
            + self.rng.randint(0, INTEREST_NOISE)
        )

    def choose_team(self, boards: Dict[int, _TeamBoard], player: Player) -> Optional[_TeamBoard]:
        """Highest need score wins; ties go to the lower team ID."""
        best_board = None
        best_score = None
        for team_id in sorted(boards):
            score = self.team_interest(boards[team_id], player)
            if score is not None and (best_score is None or score > best_score):
                best_board = boards[team_id]
                best_score = score
        return best_board

    def offer_contract(self, board: _TeamBoard, player: Player) -> Tuple[Optional[Contract], bool]:
        """
        Market deal when it fits under the cap, else a minimum deal, else nothing.

        Returns:
            (contract, is_minimum_deal); contract is None when neither fits
        """
        year = self.context.next_year
        generator = self.context.contract_generator

        market = generator.generate_contract(player, board.team_id, year)
        if board.cap_usage + market.cap_hit_for_year(year) <= self.settings.salary_cap:
            return market, False

        minimum = generator.generate_minimum_contract(player, board.team_id, year)
        if board.cap_usage + minimum.cap_hit_for_year(year) <= self.settings.salary_cap:
            return minimum, True
        return None, False

    def simulate_free_agency(self, state: LeagueState) -> StageResult:
        """
        Run AI free agency over the whole pool.

        Returns:
            StageResult with signed players on rosters and off the free
            agent list; unsigned players remain free agents
        """
        year = self.context.next_year
        contracts = list(state.contracts.values())
        boards = {
            team_id: _TeamBoard(
                team_id=team_id,
                roster=list(state.teams[team_id].roster),
                position_counts=self.needs_analyzer.position_counts(state.roster_players(team_id)),
                cap_usage=self.cap_calculator.calculate_team_cap_usage(contracts, team_id, year),
            )
            for team_id in state.team_ids
        }

        players: Dict[str, Player] = {}
        new_contracts: Dict[str, Contract] = {}
        signings: List[Signing] = []

        for player in self.get_free_agent_pool(state):
            if not any(self.can_bid(board) for board in boards.values()):
                # Every team is full or out of cap; nobody else can sign
                break
            if not self.is_signable(player):
                continue

            board = self.choose_team(boards, player)
            if board is None:
                continue

            contract, is_minimum = self.offer_contract(board, player)
            if contract is None:
                logger.debug(f"Team {board.team_id} cannot fit {player.player_id} under the cap")
                continue

            board.roster.append(player.player_id)
            board.position_counts[player.position] += 1
            board.cap_usage += contract.cap_hit_for_year(year)
            board.signed.append(player.player_id)

            players[player.player_id] = replace(
                player, team_id=board.team_id, contract_id=contract.contract_id
            )
            new_contracts[contract.contract_id] = contract
            signings.append(Signing(
                player_id=player.player_id,
                team_id=board.team_id,
                contract_id=contract.contract_id,
                is_minimum_deal=is_minimum,
            ))

        teams = {
            team_id: state.teams[team_id].with_roster(board.roster)
            for team_id, board in boards.items()
            if board.signed
        }
        new_state = (
            state.with_players(players)
            .with_contracts(new_contracts)
            .with_teams(teams)
            .with_free_agents(pid for pid in state.free_agent_ids if pid not in players)
        )

        logger.debug(f"{year} free agency: {len(signings)} signings, "
                     f"{len(new_state.free_agent_ids)} players still unsigned")
        return StageResult(
            state=new_state,
            report=StageReport(
                stage=OffseasonStage.FREE_AGENCY,
                player_ids=tuple(s.player_id for s in signings),
                signings=tuple(signings),
                details={'unsigned': len(new_state.free_agent_ids)},
            ),
        )


def process_free_agency(state: LeagueState, context: OffseasonContext) -> StageResult:
    """Offseason stage 6: sign free agents to teams with needs and cap space."""
    if not context.settings.enable_free_agency:
        return StageResult(state, StageReport(stage=OffseasonStage.FREE_AGENCY))
    return FreeAgencyManager(context).simulate_free_agency(state)
