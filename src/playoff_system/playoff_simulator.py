"""
Playoff Simulator

Resolves a seeded bracket round by round with the playoff variant of the
quick game simulator, then summarizes the outcome.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
import logging

from game_cycle.quick_game_simulator import QuickGameSimulator, TeamStrength
from .bracket_models import PlayoffBracket, PlayoffRound
from .playoff_exceptions import PlayoffStateException
from .playoff_state import advance, create_bracket, record_result
from .seeding_models import PlayoffSeeding


@dataclass(frozen=True)
class PlayoffResults:
    """Summary of a completed postseason."""
    season: int
    champion_id: int
    runner_up_id: int
    participants: List[int]                         # AFC seeds 1-7, then NFC seeds 1-7
    elimination_rounds: Dict[int, PlayoffRound]     # COMPLETE for the champion
    bracket: PlayoffBracket

    def elimination_round(self, team_id: int) -> Optional[PlayoffRound]:
        return self.elimination_rounds.get(team_id)

    def teams_eliminated_in(self, playoff_round: PlayoffRound) -> List[int]:
        return [
            team_id for team_id in self.participants
            if self.elimination_rounds.get(team_id) == playoff_round
        ]

    @classmethod
    def from_bracket(cls, bracket: PlayoffBracket) -> 'PlayoffResults':
        """
        Summarize a completed bracket.

        Raises:
            PlayoffStateException: Bracket has not reached COMPLETE
        """
        if not bracket.is_complete:
            raise PlayoffStateException(
                "Cannot summarize an incomplete bracket",
                current_round=bracket.current_round.value,
                pending_games=len(bracket.pending_matchups()),
            )

        participants = bracket.seeding.playoff_team_ids
        return cls(
            season=bracket.season,
            champion_id=bracket.champion_id,
            runner_up_id=bracket.runner_up_id,
            participants=participants,
            elimination_rounds={
                team_id: bracket.elimination_round(team_id) for team_id in participants
            },
            bracket=bracket,
        )


class PlayoffSimulator:
    """
    Simulates the full postseason.

    Usage:
        simulator = PlayoffSimulator(QuickGameSimulator(rng))
        results = simulator.simulate(seeding, strengths)
        results.champion_id
    """

    def __init__(self, game_simulator: QuickGameSimulator, logger: logging.Logger = None):
        self.game_simulator = game_simulator
        self.logger = logger or logging.getLogger(__name__)

    def simulate(
        self,
        seeding: PlayoffSeeding,
        strengths: Mapping[int, TeamStrength]
    ) -> PlayoffResults:
        """Simulate every round from seeding to champion."""
        bracket = self.simulate_bracket(create_bracket(seeding), strengths)
        results = PlayoffResults.from_bracket(bracket)
        self.logger.debug(
            f"Season {seeding.season} champion: team {results.champion_id} "
            f"(runner-up team {results.runner_up_id})"
        )
        return results

    def simulate_bracket(
        self,
        bracket: PlayoffBracket,
        strengths: Mapping[int, TeamStrength]
    ) -> PlayoffBracket:
        """Play out a bracket from whatever state it is in until COMPLETE."""
        while not bracket.is_complete:
            if bracket.current_round.has_games:
                bracket = self.simulate_round(bracket, strengths)
            bracket = advance(bracket)
        return bracket

    def simulate_round(
        self,
        bracket: PlayoffBracket,
        strengths: Mapping[int, TeamStrength]
    ) -> PlayoffBracket:
        """Simulate every unplayed game of the current round."""
        for matchup in bracket.pending_matchups():
            result = self.game_simulator.simulate_game(
                strengths[matchup.home_team_id],
                strengths[matchup.away_team_id],
                is_playoff=True,
            )
            self.logger.debug(
                f"{bracket.current_round.value}: {matchup.matchup_string} "
                f"{result.away_score}-{result.home_score}"
            )
            bracket = record_result(bracket, matchup.game_id, result.home_score, result.away_score)
        return bracket
