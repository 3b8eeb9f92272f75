"""
Playoff Bracket Data Models

Rounds, matchups, and the immutable bracket the playoff state machine
transitions between.

Round progression:
    SEEDED -> WILD_CARD -> DIVISIONAL -> CONFERENCE_CHAMPIONSHIP
           -> SUPER_BOWL -> COMPLETE
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .seeding_models import PlayoffSeeding


class PlayoffRound(Enum):
    """Bracket states; the four middle values are rounds with games."""
    SEEDED = "seeded"
    WILD_CARD = "wild_card"
    DIVISIONAL = "divisional"
    CONFERENCE_CHAMPIONSHIP = "conference"
    SUPER_BOWL = "super_bowl"
    COMPLETE = "complete"

    @property
    def has_games(self) -> bool:
        return self in GAME_ROUNDS

    @property
    def next_round(self) -> Optional['PlayoffRound']:
        order = list(PlayoffRound)
        index = order.index(self)
        return order[index + 1] if index + 1 < len(order) else None

    @property
    def expected_game_count(self) -> int:
        """Get expected number of games for this round."""
        return EXPECTED_GAME_COUNTS.get(self, 0)

    @property
    def display_name(self) -> str:
        return {
            PlayoffRound.SEEDED: 'Seeded',
            PlayoffRound.WILD_CARD: 'Wild Card',
            PlayoffRound.DIVISIONAL: 'Divisional Round',
            PlayoffRound.CONFERENCE_CHAMPIONSHIP: 'Conference Championship',
            PlayoffRound.SUPER_BOWL: 'Super Bowl',
            PlayoffRound.COMPLETE: 'Complete',
        }[self]


GAME_ROUNDS: Tuple[PlayoffRound, ...] = (
    PlayoffRound.WILD_CARD,
    PlayoffRound.DIVISIONAL,
    PlayoffRound.CONFERENCE_CHAMPIONSHIP,
    PlayoffRound.SUPER_BOWL,
)

EXPECTED_GAME_COUNTS: Dict[PlayoffRound, int] = {
    PlayoffRound.WILD_CARD: 6,                  # 3 AFC + 3 NFC
    PlayoffRound.DIVISIONAL: 4,                 # 2 AFC + 2 NFC
    PlayoffRound.CONFERENCE_CHAMPIONSHIP: 2,    # 1 AFC + 1 NFC
    PlayoffRound.SUPER_BOWL: 1,
}


@dataclass(frozen=True)
class PlayoffMatchup:
    """
    A single playoff game.

    Seeds are the teams' original conference seeds; the Super Bowl keeps
    each champion's own conference seed.
    """
    game_id: str
    round: PlayoffRound
    conference: Optional[str]   # 'AFC', 'NFC', or None for the Super Bowl
    home_team_id: int
    away_team_id: int
    home_seed: int
    away_seed: int
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    @property
    def winner_id(self) -> Optional[int]:
        if not self.is_complete or self.home_score == self.away_score:
            return None
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    @property
    def loser_id(self) -> Optional[int]:
        winner = self.winner_id
        if winner is None:
            return None
        return self.away_team_id if winner == self.home_team_id else self.home_team_id

    @property
    def winner_seed(self) -> Optional[int]:
        winner = self.winner_id
        if winner is None:
            return None
        return self.home_seed if winner == self.home_team_id else self.away_seed

    def involves(self, team_id: int) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def with_result(self, home_score: int, away_score: int) -> 'PlayoffMatchup':
        return replace(self, home_score=home_score, away_score=away_score)

    @property
    def matchup_string(self) -> str:
        """Get matchup as string (e.g., '(7) Team 8 @ (2) Team 1')."""
        if self.conference:
            return f"({self.away_seed}) Team {self.away_team_id} @ ({self.home_seed}) Team {self.home_team_id}"
        return f"Team {self.away_team_id} @ Team {self.home_team_id}"


@dataclass(frozen=True)
class PlayoffBracket:
    """
    Immutable playoff bracket.

    matchups holds every game created so far across all rounds; transitions
    in playoff_state return new brackets.
    """
    season: int
    seeding: PlayoffSeeding
    current_round: PlayoffRound = PlayoffRound.SEEDED
    matchups: Tuple[PlayoffMatchup, ...] = ()

    @property
    def is_complete(self) -> bool:
        return self.current_round == PlayoffRound.COMPLETE

    @property
    def participants(self) -> List[int]:
        """Seeded teams, AFC seeds 1-7 then NFC seeds 1-7."""
        return self.seeding.playoff_team_ids

    def round_matchups(self, playoff_round: PlayoffRound) -> List[PlayoffMatchup]:
        return [m for m in self.matchups if m.round == playoff_round]

    def current_matchups(self) -> List[PlayoffMatchup]:
        return self.round_matchups(self.current_round)

    def pending_matchups(self) -> List[PlayoffMatchup]:
        return [m for m in self.current_matchups() if not m.is_complete]

    def is_round_complete(self, playoff_round: PlayoffRound) -> bool:
        """A round is complete once every matchup in it has a winner."""
        games = self.round_matchups(playoff_round)
        if len(games) != playoff_round.expected_game_count:
            return False
        return all(m.winner_id is not None for m in games)

    def get_matchup(self, game_id: str) -> Optional[PlayoffMatchup]:
        for matchup in self.matchups:
            if matchup.game_id == game_id:
                return matchup
        return None

    def super_bowl(self) -> Optional[PlayoffMatchup]:
        games = self.round_matchups(PlayoffRound.SUPER_BOWL)
        return games[0] if games else None

    @property
    def champion_id(self) -> Optional[int]:
        game = self.super_bowl()
        return game.winner_id if game else None

    @property
    def runner_up_id(self) -> Optional[int]:
        game = self.super_bowl()
        return game.loser_id if game else None

    def elimination_round(self, team_id: int) -> Optional[PlayoffRound]:
        """
        Round a team was knocked out in.

        Returns:
            The losing round, COMPLETE for the champion, or None for teams
            still alive or outside the field
        """
        for matchup in self.matchups:
            if matchup.loser_id == team_id:
                return matchup.round
        if self.champion_id == team_id:
            return PlayoffRound.COMPLETE
        return None
