"""
Quick game simulator for bulk and historical seasons.

Produces a final score without play-by-play:
- Offense/defense strength (20-95) from roster ratings plus coaching
- Expected points from the strength differential and home field
- Gaussian noise, then snapped to a common football score

Regular season ties go to overtime most of the time; the playoff variant
never returns a tie. All randomness comes from the injected rng so seeded
runs reproduce exactly.
"""

from dataclasses import dataclass
from typing import Iterable, Optional
import random

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from constants.positions import DEFENSIVE_POSITIONS, OFFENSIVE_POSITIONS
from league_state.coach_models import Coach
from league_state.player_models import InjuryStatus, Player


MIN_STRENGTH = 20.0
MAX_STRENGTH = 95.0
EMPTY_UNIT_STRENGTH = 40.0
COACH_IQ_FACTOR = 0.05
BLOWOUT_MARGIN = 21
UPSET_STRENGTH_GAP = 5.0

# Scores reachable through common combinations of 7, 3, 6 and 2
REALISTIC_SCORES = [
    0, 3, 6, 7, 9, 10, 12, 13, 14, 16, 17, 19, 20, 21, 23, 24,
    26, 27, 28, 30, 31, 33, 34, 35, 37, 38, 40, 41, 42, 44, 45
]


@dataclass(frozen=True)
class TeamStrength:
    """Aggregate unit ratings for one team, each clamped to 20-95."""
    team_id: int
    offense: float
    defense: float

    @property
    def overall(self) -> float:
        return (self.offense + self.defense) / 2


@dataclass(frozen=True)
class BoxScore:
    """Derived game data consumed by injury and news generators."""
    home_strength: TeamStrength
    away_strength: TeamStrength
    home_touchdowns: int
    home_field_goals: int
    away_touchdowns: int
    away_field_goals: int
    margin: int
    is_blowout: bool
    is_upset: bool


@dataclass(frozen=True)
class QuickGameResult:
    """Final result of a quick-simulated game."""
    home_team_id: int
    away_team_id: int
    home_score: int
    away_score: int
    went_to_overtime: bool
    is_playoff: bool
    box_score: BoxScore

    @property
    def is_tie(self) -> bool:
        return self.home_score == self.away_score

    @property
    def winner_id(self) -> Optional[int]:
        if self.is_tie:
            return None
        return self.home_team_id if self.home_score > self.away_score else self.away_team_id

    @property
    def loser_id(self) -> Optional[int]:
        if self.is_tie:
            return None
        return self.away_team_id if self.home_score > self.away_score else self.home_team_id


def clamp_strength(value: float) -> float:
    return max(MIN_STRENGTH, min(MAX_STRENGTH, value))


def adjust_to_realistic_score(score: int) -> int:
    """
    Snap a raw score to the closest common football score.

    Scores past the table (rare shootouts) are returned unchanged.
    """
    if score > REALISTIC_SCORES[-1]:
        return score
    return min(REALISTIC_SCORES, key=lambda x: abs(x - score))


class QuickGameSimulator:
    """
    Non play-by-play outcome model.

    Usage:
        simulator = QuickGameSimulator(rng=random.Random(7))
        home = simulator.calculate_strength(1, roster_one, coaches_one)
        away = simulator.calculate_strength(2, roster_two, coaches_two)
        result = simulator.simulate_game(home, away)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        settings: SimulationSettings = DEFAULT_SETTINGS
    ):
        self.rng = rng or random.Random()
        self.settings = settings

    def calculate_strength(
        self,
        team_id: int,
        players: Iterable[Player],
        coaches: Iterable[Coach] = ()
    ) -> TeamStrength:
        """
        Derive offense/defense strength for a team.

        Args:
            team_id: Team ID
            players: Rostered players (injured-reserve players are ignored)
            coaches: Assigned coaching staff

        Returns:
            TeamStrength with both units clamped to 20-95
        """
        offense_ratings = []
        defense_ratings = []
        for player in players:
            if player.injury_status == InjuryStatus.INJURED_RESERVE:
                continue
            if player.position in OFFENSIVE_POSITIONS:
                offense_ratings.append(player.overall)
            elif player.position in DEFENSIVE_POSITIONS:
                defense_ratings.append(player.overall)

        offense = _average(offense_ratings)
        defense = _average(defense_ratings)

        coaching = sum((coach.game_day_iq - 50) * COACH_IQ_FACTOR for coach in coaches)

        return TeamStrength(
            team_id=team_id,
            offense=clamp_strength(offense + coaching),
            defense=clamp_strength(defense + coaching),
        )

    def simulate_game(
        self,
        home: TeamStrength,
        away: TeamStrength,
        is_playoff: bool = False
    ) -> QuickGameResult:
        """
        Simulate one game.

        Args:
            home: Home team strength
            away: Away team strength
            is_playoff: Playoff games never end tied

        Returns:
            QuickGameResult with non-negative scores
        """
        home_score = self._roll_score(home.offense, away.defense, is_home=True)
        away_score = self._roll_score(away.offense, home.defense, is_home=False)
        overtime = False

        if home_score == away_score:
            if is_playoff:
                home_score, away_score = self._resolve_playoff_tie(home_score, away_score)
                overtime = True
            elif self.rng.random() < self.settings.overtime_chance:
                # Overtime field goal
                if self.rng.random() < self.settings.overtime_home_edge:
                    home_score += 3
                else:
                    away_score += 3
                overtime = True

        return QuickGameResult(
            home_team_id=home.team_id,
            away_team_id=away.team_id,
            home_score=home_score,
            away_score=away_score,
            went_to_overtime=overtime,
            is_playoff=is_playoff,
            box_score=self._build_box_score(home, away, home_score, away_score),
        )

    def _roll_score(self, offense: float, opposing_defense: float, is_home: bool) -> int:
        mean = self.settings.base_score
        mean += (offense - opposing_defense) / 100 * self.settings.strength_weight
        if is_home:
            mean += self.settings.home_field_advantage

        raw = self.rng.gauss(mean, self.settings.score_stddev)
        return adjust_to_realistic_score(max(0, int(round(raw))))

    def _resolve_playoff_tie(self, home_score: int, away_score: int):
        """Add a 3-7 point overtime score to one side until the game has a winner."""
        while home_score == away_score:
            points = self.rng.randint(3, 7)
            if self.rng.random() < self.settings.overtime_home_edge:
                home_score += points
            else:
                away_score += points
        return home_score, away_score

    @staticmethod
    def _build_box_score(
        home: TeamStrength,
        away: TeamStrength,
        home_score: int,
        away_score: int
    ) -> BoxScore:
        home_td, home_fg = _scoring_breakdown(home_score)
        away_td, away_fg = _scoring_breakdown(away_score)
        margin = abs(home_score - away_score)

        is_upset = False
        if home_score != away_score:
            winner, loser = (home, away) if home_score > away_score else (away, home)
            is_upset = loser.overall - winner.overall >= UPSET_STRENGTH_GAP

        return BoxScore(
            home_strength=home,
            away_strength=away,
            home_touchdowns=home_td,
            home_field_goals=home_fg,
            away_touchdowns=away_td,
            away_field_goals=away_fg,
            margin=margin,
            is_blowout=margin >= BLOWOUT_MARGIN,
            is_upset=is_upset,
        )


def _average(ratings) -> float:
    if not ratings:
        return EMPTY_UNIT_STRENGTH
    return sum(ratings) / len(ratings)


def _scoring_breakdown(score: int):
    """Estimate (touchdowns, field goals) for a final score."""
    touchdowns = score // 7
    field_goals = (score - touchdowns * 7) // 3
    return touchdowns, field_goals
