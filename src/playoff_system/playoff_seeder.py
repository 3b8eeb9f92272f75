"""
Playoff Seeder

Calculates playoff seeding from final standings.
Pure calculation logic - no side effects.

Per conference:
- Seeds 1-4: the four division winners, ordered by the tiebreak chain
  (a division winner always outranks every wildcard)
- Seeds 5-7: the three best non-division-winners
"""

from typing import List

from constants.league_structure import CONFERENCES
from standings.standings_calculator import StandingsCalculator, sort_standings
from standings.standings_models import LeagueStandings, TeamStanding
from .playoff_exceptions import InvalidSeedingException
from .seeding_models import PlayoffSeeding, ConferenceSeeding, PlayoffSeed


DIVISION_WINNER_SEEDS = 4
TOTAL_SEEDS = 7


class PlayoffSeeder:
    """
    Calculates playoff seeding based on final standings.

    Usage:
        seeder = PlayoffSeeder()
        seeding = seeder.calculate_seeding(standings)
        seeding.afc.get_seed_by_number(1).team_id
    """

    def __init__(self, calculator: StandingsCalculator = None):
        self.calculator = calculator or StandingsCalculator()

    def calculate_seeding(self, standings: LeagueStandings) -> PlayoffSeeding:
        """
        Calculate playoff seeding from standings.

        Args:
            standings: Final regular season standings

        Returns:
            PlayoffSeeding with 7 seeds per conference

        Raises:
            InvalidSeedingException: A conference cannot field 7 teams
        """
        afc, nfc = (
            self._calculate_conference_seeding(standings, conference)
            for conference in CONFERENCES
        )
        return PlayoffSeeding(season=standings.season, afc=afc, nfc=nfc)

    def _calculate_conference_seeding(
        self,
        standings: LeagueStandings,
        conference: str
    ) -> ConferenceSeeding:
        # Step 1: Division winners sorted by record (seeds 1-4)
        winners = sort_standings(
            standings.teams[team_id] for team_id in standings.division_winners(conference)
        )
        if len(winners) != DIVISION_WINNER_SEEDS:
            raise InvalidSeedingException(
                f"{conference} has {len(winners)} division winners, expected {DIVISION_WINNER_SEEDS}",
                conference=conference
            )

        # Step 2: Best remaining records (seeds 5-7)
        wildcard_ids = self.calculator.wildcard_teams(
            standings, conference, TOTAL_SEEDS - DIVISION_WINNER_SEEDS
        )
        wildcards = [standings.teams[team_id] for team_id in wildcard_ids]
        if len(wildcards) != TOTAL_SEEDS - DIVISION_WINNER_SEEDS:
            raise InvalidSeedingException(
                f"{conference} has only {len(wildcards)} wildcard candidates",
                conference=conference
            )

        # Step 3: Create playoff seeds
        seeds = tuple(
            self._create_playoff_seed(team, seed_number, is_division_winner=seed_number <= 4)
            for seed_number, team in enumerate(winners + wildcards, start=1)
        )
        self._validate_unique(seeds, conference)

        return ConferenceSeeding(conference=conference, seeds=seeds)

    @staticmethod
    def _create_playoff_seed(
        team: TeamStanding,
        seed: int,
        is_division_winner: bool
    ) -> PlayoffSeed:
        return PlayoffSeed(
            seed=seed,
            team_id=team.team_id,
            wins=team.wins,
            losses=team.losses,
            ties=team.ties,
            win_percentage=team.win_percentage,
            division_winner=is_division_winner,
            division_name=team.division,
            conference=team.conference,
            point_differential=team.point_differential,
        )

    @staticmethod
    def _validate_unique(seeds, conference: str) -> None:
        team_ids: List[int] = [seed.team_id for seed in seeds]
        if len(set(team_ids)) != len(team_ids):
            raise InvalidSeedingException(
                f"Duplicate teams in {conference} seeding: {team_ids}",
                conference=conference
            )
