"""
Playoff Seeding Data Models

Data structures for representing playoff seeding calculations.
"""

from dataclasses import dataclass
from typing import List, Optional, Dict, Any, Tuple


@dataclass(frozen=True)
class PlayoffSeed:
    """
    Represents a single playoff seed.

    Contains team record information and seeding context.
    """
    seed: int                      # 1-7
    team_id: int                   # Team ID (1-32)
    wins: int
    losses: int
    ties: int
    win_percentage: float
    division_winner: bool          # True for seeds 1-4
    division_name: str             # e.g., "AFC North"
    conference: str                # "AFC" or "NFC"
    point_differential: int

    @property
    def record_string(self) -> str:
        """Get record as string (e.g., '13-4' or '10-6-1')."""
        if self.ties > 0:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def seed_label(self) -> str:
        """Get seed label (e.g., '#1 Seed' or 'Wild Card')."""
        if self.seed == 1:
            return "#1 Seed (Bye)"
        elif self.seed <= 4:
            return f"#{self.seed} Seed (Division Winner)"
        else:
            return f"#{self.seed} Seed (Wild Card)"


@dataclass(frozen=True)
class ConferenceSeeding:
    """
    Seeding for a single conference (AFC or NFC).

    Seeds 1-4 are division winners regardless of record against the
    wildcards; seeds 5-7 are the best remaining records.
    """
    conference: str                    # "AFC" or "NFC"
    seeds: Tuple[PlayoffSeed, ...]     # 7 seeds, ordered 1-7

    @property
    def division_winners(self) -> List[PlayoffSeed]:
        return [seed for seed in self.seeds if seed.division_winner]

    @property
    def wildcards(self) -> List[PlayoffSeed]:
        return [seed for seed in self.seeds if not seed.division_winner]

    @property
    def team_ids(self) -> List[int]:
        return [seed.team_id for seed in self.seeds]

    def get_seed_by_number(self, seed_number: int) -> Optional[PlayoffSeed]:
        """Get seed by seed number (1-7)."""
        for seed in self.seeds:
            if seed.seed == seed_number:
                return seed
        return None

    def get_seed_by_team(self, team_id: int) -> Optional[PlayoffSeed]:
        """Get seed for a specific team."""
        for seed in self.seeds:
            if seed.team_id == team_id:
                return seed
        return None


@dataclass(frozen=True)
class PlayoffSeeding:
    """
    Complete playoff seeding for both conferences.

    This is the main output of the PlayoffSeeder calculation.
    """
    season: int                        # Season year (e.g., 2024)
    afc: ConferenceSeeding
    nfc: ConferenceSeeding

    def conference(self, name: str) -> ConferenceSeeding:
        return self.afc if name == 'AFC' else self.nfc

    def get_seed(self, team_id: int) -> Optional[PlayoffSeed]:
        """
        Get playoff seed for a specific team (searches both conferences).

        Returns:
            PlayoffSeed if team is in the playoff field, None otherwise
        """
        return self.afc.get_seed_by_team(team_id) or self.nfc.get_seed_by_team(team_id)

    def is_in_playoffs(self, team_id: int) -> bool:
        return self.get_seed(team_id) is not None

    @property
    def playoff_team_ids(self) -> List[int]:
        """All 14 playoff teams, AFC seeds first."""
        return self.afc.team_ids + self.nfc.team_ids

    def get_matchups(self) -> Dict[str, List[tuple]]:
        """
        Get wild card round matchups as (home, away) team IDs.

        Returns:
            {
                'AFC': [(2, 7), (3, 6), (4, 5)] by team ID,
                'NFC': [...]
            }
        """
        matchups = {}
        for conf in (self.afc, self.nfc):
            matchups[conf.conference] = [
                (conf.get_seed_by_number(high).team_id, conf.get_seed_by_number(low).team_id)
                for high, low in ((2, 7), (3, 6), (4, 5))
            ]
        return matchups

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'season': self.season,
            'afc': [self._seed_dict(s) for s in self.afc.seeds],
            'nfc': [self._seed_dict(s) for s in self.nfc.seeds],
        }

    @staticmethod
    def _seed_dict(seed: PlayoffSeed) -> Dict[str, Any]:
        return {
            'seed': seed.seed,
            'team_id': seed.team_id,
            'record': seed.record_string,
            'win_percentage': seed.win_percentage,
            'division_name': seed.division_name,
            'division_winner': seed.division_winner,
            'point_differential': seed.point_differential,
        }
