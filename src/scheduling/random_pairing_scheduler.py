"""
Random Pairing Scheduler

Looser fallback used whenever the formula scheduler cannot satisfy its
constraints. It never fails for a 32-team league:

1. Teams are shuffled into 8 groups of 4.
2. A circle-method round robin runs over 10 entries (8 groups plus two
   placeholders P and Q), giving 9 rounds of 2 weeks each.
3. Group vs group: two weeks of cross games using two different shifts.
   Group vs P: two weeks of intra-group games.
   Group vs Q: one week of intra-group games and one bye week.
   (P meets Q once; that round every group plays another group.)

Every team ends with 14 cross-group games, 3 intra-group games, one bye,
and no repeated opponent. The 18 weeks are then permuted so the 8 bye
weeks land inside the bye window when it is wide enough.
"""

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple
import logging
import random

from scheduling.config import ScheduleConfig, ScheduleStrategy
from scheduling.schedule_models import (
    ScheduleComponent, ScheduledGame, SeasonSchedule, make_game_id
)


GROUP_SIZE = 4
PLACEHOLDER_INTRA = 'P'
PLACEHOLDER_BYE = 'Q'

# Perfect matchings of a 4-team group by index
GROUP_MATCHINGS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)


class RandomPairingScheduler:
    """Grouped round robin that always yields 17 games and one bye per team."""

    def __init__(
        self,
        config: ScheduleConfig,
        rng: random.Random,
        logger: logging.Logger = None
    ):
        self.config = config
        self.rng = rng
        self.logger = logger or logging.getLogger(__name__)

    def build(self, season_year: int, team_ids: Sequence[int]) -> SeasonSchedule:
        """
        Build a fallback schedule.

        Args:
            season_year: Season being scheduled
            team_ids: All league teams (32, a multiple of 4 groups)

        Returns:
            SeasonSchedule using the RANDOM_PAIRING strategy
        """
        teams = list(team_ids)
        if len(teams) != 32:
            raise ValueError(f"Random pairing needs 32 teams, got {len(teams)}")

        self.rng.shuffle(teams)
        groups = [teams[i:i + GROUP_SIZE] for i in range(0, len(teams), GROUP_SIZE)]

        weeks: List[List[Tuple[int, int]]] = []
        week_byes: List[List[int]] = []

        for round_pairs in self._group_rounds(len(groups)):
            first: List[Tuple[int, int]] = []
            second: List[Tuple[int, int]] = []
            first_byes: List[int] = []
            second_byes: List[int] = []

            for entry_a, entry_b in round_pairs:
                if {entry_a, entry_b} == {PLACEHOLDER_INTRA, PLACEHOLDER_BYE}:
                    continue
                if entry_a in (PLACEHOLDER_INTRA, PLACEHOLDER_BYE):
                    entry_a, entry_b = entry_b, entry_a

                group = groups[entry_a]
                if entry_b == PLACEHOLDER_INTRA:
                    first.extend(self._intra_pairs(group, GROUP_MATCHINGS[0]))
                    second.extend(self._intra_pairs(group, GROUP_MATCHINGS[1]))
                elif entry_b == PLACEHOLDER_BYE:
                    games = self._intra_pairs(group, GROUP_MATCHINGS[2])
                    if self.rng.random() < 0.5:
                        first.extend(games)
                        second_byes.extend(group)
                    else:
                        second.extend(games)
                        first_byes.extend(group)
                else:
                    shift_one, shift_two = self.rng.sample(range(GROUP_SIZE), 2)
                    first.extend(self._cross_pairs(group, groups[entry_b], shift_one))
                    second.extend(self._cross_pairs(group, groups[entry_b], shift_two))

            weeks.extend([first, second])
            week_byes.extend([first_byes, second_byes])

        week_numbers = self._assign_week_numbers(week_byes)
        return self._build_schedule(season_year, teams, weeks, week_byes, week_numbers)

    # ========== Round Robin ==========

    def _group_rounds(self, group_count: int) -> List[List[Tuple[object, object]]]:
        """Circle method over the groups plus the two placeholders."""
        entries: List[object] = list(range(group_count)) + [PLACEHOLDER_INTRA, PLACEHOLDER_BYE]
        size = len(entries)
        fixed, rotating = entries[0], entries[1:]
        rounds = []

        for _ in range(size - 1):
            arrangement = [fixed] + rotating
            rounds.append([
                (arrangement[i], arrangement[size - 1 - i]) for i in range(size // 2)
            ])
            rotating = rotating[-1:] + rotating[:-1]

        return rounds

    @staticmethod
    def _intra_pairs(group: List[int], matching) -> List[Tuple[int, int]]:
        return [(group[i], group[j]) for i, j in matching]

    @staticmethod
    def _cross_pairs(group_a: List[int], group_b: List[int], shift: int) -> List[Tuple[int, int]]:
        return [
            (team, group_b[(i + shift) % GROUP_SIZE]) for i, team in enumerate(group_a)
        ]

    # ========== Week Placement ==========

    def _assign_week_numbers(self, week_byes: List[List[int]]) -> List[int]:
        """
        Map generated week slots to calendar weeks.

        Bye slots go into the bye window when it holds them all,
        everything else fills the remaining weeks in random order.
        """
        total_weeks = self.config.total_weeks
        bye_slots = [index for index, byes in enumerate(week_byes) if byes]
        open_slots = [index for index, byes in enumerate(week_byes) if not byes]

        window = [w for w in self.config.bye_week.window if 1 <= w <= total_weeks]
        if len(window) >= len(bye_slots):
            bye_calendar = sorted(self.rng.sample(window, len(bye_slots)))
        else:
            self.logger.debug(
                f"Bye window {window} narrower than {len(bye_slots)} bye weeks, "
                "placing byes anywhere"
            )
            bye_calendar = sorted(self.rng.sample(range(1, total_weeks + 1), len(bye_slots)))

        remaining = [w for w in range(1, total_weeks + 1) if w not in bye_calendar]
        self.rng.shuffle(bye_slots)
        self.rng.shuffle(open_slots)

        week_numbers = [0] * len(week_byes)
        for slot, week in zip(bye_slots, bye_calendar):
            week_numbers[slot] = week
        for slot, week in zip(open_slots, remaining):
            week_numbers[slot] = week
        return week_numbers

    def _build_schedule(
        self,
        season_year: int,
        teams: List[int],
        weeks: List[List[Tuple[int, int]]],
        week_byes: List[List[int]],
        week_numbers: List[int]
    ) -> SeasonSchedule:
        home_counts: Dict[int, int] = defaultdict(int)
        bye_weeks: Dict[int, int] = {}
        games: List[ScheduledGame] = []

        for slot in sorted(range(len(weeks)), key=lambda index: week_numbers[index]):
            week = week_numbers[slot]
            for team_id in week_byes[slot]:
                bye_weeks[team_id] = week
            for team_a, team_b in weeks[slot]:
                home, away = self._pick_home(team_a, team_b, home_counts)
                home_counts[home] += 1
                games.append(ScheduledGame(
                    game_id=make_game_id(season_year, week, away, home),
                    week=week,
                    home_team_id=home,
                    away_team_id=away,
                    component=ScheduleComponent.RANDOM_PAIRING,
                ))

        return SeasonSchedule(
            season_year=season_year,
            games=tuple(games),
            bye_weeks={team_id: bye_weeks[team_id] for team_id in sorted(teams)},
            strategy=ScheduleStrategy.RANDOM_PAIRING,
            total_weeks=self.config.total_weeks,
        )

    def _pick_home(
        self,
        team_a: int,
        team_b: int,
        home_counts: Dict[int, int]
    ) -> Tuple[int, int]:
        """Greedy home/away balance; coin flip when even."""
        if home_counts[team_a] < home_counts[team_b]:
            return team_a, team_b
        if home_counts[team_b] < home_counts[team_a]:
            return team_b, team_a
        return (team_a, team_b) if self.rng.random() < 0.5 else (team_b, team_a)

