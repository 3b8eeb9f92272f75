"""
Formula Scheduler

Builds the 17-game rotation schedule:

- A: 6 divisional games (home and away vs each rival)
- B: 4 games vs a rotating same-conference division
- C: 4 games vs a rotating opposite-conference division
- D: 2 games vs same-finish teams of the two remaining conference divisions
- E: 1 game vs the same-finish team of the opposite-conference division
     played two seasons ago

Every component splits into league-wide rounds in which all 32 teams play
once, giving 17 full rounds. Rounds are shuffled into weeks, one bye-window
week is left empty, and a team-disjoint set of games is moved into it from
other bye-window weeks. Teams whose game moved get their bye in the week the
game left; everyone else has the emptied week as their bye.
"""

from collections import namedtuple
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import logging
import random

from constants.league_structure import (
    AFC, NFC, CONFERENCES, NFL_DIVISIONS, TOTAL_TEAMS, division_key
)
from scheduling.config import ScheduleConfig, ScheduleStrategy
from scheduling.rotation import (
    intra_conference_pairs, inter_conference_opponent,
    seventeenth_game_opponent, seventeenth_game_home_conference
)
from scheduling.schedule_exceptions import ScheduleConstraintException
from scheduling.schedule_models import (
    ScheduleComponent, ScheduledGame, SeasonSchedule, make_game_id
)
from scheduling.schedule_validator import ScheduleValidator


Matchup = namedtuple('Matchup', ['home', 'away', 'component'])

# The three perfect matchings of a 4-team division (by sorted index)
DIVISION_MATCHINGS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)


def default_division_standings() -> Dict[str, List[int]]:
    """Division finish order by team ID, used when no prior season exists."""
    return {division: sorted(members) for division, members in NFL_DIVISIONS.items()}


class FormulaScheduler:
    """
    Generates the rotation-formula schedule for one season.

    Raises ScheduleConstraintException whenever the result cannot be
    produced or fails strict validation; callers fall back to
    RandomPairingScheduler.
    """

    ROUNDS = 17
    GAMES_PER_ROUND = TOTAL_TEAMS // 2

    def __init__(
        self,
        config: ScheduleConfig,
        rng: random.Random,
        logger: logging.Logger = None
    ):
        self.config = config
        self.rng = rng
        self.logger = logger or logging.getLogger(__name__)
        self.validator = ScheduleValidator(config)

    def build(
        self,
        season_year: int,
        prior_standings: Optional[Mapping[str, Sequence[int]]] = None
    ) -> SeasonSchedule:
        """
        Build a validated schedule.

        Args:
            season_year: Season being scheduled (drives the rotations)
            prior_standings: Division name -> team IDs in last season's finish order

        Returns:
            SeasonSchedule using the NFL_FORMULA strategy

        Raises:
            ScheduleConstraintException: Constraints could not be satisfied
        """
        is_valid, config_errors = self.config.validate()
        if not is_valid:
            raise ScheduleConstraintException(
                "Schedule configuration cannot support the formula",
                season_year=season_year,
                violations=config_errors
            )

        standings = self._normalize_standings(prior_standings, season_year)
        rounds = self.build_rounds(season_year, standings)
        bye_counts = self._plan_bye_counts(season_year)

        for attempt in range(1, self.config.max_bye_plan_attempts + 1):
            placement = self._place_rounds(season_year, rounds, bye_counts)
            if placement is None:
                self.logger.debug(f"Bye plan attempt {attempt} for {season_year} failed, reshuffling")
                continue

            games, bye_weeks = placement
            schedule = SeasonSchedule(
                season_year=season_year,
                games=tuple(sorted(games, key=lambda g: (g.week, g.home_team_id))),
                bye_weeks=bye_weeks,
                strategy=ScheduleStrategy.NFL_FORMULA,
                total_weeks=self.config.total_weeks,
            )

            is_valid, errors = self.validator.validate(
                schedule, range(1, TOTAL_TEAMS + 1), strict=True
            )
            if not is_valid:
                raise ScheduleConstraintException(
                    "Formula schedule failed validation",
                    season_year=season_year,
                    violations=errors
                )

            self.logger.debug(f"Formula schedule for {season_year} built on attempt {attempt}")
            return schedule

        raise ScheduleConstraintException(
            f"No bye plan found after {self.config.max_bye_plan_attempts} attempts",
            season_year=season_year
        )

    # ========== Round Construction ==========

    def build_rounds(
        self,
        season_year: int,
        standings: Mapping[str, Sequence[int]]
    ) -> List[List[Matchup]]:
        """
        Build the 17 league-wide rounds.

        Args:
            season_year: Season being scheduled
            standings: Normalized division finish orders

        Returns:
            17 lists of 16 matchups; every team appears once per round
        """
        rounds: List[List[Matchup]] = []
        rounds.extend(self._divisional_rounds(season_year))
        rounds.extend(self._intra_conference_rounds(season_year))
        rounds.extend(self._inter_conference_rounds(season_year))
        rounds.extend(self._standings_rounds(season_year, standings))
        rounds.append(self._seventeenth_game_round(season_year, standings))

        for index, matchups in enumerate(rounds):
            teams = [team for m in matchups for team in (m.home, m.away)]
            if len(matchups) != self.GAMES_PER_ROUND or len(set(teams)) != TOTAL_TEAMS:
                raise ScheduleConstraintException(
                    f"Round {index + 1} is not a full league round",
                    season_year=season_year
                )

        return rounds

    def _divisional_rounds(self, season_year: int) -> List[List[Matchup]]:
        rounds = []
        for matching in DIVISION_MATCHINGS:
            for leg in (0, 1):
                flip = (leg + season_year) % 2 == 1
                matchups = []
                for members in NFL_DIVISIONS.values():
                    for i, j in matching:
                        home, away = members[i], members[j]
                        if flip:
                            home, away = away, home
                        matchups.append(Matchup(home, away, ScheduleComponent.DIVISIONAL))
                rounds.append(matchups)
        return rounds

    def _intra_conference_rounds(self, season_year: int) -> List[List[Matchup]]:
        year_offset = season_year % 2
        pairs = intra_conference_pairs(season_year)
        rounds = []
        for shift in range(4):
            matchups = []
            for conference in CONFERENCES:
                for div_a, div_b in pairs:
                    teams_a = NFL_DIVISIONS[division_key(conference, div_a)]
                    teams_b = NFL_DIVISIONS[division_key(conference, div_b)]
                    matchups.extend(self._cross_matchups(
                        teams_a, teams_b, shift, year_offset, ScheduleComponent.INTRA_CONFERENCE
                    ))
            rounds.append(matchups)
        return rounds

    def _inter_conference_rounds(self, season_year: int) -> List[List[Matchup]]:
        year_offset = season_year % 2
        rounds = []
        for shift in range(4):
            matchups = []
            for afc_index in range(4):
                nfc_index = inter_conference_opponent(afc_index, season_year)
                matchups.extend(self._cross_matchups(
                    NFL_DIVISIONS[division_key(AFC, afc_index)],
                    NFL_DIVISIONS[division_key(NFC, nfc_index)],
                    shift, year_offset, ScheduleComponent.INTER_CONFERENCE
                ))
            rounds.append(matchups)
        return rounds

    @staticmethod
    def _cross_matchups(
        teams_a: Sequence[int],
        teams_b: Sequence[int],
        shift: int,
        year_offset: int,
        component: ScheduleComponent
    ) -> List[Matchup]:
        """Team i of A plays team (i + shift) % 4 of B; checkerboard decides the host."""
        matchups = []
        for i, team_a in enumerate(teams_a):
            j = (i + shift) % 4
            team_b = teams_b[j]
            if (i + j + year_offset) % 2 == 0:
                matchups.append(Matchup(team_a, team_b, component))
            else:
                matchups.append(Matchup(team_b, team_a, component))
        return matchups

    def _standings_rounds(
        self,
        season_year: int,
        standings: Mapping[str, Sequence[int]]
    ) -> List[List[Matchup]]:
        pairs = intra_conference_pairs(season_year)
        group_one, group_two = pairs[0], pairs[1]
        rounds: List[List[Matchup]] = [[], []]

        for conference in CONFERENCES:
            for finish in range(4):
                first = [standings[division_key(conference, d)][finish] for d in group_one]
                second = [standings[division_key(conference, d)][finish] for d in group_two]
                home_pattern = (season_year + finish) % 2

                for diagonal in (0, 1):
                    for i in (0, 1):
                        j = (i + diagonal) % 2
                        if diagonal == home_pattern:
                            matchup = Matchup(first[i], second[j], ScheduleComponent.STANDINGS_BASED)
                        else:
                            matchup = Matchup(second[j], first[i], ScheduleComponent.STANDINGS_BASED)
                        rounds[diagonal].append(matchup)

        return rounds

    def _seventeenth_game_round(
        self,
        season_year: int,
        standings: Mapping[str, Sequence[int]]
    ) -> List[Matchup]:
        afc_hosts = seventeenth_game_home_conference(season_year) == AFC
        matchups = []
        for afc_index in range(4):
            nfc_index = seventeenth_game_opponent(afc_index, season_year)
            afc_order = standings[division_key(AFC, afc_index)]
            nfc_order = standings[division_key(NFC, nfc_index)]
            for finish in range(4):
                afc_team, nfc_team = afc_order[finish], nfc_order[finish]
                if afc_hosts:
                    matchups.append(Matchup(afc_team, nfc_team, ScheduleComponent.SEVENTEENTH_GAME))
                else:
                    matchups.append(Matchup(nfc_team, afc_team, ScheduleComponent.SEVENTEENTH_GAME))
        return matchups

    # ========== Bye Planning ==========

    def _plan_bye_counts(self, season_year: int) -> List[int]:
        """
        Choose how many bye pairs each bye week holds.

        Returns:
            Pair counts for the number of bye weeks to use (summing to 16)
        """
        bye_config = self.config.bye_week
        pairs = TOTAL_TEAMS // 2
        window_size = len(bye_config.window)

        for week_count in range(min(window_size, pairs), 0, -1):
            low = pairs // week_count
            high = low + (1 if pairs % week_count else 0)
            if 2 * high <= bye_config.max_teams_per_week and 2 * low >= bye_config.min_teams_per_week:
                extra = pairs % week_count
                return [low + 1] * extra + [low] * (week_count - extra)

        raise ScheduleConstraintException(
            "Bye window cannot hold balanced bye groups",
            season_year=season_year,
            violations=[f"bye config {bye_config.to_dict()}"]
        )

    def _place_rounds(
        self,
        season_year: int,
        rounds: List[List[Matchup]],
        bye_counts: List[int]
    ) -> Optional[Tuple[List[ScheduledGame], Dict[int, int]]]:
        """
        Assign rounds to weeks and spread byes.

        Returns:
            (games, bye_weeks) or None when no team-disjoint move set was found
        """
        bye_weeks_used = sorted(self.rng.sample(self.config.bye_week.window, len(bye_counts)))
        counts = list(bye_counts)
        self.rng.shuffle(counts)
        pair_counts = dict(zip(bye_weeks_used, counts))

        empty_week = self.rng.choice(bye_weeks_used)
        game_weeks = [w for w in range(1, self.config.total_weeks + 1) if w != empty_week]

        shuffled = list(rounds)
        self.rng.shuffle(shuffled)
        week_rounds = dict(zip(game_weeks, shuffled))

        donors = [(week, pair_counts[week]) for week in bye_weeks_used if week != empty_week]
        moved = self._select_moved_games(donors, week_rounds)
        if moved is None:
            return None

        moved_keys = {(week, m.home, m.away) for week, m in moved}
        bye_weeks: Dict[int, int] = {}
        games: List[ScheduledGame] = []

        for week, matchups in week_rounds.items():
            for m in matchups:
                if (week, m.home, m.away) in moved_keys:
                    bye_weeks[m.home] = week
                    bye_weeks[m.away] = week
                    games.append(self._make_game(season_year, empty_week, m))
                else:
                    games.append(self._make_game(season_year, week, m))

        for team_id in range(1, TOTAL_TEAMS + 1):
            bye_weeks.setdefault(team_id, empty_week)

        return games, bye_weeks

    def _select_moved_games(
        self,
        donors: List[Tuple[int, int]],
        week_rounds: Dict[int, List[Matchup]]
    ) -> Optional[List[Tuple[int, Matchup]]]:
        """
        Depth-first search for a team-disjoint set of games to move.

        Always expands the donor week with the least slack (open games minus
        games still owed); games within one week are taken in list order so
        each combination is visited once.

        Args:
            donors: (week, number of games to take from that week)
            week_rounds: Week -> round matchups

        Returns:
            List of (source week, matchup), or None when the node budget runs out
        """
        remaining = {week: count for week, count in donors if count > 0}
        candidates = {}
        for week in remaining:
            matchups = list(week_rounds[week])
            self.rng.shuffle(matchups)
            candidates[week] = matchups
        next_index = {week: 0 for week in remaining}

        used = set()
        chosen: List[Tuple[int, Matchup]] = []
        budget = [self.config.max_bye_plan_nodes]

        def open_options(week: int) -> List[int]:
            return [
                index for index in range(next_index[week], len(candidates[week]))
                if candidates[week][index].home not in used
                and candidates[week][index].away not in used
            ]

        def search() -> bool:
            budget[0] -= 1
            if budget[0] < 0:
                return False

            pending = [week for week, count in remaining.items() if count > 0]
            if not pending:
                return True

            best_week, best_options = None, None
            for week in pending:
                options = open_options(week)
                if len(options) < remaining[week]:
                    return False
                if best_options is None or len(options) - remaining[week] < len(best_options) - remaining[best_week]:
                    best_week, best_options = week, options

            saved_index = next_index[best_week]
            for index in best_options:
                m = candidates[best_week][index]
                used.update((m.home, m.away))
                chosen.append((best_week, m))
                remaining[best_week] -= 1
                next_index[best_week] = index + 1
                if search():
                    return True
                next_index[best_week] = saved_index
                remaining[best_week] += 1
                chosen.pop()
                used.difference_update((m.home, m.away))
            return False

        return list(chosen) if search() else None

    # ========== Helper Methods ==========

    @staticmethod
    def _normalize_standings(
        prior_standings: Optional[Mapping[str, Sequence[int]]],
        season_year: int
    ) -> Dict[str, List[int]]:
        if prior_standings is None:
            return default_division_standings()

        normalized = {}
        for division, members in NFL_DIVISIONS.items():
            order = list(prior_standings.get(division, []))
            if sorted(order) != sorted(members):
                raise ScheduleConstraintException(
                    f"Prior standings for {division} do not match its teams",
                    season_year=season_year,
                    violations=[f"{division}: got {order}, expected members {members}"]
                )
            normalized[division] = order
        return normalized

    @staticmethod
    def _make_game(season_year: int, week: int, matchup: Matchup) -> ScheduledGame:
        return ScheduledGame(
            game_id=make_game_id(season_year, week, matchup.away, matchup.home),
            week=week,
            home_team_id=matchup.home,
            away_team_id=matchup.away,
            component=matchup.component,
        )
