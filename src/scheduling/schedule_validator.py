"""
Schedule Validator

Structural checks for a generated season schedule. Returns
(is_valid, errors) in the same style as config validation so callers can
decide whether to fall back or fail.
"""

from collections import Counter, defaultdict
from typing import Dict, Iterable, List, Set, Tuple

from constants.league_structure import NFL_DIVISIONS
from scheduling.config import ScheduleConfig
from scheduling.schedule_models import SeasonSchedule


class ScheduleValidator:
    """
    Validates season schedules.

    Always checked:
    - Every team plays games_per_team games
    - Every team has exactly one bye and never plays in it
    - No team plays itself or twice in one week
    - Total game count is teams * games_per_team / 2

    Strict mode also checks:
    - Divisional rivals meet twice, once at each venue
    - Bye counts per week stay within the configured bounds and window
    """

    def __init__(self, config: ScheduleConfig):
        self.config = config

    def validate(
        self,
        schedule: SeasonSchedule,
        team_ids: Iterable[int],
        strict: bool = None
    ) -> Tuple[bool, List[str]]:
        """
        Validate a schedule.

        Args:
            schedule: Schedule to check
            team_ids: Teams that must appear
            strict: Override config.strict_validation

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        strict = self.config.strict_validation if strict is None else strict
        team_ids = list(team_ids)
        errors: List[str] = []

        errors.extend(self._check_games(schedule, team_ids))
        errors.extend(self._check_byes(schedule, team_ids))

        expected_total = len(team_ids) * self.config.games_per_team // 2
        if schedule.total_games != expected_total:
            errors.append(f"Expected {expected_total} games, got {schedule.total_games}")

        if strict:
            errors.extend(self._check_divisional_series(schedule))
            errors.extend(self._check_bye_distribution(schedule))

        return len(errors) == 0, errors

    def _check_games(self, schedule: SeasonSchedule, team_ids: List[int]) -> List[str]:
        errors = []
        known = set(team_ids)
        weeks_by_team: Dict[int, List[int]] = defaultdict(list)

        for game in schedule.games:
            if game.home_team_id == game.away_team_id:
                errors.append(f"Team {game.home_team_id} scheduled against itself in week {game.week}")
            if not 1 <= game.week <= self.config.total_weeks:
                errors.append(f"Game {game.game_id} in invalid week {game.week}")
            for team_id in (game.home_team_id, game.away_team_id):
                if team_id not in known:
                    errors.append(f"Game {game.game_id} has unknown team {team_id}")
                weeks_by_team[team_id].append(game.week)

        for team_id in team_ids:
            weeks = weeks_by_team.get(team_id, [])
            if len(weeks) != self.config.games_per_team:
                errors.append(
                    f"Team {team_id} has {len(weeks)} games, expected {self.config.games_per_team}"
                )
            doubled = [week for week, count in Counter(weeks).items() if count > 1]
            for week in doubled:
                errors.append(f"Team {team_id} plays twice in week {week}")

        return errors

    def _check_byes(self, schedule: SeasonSchedule, team_ids: List[int]) -> List[str]:
        errors = []
        played: Dict[int, Set[int]] = defaultdict(set)
        for game in schedule.games:
            played[game.home_team_id].add(game.week)
            played[game.away_team_id].add(game.week)

        all_weeks = set(range(1, self.config.total_weeks + 1))
        for team_id in team_ids:
            bye = schedule.bye_weeks.get(team_id)
            if bye is None:
                errors.append(f"Team {team_id} has no bye week")
                continue
            if bye in played[team_id]:
                errors.append(f"Team {team_id} scheduled during its bye week {bye}")
            idle = all_weeks - played[team_id]
            if idle != {bye}:
                errors.append(f"Team {team_id} idle weeks {sorted(idle)} do not match bye {bye}")

        return errors

    def _check_divisional_series(self, schedule: SeasonSchedule) -> List[str]:
        errors = []
        venues = Counter((game.home_team_id, game.away_team_id) for game in schedule.games)

        for division, members in NFL_DIVISIONS.items():
            for i, team_a in enumerate(members):
                for team_b in members[i + 1:]:
                    if venues[(team_a, team_b)] != 1 or venues[(team_b, team_a)] != 1:
                        errors.append(
                            f"{division}: {team_a} and {team_b} do not play home-and-away"
                        )

        return errors

    def _check_bye_distribution(self, schedule: SeasonSchedule) -> List[str]:
        errors = []
        bye_config = self.config.bye_week
        counts = Counter(schedule.bye_weeks.values())

        for week, count in sorted(counts.items()):
            if not bye_config.start_week <= week <= bye_config.end_week:
                errors.append(f"Bye week {week} outside window {bye_config.start_week}-{bye_config.end_week}")
            if count > bye_config.max_teams_per_week:
                errors.append(f"Week {week} has {count} byes (max {bye_config.max_teams_per_week})")
            if count < bye_config.min_teams_per_week:
                errors.append(f"Week {week} has {count} byes (min {bye_config.min_teams_per_week})")

        return errors
