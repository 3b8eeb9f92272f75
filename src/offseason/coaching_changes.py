"""
Coaching Changes

Offseason stage 4. Teams with bad records are more likely to fire their
head coach, and a new head coach often brings new coordinators. Every
coach's contract ticks down; expiring coaches are re-signed or replaced.
"""

import logging
from dataclasses import replace
from typing import Dict, List

from league_state.coach_models import Coach, CoachRole
from league_state.league_state import LeagueState
from league_state.team_models import Team, TeamRecord
from offseason.offseason_models import (
    CoachingChange, CoachingChangeReason, OffseasonContext, StageReport, StageResult
)
from offseason.offseason_phases import OffseasonStage


logger = logging.getLogger(__name__)

# (win % strictly below, chance the head coach is fired)
FIRE_PROBABILITY_BANDS = (
    (0.25, 0.80),
    (0.35, 0.50),
    (0.45, 0.20),
    (0.50, 0.08),
)

COORDINATOR_REPLACEMENT_CHANCE = 0.4
RESIGN_WIN_PERCENTAGE = 0.45
RESIGN_CHANCE = 0.5

COORDINATOR_ROLES = (CoachRole.OFFENSIVE_COORDINATOR, CoachRole.DEFENSIVE_COORDINATOR)

ROLE_FIELDS = {
    CoachRole.HEAD_COACH: 'head_coach_id',
    CoachRole.OFFENSIVE_COORDINATOR: 'offensive_coordinator_id',
    CoachRole.DEFENSIVE_COORDINATOR: 'defensive_coordinator_id',
}


def fire_probability(record: TeamRecord) -> float:
    """Chance a head coach is fired after a season with this record."""
    if record.games_played == 0:
        return 0.0
    win_pct = record.win_percentage
    for threshold, chance in FIRE_PROBABILITY_BANDS:
        if win_pct < threshold:
            return chance
    return 0.0


def coach_id_for_role(team: Team, role: CoachRole):
    return getattr(team, ROLE_FIELDS[role])


def process_coaching_changes(state: LeagueState, context: OffseasonContext) -> StageResult:
    """
    Fire, hire and re-sign coaching staff for every team.

    Replaced coaches leave the league; new hires start in next_year.

    Returns:
        StageResult whose report carries one CoachingChange per replacement
    """
    if not context.settings.enable_coaching_changes:
        return StageResult(state, StageReport(stage=OffseasonStage.COACHING_CHANGES))

    rng = context.rng
    teams: Dict[int, Team] = {}
    coaches: Dict[str, Coach] = {}
    departed: List[str] = []
    changes: List[CoachingChange] = []

    for team_id in state.team_ids:
        team = state.teams[team_id]
        record = context.record_for(state, team_id)
        win_pct = record.win_percentage
        hired = set()

        def hire(role: CoachRole, old_coach: Coach, reason: CoachingChangeReason) -> None:
            nonlocal team
            new_coach = context.coach_generator.generate_coach(role, team_id, context.next_year)
            coaches[new_coach.coach_id] = new_coach
            departed.append(old_coach.coach_id)
            hired.add(new_coach.coach_id)
            team = replace(team, **{ROLE_FIELDS[role]: new_coach.coach_id})
            changes.append(CoachingChange(
                team_id=team_id,
                role=role,
                old_coach_id=old_coach.coach_id,
                new_coach_id=new_coach.coach_id,
                reason=reason,
            ))

        head_coach = state.get_coach(team.head_coach_id)
        if head_coach is not None and rng.random() < fire_probability(record):
            hire(CoachRole.HEAD_COACH, head_coach, CoachingChangeReason.FIRED)
            for role in COORDINATOR_ROLES:
                if rng.random() < COORDINATOR_REPLACEMENT_CHANCE:
                    coordinator = state.get_coach(coach_id_for_role(team, role))
                    if coordinator is not None:
                        hire(role, coordinator, CoachingChangeReason.COORDINATOR_REPLACED)

        # Contracts tick down for everyone who was already on staff
        for role in ROLE_FIELDS:
            coach_id = coach_id_for_role(team, role)
            if coach_id is None or coach_id in hired:
                continue
            coach = state.get_coach(coach_id)
            if coach is None:
                logger.debug(f"Team {team_id} {role.value} {coach_id} not found, skipping")
                continue

            years_left = coach.contract_years_remaining - 1
            if years_left > 0:
                coaches[coach_id] = replace(coach, contract_years_remaining=years_left)
            elif win_pct > RESIGN_WIN_PERCENTAGE or rng.random() < RESIGN_CHANCE:
                coaches[coach_id] = replace(
                    coach, contract_years_remaining=context.coach_generator.contract_years(role)
                )
            else:
                hire(role, coach, CoachingChangeReason.CONTRACT_EXPIRED)

        if team is not state.teams[team_id]:
            teams[team_id] = team

    new_state = state.with_coaches(coaches, removed=departed).with_teams(teams)

    logger.debug(f"{len(changes)} coaching changes after the {context.year} season")
    return StageResult(
        state=new_state,
        report=StageReport(
            stage=OffseasonStage.COACHING_CHANGES,
            coaching_changes=tuple(changes),
            details={'head_coaches_fired': sum(
                1 for change in changes if change.reason == CoachingChangeReason.FIRED
            )},
        ),
    )
