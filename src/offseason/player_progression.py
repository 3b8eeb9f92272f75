"""
Player Progression

Offseason stage 1: every player ages a year, gains a season of experience,
and has their overall rating moved along an age curve. Young players grow
toward their potential (faster under a sharp head coach); veterans decline.
"""

import logging
import random
from dataclasses import replace
from typing import Dict, Optional

from league_state.coach_models import Coach
from league_state.league_state import LeagueState
from league_state.player_models import Player
from offseason.offseason_models import OffseasonContext, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage


logger = logging.getLogger(__name__)

MIN_OVERALL = 30
MAX_OVERALL = 99
DECLINE_AGE = 30


def get_age_modifier(age: int) -> float:
    """Share of normal development a player gets at this age."""
    if age <= 23:
        return 1.3
    if age <= 25:
        return 1.15
    if age <= 27:
        return 1.0
    if age <= 29:
        return 0.85
    if age <= 31:
        return 0.6
    if age <= 33:
        return 0.3
    return 0.0


def get_decline(age: int, rng: random.Random) -> int:
    """Rating points lost by a veteran in one offseason."""
    if age < DECLINE_AGE:
        return 0
    if age <= 31:
        return rng.randint(0, 2)
    if age <= 33:
        return rng.randint(1, 4)
    return rng.randint(2, 6)


def progress_player(player: Player, rng: random.Random, coach: Optional[Coach] = None) -> Player:
    """
    Apply one offseason of development to a player.

    Ratings are based on the player's age during the season just played;
    the returned player is one year older.
    """
    gap = max(0, player.potential - player.overall)
    coaching = 1.0 + ((coach.game_day_iq - 50) / 200 if coach else 0.0)
    growth = int(round(gap * rng.uniform(0.1, 0.3) * get_age_modifier(player.age) * coaching))

    overall = player.overall + growth - get_decline(player.age, rng)
    overall = max(MIN_OVERALL, min(MAX_OVERALL, overall))

    return replace(
        player,
        age=player.age + 1,
        experience=player.experience + 1,
        overall=overall,
        potential=max(player.potential, overall),
    )


def process_player_progression(state: LeagueState, context: OffseasonContext) -> StageResult:
    """Age and develop every player in the league, rostered or not."""
    head_coaches: Dict[int, Coach] = {}
    for team_id, team in state.teams.items():
        coach = state.get_coach(team.head_coach_id)
        if coach is not None:
            head_coaches[team_id] = coach

    # Iterate in a fixed order so a seed reproduces the same ratings
    updated = {}
    for player_id in sorted(state.players):
        player = state.players[player_id]
        coach = head_coaches.get(player.team_id) if player.team_id is not None else None
        updated[player_id] = progress_player(player, context.rng, coach)

    logger.debug(f"Progressed {len(updated)} players for {context.next_year}")
    return StageResult(
        state=state.with_players(updated),
        report=StageReport(stage=OffseasonStage.PROGRESSION, player_ids=tuple(updated)),
    )
