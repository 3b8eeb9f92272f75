"""
Draft Order Service

Calculates draft order after the Super Bowl from regular season records
and playoff results.

Draft Order Rules:
1. Picks 1-18: Non-playoff teams (worst -> best by record)
2. Picks 19-24: Wild Card Round losers (worst -> best by record)
3. Picks 25-28: Divisional Round losers (worst -> best by record)
4. Picks 29-30: Conference Championship losers (worst -> best by record)
5. Pick 31: Super Bowl loser
6. Pick 32: Super Bowl winner
7. Rounds 2-7: Same order as Round 1

Ties on win percentage go to the team with the worse point differential,
then the lower team ID.

The calculation is split in two steps. compute_primary() applies the rules
to whatever results exist; reconcile() then guarantees a complete order of
every team exactly once, appending anything the primary step could not
place (for example teams still alive in an unfinished bracket).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Protocol, Sequence, Tuple

from constants.league_structure import all_team_ids
from league_state.draft_models import DraftPick
from playoff_system.bracket_models import PlayoffRound
from standings.standings_models import LeagueStandings


# Configure module logger
logger = logging.getLogger(__name__)

NUM_ROUNDS = 7
PICKS_PER_ROUND = 32

# Playoff exits in draft order; COMPLETE marks the champion
ELIMINATION_ORDER: Tuple[Tuple[PlayoffRound, str], ...] = (
    (PlayoffRound.WILD_CARD, "wild_card_loss"),
    (PlayoffRound.DIVISIONAL, "divisional_loss"),
    (PlayoffRound.CONFERENCE_CHAMPIONSHIP, "conference_loss"),
    (PlayoffRound.SUPER_BOWL, "super_bowl_loss"),
    (PlayoffRound.COMPLETE, "super_bowl_win"),
)

NON_PLAYOFF = "non_playoff"
RECONCILED = "reconciled"


class PlayoffOutcome(Protocol):
    """Anything that reports seeded teams and where each one went out."""

    @property
    def participants(self) -> List[int]: ...

    def elimination_round(self, team_id: int) -> Optional[PlayoffRound]: ...


@dataclass(frozen=True)
class PartialDraftOrder:
    """
    Round 1 order as far as the results allow.

    May be missing teams (unplaced playoff teams) and is not checked
    against the league's team list.
    """
    team_ids: Tuple[int, ...]
    reasons: Mapping[int, str]
    standings: Optional[LeagueStandings] = None
    unplaced_team_ids: Tuple[int, ...] = ()


@dataclass(frozen=True)
class DraftOrderResult:
    """Complete Round 1 order: every league team exactly once."""
    team_ids: Tuple[int, ...]
    reasons: Mapping[int, str] = field(default_factory=dict)
    appended_team_ids: Tuple[int, ...] = ()
    dropped_team_ids: Tuple[int, ...] = ()

    @property
    def used_fallback(self) -> bool:
        return bool(self.appended_team_ids or self.dropped_team_ids)

    def pick_for(self, team_id: int) -> Optional[int]:
        """1-based Round 1 slot for a team."""
        try:
            return self.team_ids.index(team_id) + 1
        except ValueError:
            return None

    def __iter__(self) -> Iterator[int]:
        return iter(self.team_ids)

    def __len__(self) -> int:
        return len(self.team_ids)


def draft_sort_key(standings: Optional[LeagueStandings], team_id: int) -> Tuple[float, int, int]:
    """Worst team first: win %, then point differential, then team ID."""
    standing = standings.get(team_id) if standings is not None else None
    if standing is None:
        return (0.0, 0, team_id)
    return (standing.win_percentage, standing.point_differential, team_id)


def compute_primary(
    standings: LeagueStandings,
    playoff_results: Optional[PlayoffOutcome] = None
) -> PartialDraftOrder:
    """
    Apply the draft order rules to the available results.

    Args:
        standings: Final regular season standings
        playoff_results: Completed (or partial) postseason, None if no playoffs

    Returns:
        PartialDraftOrder; playoff teams without an elimination round are
        left out and listed in unplaced_team_ids
    """
    participants = list(playoff_results.participants) if playoff_results is not None else []
    participant_set = set(participants)
    reasons: Dict[int, str] = {}

    def by_record(team_ids: Iterable[int]) -> List[int]:
        return sorted(team_ids, key=lambda team_id: draft_sort_key(standings, team_id))

    order = by_record(t for t in standings.league if t not in participant_set)
    for team_id in order:
        reasons[team_id] = NON_PLAYOFF

    placed = set()
    for playoff_round, reason in ELIMINATION_ORDER:
        group = by_record(
            t for t in participants
            if playoff_results.elimination_round(t) == playoff_round
        )
        for team_id in group:
            reasons[team_id] = reason
        order.extend(group)
        placed.update(group)

    unplaced = tuple(t for t in participants if t not in placed)
    if unplaced:
        logger.debug(f"Playoff teams without an elimination round: {list(unplaced)}")

    return PartialDraftOrder(
        team_ids=tuple(order),
        reasons=reasons,
        standings=standings,
        unplaced_team_ids=unplaced,
    )


def reconcile(
    partial: PartialDraftOrder,
    team_ids: Optional[Iterable[int]] = None
) -> DraftOrderResult:
    """
    Turn a partial order into a complete one.

    Unknown and duplicate IDs are dropped; teams missing from the partial
    order are appended worst record first. Logs a WARNING whenever the
    order had to be repaired.

    Args:
        partial: Output of compute_primary
        team_ids: Every league team (defaults to the 32 standard IDs)

    Returns:
        DraftOrderResult containing each team exactly once
    """
    league_ids = list(team_ids) if team_ids is not None else all_team_ids()
    known = set(league_ids)

    kept: List[int] = []
    dropped: List[int] = []
    seen = set()
    for team_id in partial.team_ids:
        if team_id in known and team_id not in seen:
            kept.append(team_id)
            seen.add(team_id)
        else:
            dropped.append(team_id)

    missing = sorted(
        (t for t in league_ids if t not in seen),
        key=lambda team_id: draft_sort_key(partial.standings, team_id),
    )

    reasons = {t: partial.reasons.get(t, RECONCILED) for t in kept}
    for team_id in missing:
        reasons[team_id] = RECONCILED

    if missing or dropped:
        logger.warning(
            f"Draft order incomplete: appended {missing}, dropped {dropped} "
            f"({len(kept)} of {len(league_ids)} teams placed by results)"
        )

    return DraftOrderResult(
        team_ids=tuple(kept + missing),
        reasons=reasons,
        appended_team_ids=tuple(missing),
        dropped_team_ids=tuple(dropped),
    )


def calculate_draft_order(
    standings: LeagueStandings,
    playoff_results: Optional[PlayoffOutcome] = None,
    team_ids: Optional[Iterable[int]] = None
) -> DraftOrderResult:
    """Complete Round 1 draft order (compute_primary followed by reconcile)."""
    result = reconcile(compute_primary(standings, playoff_results), team_ids)
    logger.debug(f"Draft order calculated: {list(result.team_ids)}")
    return result


def build_draft_picks(
    order: Sequence[int],
    year: int,
    rounds: int = NUM_ROUNDS
) -> Tuple[DraftPick, ...]:
    """
    Generate every pick for a draft, each round following the Round 1 order.

    Args:
        order: Round 1 team order (a DraftOrderResult works directly)
        year: Draft year
        rounds: Number of rounds

    Returns:
        rounds x len(order) picks in overall order
    """
    team_order = list(order)
    picks = []
    overall_pick = 1
    for round_number in range(1, rounds + 1):
        for pick_in_round, team_id in enumerate(team_order, start=1):
            picks.append(DraftPick(
                pick_id=DraftPick.make_id(year, round_number, overall_pick),
                year=year,
                round=round_number,
                pick_in_round=pick_in_round,
                overall_pick=overall_pick,
                original_team_id=team_id,
                current_team_id=team_id,
            ))
            overall_pick += 1

    logger.debug(f"Generated {len(picks)} total picks across {rounds} rounds")
    return tuple(picks)
