"""
Playoff State Machine

Transition functions over the immutable PlayoffBracket:

- create_bracket(seeding)           -> bracket in SEEDED
- record_result(bracket, game, ...) -> bracket with one more result
- advance(bracket)                  -> bracket in the next round

A round only advances once every matchup in it has a winner. The
divisional round uses reseeding: the #1 seed plus the wild card winners
are sorted by original seed and the highest remaining seed always plays
the lowest remaining seed.
"""

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from constants.league_structure import AFC, CONFERENCES, NFC
from .bracket_models import PlayoffBracket, PlayoffMatchup, PlayoffRound
from .playoff_exceptions import (
    InvalidBracketException, InvalidRoundException, PlayoffStateException
)
from .seeding_models import ConferenceSeeding, PlayoffSeeding


# (home seed, away seed) for the wild card round; seed 1 has the bye
WILD_CARD_PAIRINGS: Tuple[Tuple[int, int], ...] = ((2, 7), (3, 6), (4, 5))

SeedEntry = Tuple[int, int]   # (original seed, team_id)


def create_bracket(seeding: PlayoffSeeding) -> PlayoffBracket:
    """Start a bracket in the SEEDED state."""
    return PlayoffBracket(season=seeding.season, seeding=seeding)


def reseed(entries: Sequence[SeedEntry]) -> List[Tuple[SeedEntry, SeedEntry]]:
    """
    Pair remaining teams highest seed vs lowest seed.

    Args:
        entries: (seed, team_id) for every team still alive in a conference

    Returns:
        (higher seed entry, lower seed entry) pairs, best pairing first
    """
    ordered = sorted(entries)
    if len(ordered) % 2 != 0:
        raise InvalidBracketException(
            f"Cannot reseed an odd number of teams: {ordered}"
        )
    return [
        (ordered[i], ordered[len(ordered) - 1 - i]) for i in range(len(ordered) // 2)
    ]


def record_result(
    bracket: PlayoffBracket,
    game_id: str,
    home_score: int,
    away_score: int
) -> PlayoffBracket:
    """
    Record a final score for a game in the current round.

    Raises:
        InvalidBracketException: Unknown game, negative score, or tie
        InvalidRoundException: Game belongs to a different round
    """
    matchup = bracket.get_matchup(game_id)
    if matchup is None:
        raise InvalidBracketException(
            f"Unknown playoff game {game_id}",
            round_name=bracket.current_round.value, game_id=game_id
        )
    if matchup.round != bracket.current_round:
        raise InvalidRoundException(
            matchup.round.value,
            message=f"Game {game_id} is not in the current round {bracket.current_round.value}"
        )
    if home_score < 0 or away_score < 0:
        raise InvalidBracketException(
            f"Negative score recorded for {game_id}",
            round_name=matchup.round.value, game_id=game_id
        )
    if home_score == away_score:
        raise InvalidBracketException(
            f"Playoff game {game_id} cannot end tied ({home_score}-{away_score})",
            round_name=matchup.round.value, game_id=game_id
        )

    matchups = tuple(
        m.with_result(home_score, away_score) if m.game_id == game_id else m
        for m in bracket.matchups
    )
    return replace(bracket, matchups=matchups)


def advance(bracket: PlayoffBracket) -> PlayoffBracket:
    """
    Move the bracket to its next state.

    Raises:
        PlayoffStateException: Current round still has unplayed games
        InvalidRoundException: Bracket is already complete
    """
    current = bracket.current_round

    if current == PlayoffRound.COMPLETE:
        raise InvalidRoundException(
            current.value,
            message="Playoff bracket is already complete"
        )

    if current.has_games and not bracket.is_round_complete(current):
        raise PlayoffStateException(
            f"{current.display_name} has unplayed games",
            current_round=current.value,
            pending_games=len(bracket.pending_matchups()),
        )

    next_round = current.next_round
    new_games = _build_round(bracket, next_round)
    return replace(
        bracket,
        current_round=next_round,
        matchups=bracket.matchups + tuple(new_games),
    )


def _build_round(bracket: PlayoffBracket, playoff_round: PlayoffRound) -> List[PlayoffMatchup]:
    if playoff_round == PlayoffRound.WILD_CARD:
        return _wild_card_round(bracket)
    if playoff_round in (PlayoffRound.DIVISIONAL, PlayoffRound.CONFERENCE_CHAMPIONSHIP):
        return _reseeded_round(bracket, playoff_round)
    if playoff_round == PlayoffRound.SUPER_BOWL:
        return [_super_bowl(bracket)]
    return []


def _wild_card_round(bracket: PlayoffBracket) -> List[PlayoffMatchup]:
    games = []
    for conference in CONFERENCES:
        conf_seeding = bracket.seeding.conference(conference)
        pairs = [
            ((home, _team_for_seed(conf_seeding, home)), (away, _team_for_seed(conf_seeding, away)))
            for home, away in WILD_CARD_PAIRINGS
        ]
        games.extend(_make_games(bracket.season, PlayoffRound.WILD_CARD, conference, pairs))
    return games


def _reseeded_round(bracket: PlayoffBracket, playoff_round: PlayoffRound) -> List[PlayoffMatchup]:
    previous = _previous_round(playoff_round)
    games = []
    for conference in CONFERENCES:
        survivors = [
            (m.winner_seed, m.winner_id)
            for m in bracket.round_matchups(previous) if m.conference == conference
        ]
        if previous == PlayoffRound.WILD_CARD:
            top_seed = bracket.seeding.conference(conference).get_seed_by_number(1)
            survivors.append((1, top_seed.team_id))
        games.extend(_make_games(bracket.season, playoff_round, conference, reseed(survivors)))
    return games


def _super_bowl(bracket: PlayoffBracket) -> PlayoffMatchup:
    champions = {
        m.conference: (m.winner_seed, m.winner_id)
        for m in bracket.round_matchups(PlayoffRound.CONFERENCE_CHAMPIONSHIP)
    }
    # Home designation alternates by season and never depends on seeding
    home_conf, away_conf = (AFC, NFC) if bracket.season % 2 == 0 else (NFC, AFC)
    (home_seed, home_id), (away_seed, away_id) = champions[home_conf], champions[away_conf]
    return PlayoffMatchup(
        game_id=_game_id(bracket.season, PlayoffRound.SUPER_BOWL, None, 1),
        round=PlayoffRound.SUPER_BOWL,
        conference=None,
        home_team_id=home_id,
        away_team_id=away_id,
        home_seed=home_seed,
        away_seed=away_seed,
    )


def _make_games(
    season: int,
    playoff_round: PlayoffRound,
    conference: str,
    pairs: List[Tuple[SeedEntry, SeedEntry]]
) -> List[PlayoffMatchup]:
    games = []
    for number, ((home_seed, home_id), (away_seed, away_id)) in enumerate(pairs, start=1):
        if home_id == away_id:
            raise InvalidBracketException(
                f"Team {home_id} paired with itself",
                round_name=playoff_round.value
            )
        games.append(PlayoffMatchup(
            game_id=_game_id(season, playoff_round, conference, number),
            round=playoff_round,
            conference=conference,
            home_team_id=home_id,
            away_team_id=away_id,
            home_seed=home_seed,
            away_seed=away_seed,
        ))
    return games


def _previous_round(playoff_round: PlayoffRound) -> PlayoffRound:
    order = list(PlayoffRound)
    return order[order.index(playoff_round) - 1]


def _team_for_seed(conf_seeding: ConferenceSeeding, seed_number: int) -> int:
    seed = conf_seeding.get_seed_by_number(seed_number)
    if seed is None:
        raise InvalidBracketException(
            f"{conf_seeding.conference} seeding missing seed {seed_number}"
        )
    return seed.team_id


def _game_id(season: int, playoff_round: PlayoffRound, conference: Optional[str], number: int) -> str:
    return f"playoff-{season}-{playoff_round.value}-{conference or 'SB'}-{number}"
