"""
Schedule Rotation Tables

Division rotation lookups for the 17-game formula. Division indices follow
constants.league_structure.DIVISION_NAMES (East=0, North=1, South=2, West=3).

| year % 3 | Intra-conference pairs           |
|----------|----------------------------------|
| 0        | (East, South), (North, West)     |
| 1        | (East, North), (South, West)     |
| 2        | (East, West), (North, South)     |

| year % 4 | AFC East | AFC North | AFC South | AFC West |
|----------|----------|-----------|-----------|----------|
| 0        | NFC West | NFC South | NFC North | NFC East |
| 1        | NFC South| NFC North | NFC East  | NFC West |
| 2        | NFC North| NFC East  | NFC West  | NFC South|
| 3        | NFC East | NFC West  | NFC South | NFC North|
"""

from typing import List, Tuple

from constants.league_structure import AFC, NFC


# [division][year % 3] -> same-conference opponent division
INTRA_ROTATION: Tuple[Tuple[int, ...], ...] = (
    (2, 1, 3),  # East
    (3, 0, 2),  # North
    (0, 3, 1),  # South
    (1, 2, 0),  # West
)

# [afc division][year % 4] -> NFC opponent division
INTER_ROTATION_AFC: Tuple[Tuple[int, ...], ...] = (
    (3, 2, 1, 0),  # AFC East
    (2, 1, 0, 3),  # AFC North
    (1, 0, 3, 2),  # AFC South
    (0, 3, 2, 1),  # AFC West
)


def intra_conference_opponent(division_index: int, season_year: int) -> int:
    """Same-conference division played in full this season."""
    return INTRA_ROTATION[division_index][season_year % 3]


def intra_conference_pairs(season_year: int) -> List[Tuple[int, int]]:
    """The two division pairs (lower index first) for a conference."""
    pairs = []
    for division_index in range(4):
        opponent = intra_conference_opponent(division_index, season_year)
        if division_index < opponent:
            pairs.append((division_index, opponent))
    return pairs


def inter_conference_opponent(afc_division_index: int, season_year: int) -> int:
    """NFC division an AFC division plays in full this season."""
    return INTER_ROTATION_AFC[afc_division_index][season_year % 4]


def seventeenth_game_opponent(afc_division_index: int, season_year: int) -> int:
    """NFC division for the 17th game: the inter-conference opponent from two years ago."""
    return inter_conference_opponent(afc_division_index, season_year - 2)


def seventeenth_game_home_conference(season_year: int) -> str:
    """AFC hosts the 17th game in odd years, NFC in even years."""
    return AFC if season_year % 2 == 1 else NFC
