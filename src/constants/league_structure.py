"""
League Structure Constants

Conference and division layout for the 32-team league.

Team IDs run 1-32, four teams per division in alphabetical order:
AFC teams are 1-16 and NFC teams are 17-32. Division order (East, North,
South, West) is significant because the schedule rotation tables index
divisions by position.

Usage:
    from constants.league_structure import get_division, DIVISION_NAMES

    division = get_division(22)        # "NFC North"
    index = DIVISION_NAMES.index("North")  # 1
"""

from typing import Dict, List, Tuple


TOTAL_TEAMS = 32
TEAMS_PER_DIVISION = 4

AFC = "AFC"
NFC = "NFC"
CONFERENCES: Tuple[str, ...] = (AFC, NFC)

# Index order is used by the rotation tables (East=0, North=1, South=2, West=3)
DIVISION_NAMES: Tuple[str, ...] = ("East", "North", "South", "West")

NFL_DIVISIONS: Dict[str, List[int]] = {
    'AFC East': [1, 2, 3, 4],
    'AFC North': [5, 6, 7, 8],
    'AFC South': [9, 10, 11, 12],
    'AFC West': [13, 14, 15, 16],
    'NFC East': [17, 18, 19, 20],
    'NFC North': [21, 22, 23, 24],
    'NFC South': [25, 26, 27, 28],
    'NFC West': [29, 30, 31, 32],
}

NFL_CONFERENCES: Dict[str, List[int]] = {
    AFC: list(range(1, 17)),
    NFC: list(range(17, 33)),
}

# team_id -> (city, nickname, abbreviation)
TEAM_INFO: Dict[int, Tuple[str, str, str]] = {
    1: ("Buffalo", "Bills", "BUF"),
    2: ("Miami", "Dolphins", "MIA"),
    3: ("New England", "Patriots", "NE"),
    4: ("New York", "Jets", "NYJ"),
    5: ("Baltimore", "Ravens", "BAL"),
    6: ("Cincinnati", "Bengals", "CIN"),
    7: ("Cleveland", "Browns", "CLE"),
    8: ("Pittsburgh", "Steelers", "PIT"),
    9: ("Houston", "Texans", "HOU"),
    10: ("Indianapolis", "Colts", "IND"),
    11: ("Jacksonville", "Jaguars", "JAX"),
    12: ("Tennessee", "Titans", "TEN"),
    13: ("Denver", "Broncos", "DEN"),
    14: ("Kansas City", "Chiefs", "KC"),
    15: ("Las Vegas", "Raiders", "LV"),
    16: ("Los Angeles", "Chargers", "LAC"),
    17: ("Dallas", "Cowboys", "DAL"),
    18: ("New York", "Giants", "NYG"),
    19: ("Philadelphia", "Eagles", "PHI"),
    20: ("Washington", "Commanders", "WAS"),
    21: ("Chicago", "Bears", "CHI"),
    22: ("Detroit", "Lions", "DET"),
    23: ("Green Bay", "Packers", "GB"),
    24: ("Minnesota", "Vikings", "MIN"),
    25: ("Atlanta", "Falcons", "ATL"),
    26: ("Carolina", "Panthers", "CAR"),
    27: ("New Orleans", "Saints", "NO"),
    28: ("Tampa Bay", "Buccaneers", "TB"),
    29: ("Arizona", "Cardinals", "ARI"),
    30: ("Los Angeles", "Rams", "LAR"),
    31: ("San Francisco", "49ers", "SF"),
    32: ("Seattle", "Seahawks", "SEA"),
}


def all_team_ids() -> List[int]:
    """Get list of all valid team IDs (1-32)."""
    return list(range(1, TOTAL_TEAMS + 1))


def get_conference(team_id: int) -> str:
    """
    Get conference for a team.

    Args:
        team_id: Team ID (1-32)

    Returns:
        "AFC" or "NFC"

    Raises:
        ValueError: If team_id is outside 1-32
    """
    if not 1 <= team_id <= TOTAL_TEAMS:
        raise ValueError(f"team_id must be between 1 and {TOTAL_TEAMS}, got {team_id!r}")
    return AFC if team_id <= 16 else NFC


def get_division(team_id: int) -> str:
    """Get full division name for a team (e.g., 'AFC North')."""
    conference = get_conference(team_id)
    index = ((team_id - 1) % 16) // TEAMS_PER_DIVISION
    return f"{conference} {DIVISION_NAMES[index]}"


def get_division_index(team_id: int) -> int:
    """Get division index within the conference (East=0 ... West=3)."""
    get_conference(team_id)
    return ((team_id - 1) % 16) // TEAMS_PER_DIVISION


def division_key(conference: str, division_index: int) -> str:
    """Build a full division name from conference and index."""
    return f"{conference} {DIVISION_NAMES[division_index]}"


def same_division(team_a: int, team_b: int) -> bool:
    return get_division(team_a) == get_division(team_b)


def same_conference(team_a: int, team_b: int) -> bool:
    return get_conference(team_a) == get_conference(team_b)


def get_team_name(team_id: int) -> str:
    """Get display name (e.g., 'Detroit Lions')."""
    city, nickname, _ = TEAM_INFO[team_id]
    return f"{city} {nickname}"
