"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Seeded random sources
- Simulation settings
- A generated 32-team league (immutable, so shared per session)
- Helpers for building small hand-made league states
"""

import random
import sys
from pathlib import Path

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"


def pytest_configure(config):
    """Put src/ at the front of sys.path so packages import by top-level name."""
    if str(src_path) in sys.path:
        sys.path.remove(str(src_path))
    sys.path.insert(0, str(src_path))


# ============================================================================
# RANDOM & SETTINGS FIXTURES
# ============================================================================

@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def settings():
    from config.simulation_settings import SimulationSettings
    return SimulationSettings()


# ============================================================================
# LEAGUE FIXTURES
# ============================================================================

@pytest.fixture(scope="session")
def initial_league():
    """
    Fresh 32-team league for the 2025 season.

    LeagueState is immutable, so one instance is safe to share.
    """
    from league_history.league_bootstrap import create_initial_league
    return create_initial_league(2025, rng=random.Random(2025))


@pytest.fixture
def offseason_context(rng):
    """Offseason context for the 2025 offseason with the league draft order by team ID."""
    from offseason.offseason_models import OffseasonContext
    return OffseasonContext(year=2025, rng=rng, draft_order=tuple(range(1, 33)))


@pytest.fixture
def make_player():
    """Factory for hand-made players."""
    from constants.positions import Position
    from league_state.player_models import Player

    counter = {'n': 0}

    def _make(position=Position.WR, age=26, overall=70, potential=None, team_id=None,
              contract_id=None, experience=None, player_id=None):
        counter['n'] += 1
        return Player(
            player_id=player_id or f"player-{counter['n']:04d}",
            first_name="Test",
            last_name=f"Player{counter['n']}",
            position=position,
            age=age,
            experience=max(0, age - 22) if experience is None else experience,
            overall=overall,
            potential=overall if potential is None else potential,
            team_id=team_id,
            contract_id=contract_id,
        )

    return _make


@pytest.fixture
def make_contract():
    """Factory for hand-made contracts with a flat cap hit."""
    from league_state.contract_models import Contract

    def _make(player_id, team_id, signed_year=2025, total_years=2, cap_hit=1_000_000,
              current_year=1, contract_id=None):
        return Contract(
            contract_id=contract_id or f"contract-{player_id}",
            player_id=player_id,
            team_id=team_id,
            signed_year=signed_year,
            total_years=total_years,
            annual_cap_hits=(cap_hit,) * total_years,
            current_year=current_year,
        )

    return _make


@pytest.fixture
def empty_league():
    """32 teams with no players, contracts or coaches."""
    from constants.league_structure import all_team_ids
    from league_state.league_state import LeagueState
    from league_state.team_models import Team

    return LeagueState(
        year=2025,
        teams={team_id: Team.create(team_id, salary_cap=255_400_000) for team_id in all_team_ids()},
    )
