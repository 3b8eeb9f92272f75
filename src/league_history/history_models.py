"""
League History Data Models

Per-season summaries and the combined result of a multi-year run.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from league_state.league_state import LeagueState
from league_state.team_models import TeamRecord
from offseason.offseason_models import OffseasonResult
from playoff_system.playoff_simulator import PlayoffResults
from standings.standings_models import LeagueStandings


@dataclass(frozen=True)
class HistoricalSeasonSummary:
    """One simulated season: champion, playoff field and the resulting draft order."""
    year: int
    champion_id: Optional[int]
    champion_record: Optional[TeamRecord]
    runner_up_id: Optional[int]
    playoff_team_ids: Tuple[int, ...] = ()
    draft_order: Tuple[int, ...] = ()

    @property
    def champion_record_string(self) -> str:
        return self.champion_record.record_string if self.champion_record else ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'year': self.year,
            'champion_id': self.champion_id,
            'champion_record': self.champion_record_string,
            'runner_up_id': self.runner_up_id,
            'playoff_team_ids': list(self.playoff_team_ids),
            'draft_order': list(self.draft_order),
        }


@dataclass(frozen=True)
class SeasonOutcome:
    """Regular season plus playoffs for one year, before the offseason runs."""
    state: LeagueState
    standings: LeagueStandings
    playoff_results: PlayoffResults
    draft_order: Tuple[int, ...]
    summary: HistoricalSeasonSummary


@dataclass(frozen=True)
class SeasonCycleResult:
    """A full league year: season, playoffs and offseason."""
    state: LeagueState
    summary: HistoricalSeasonSummary
    offseason: OffseasonResult
    standings: Optional[LeagueStandings] = None


@dataclass(frozen=True)
class HistorySimulationResult:
    """Outcome of simulate_history: final state, one summary per year, totals."""
    state: LeagueState
    season_summaries: List[HistoricalSeasonSummary] = field(default_factory=list)
    total_retirements: int = 0
    total_draft_picks: int = 0
    total_fa_signings: int = 0
    total_coaching_changes: int = 0

    @property
    def years_simulated(self) -> int:
        return len(self.season_summaries)

    def championships_by_team(self) -> Dict[int, int]:
        counts = Counter(
            s.champion_id for s in self.season_summaries if s.champion_id is not None
        )
        return dict(counts)

    def summary(self) -> Dict[str, int]:
        return {
            'years': self.years_simulated,
            'retirements': self.total_retirements,
            'draft_picks': self.total_draft_picks,
            'free_agent_signings': self.total_fa_signings,
            'coaching_changes': self.total_coaching_changes,
        }
