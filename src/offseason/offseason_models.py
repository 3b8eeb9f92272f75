"""
Offseason Data Models

Context handed to every offseason stage, the per-stage reports, and the
combined result of a full offseason.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings
from league_state.coach_models import CoachRole
from league_state.draft_models import DraftClass
from league_state.league_state import LeagueState
from league_state.team_models import TeamRecord
from offseason.offseason_phases import OffseasonStage
from player_generation.coach_generator import CoachGenerator
from player_generation.contract_generator import ContractGenerator
from player_generation.draft_class_generator import DraftClassGenerator
from player_generation.player_generator import PlayerGenerator


@dataclass
class OffseasonContext:
    """
    Inputs shared by every stage.

    year is the season that just finished; contracts, picks and hires made
    during the offseason belong to next_year. Generators default to ones
    driven by the shared rng so a seed reproduces the whole offseason.
    """
    year: int
    rng: random.Random
    draft_order: Sequence[int] = ()
    settings: SimulationSettings = DEFAULT_SETTINGS
    season_records: Mapping[int, TeamRecord] = field(default_factory=dict)
    draft_class: Optional[DraftClass] = None
    player_generator: Optional[PlayerGenerator] = None
    contract_generator: Optional[ContractGenerator] = None
    coach_generator: Optional[CoachGenerator] = None
    draft_class_generator: Optional[DraftClassGenerator] = None

    def __post_init__(self):
        if self.player_generator is None:
            self.player_generator = PlayerGenerator(self.rng)
        if self.contract_generator is None:
            self.contract_generator = ContractGenerator(self.rng, salary_cap=self.settings.salary_cap)
        if self.coach_generator is None:
            self.coach_generator = CoachGenerator(self.rng)
        if self.draft_class_generator is None:
            self.draft_class_generator = DraftClassGenerator(
                self.player_generator, class_size=self.settings.draft_class_size
            )

    @property
    def next_year(self) -> int:
        return self.year + 1

    def record_for(self, state: LeagueState, team_id: int) -> TeamRecord:
        """Season record from the context, falling back to the team's current record."""
        if team_id in self.season_records:
            return self.season_records[team_id]
        team = state.get_team(team_id)
        return team.current_record if team else TeamRecord()


class CoachingChangeReason(Enum):
    FIRED = "fired"
    COORDINATOR_REPLACED = "coordinator_replaced"
    CONTRACT_EXPIRED = "contract_expired"


@dataclass(frozen=True)
class CoachingChange:
    """One coach replaced on a team's staff."""
    team_id: int
    role: CoachRole
    old_coach_id: str
    new_coach_id: str
    reason: CoachingChangeReason


@dataclass(frozen=True)
class DraftSelection:
    """A pick used in the AI draft."""
    pick_id: str
    overall_pick: int
    round: int
    team_id: int
    player_id: str


@dataclass(frozen=True)
class Signing:
    """A free agent signed by a team."""
    player_id: str
    team_id: int
    contract_id: str
    is_minimum_deal: bool = False


@dataclass(frozen=True)
class StageReport:
    """
    What a stage did.

    player_ids holds the players the stage acted on: retired, released to
    free agency, drafted, signed, cut or generated depending on the stage.
    """
    stage: OffseasonStage
    player_ids: Tuple[str, ...] = ()
    coaching_changes: Tuple[CoachingChange, ...] = ()
    selections: Tuple[DraftSelection, ...] = ()
    signings: Tuple[Signing, ...] = ()
    details: Mapping[str, int] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.player_ids)


@dataclass(frozen=True)
class StageResult:
    """New league state plus the stage's report."""
    state: LeagueState
    report: StageReport


@dataclass(frozen=True)
class OffseasonResult:
    """Outcome of a full offseason: final state and one report per stage run."""
    state: LeagueState
    reports: Tuple[StageReport, ...]

    def report_for(self, stage: OffseasonStage) -> Optional[StageReport]:
        for report in self.reports:
            if report.stage == stage:
                return report
        return None

    def _count(self, stage: OffseasonStage) -> int:
        report = self.report_for(stage)
        return report.count if report else 0

    @property
    def retirements(self) -> int:
        return self._count(OffseasonStage.RETIREMENT)

    @property
    def new_free_agents(self) -> int:
        return self._count(OffseasonStage.CONTRACT_EXPIRATION)

    @property
    def draft_picks_made(self) -> int:
        report = self.report_for(OffseasonStage.DRAFT)
        return len(report.selections) if report else 0

    @property
    def free_agent_signings(self) -> int:
        report = self.report_for(OffseasonStage.FREE_AGENCY)
        return len(report.signings) if report else 0

    @property
    def coaching_changes(self) -> List[CoachingChange]:
        report = self.report_for(OffseasonStage.COACHING_CHANGES)
        return list(report.coaching_changes) if report else []

    def summary(self) -> Dict[str, int]:
        return {
            'retirements': self.retirements,
            'new_free_agents': self.new_free_agents,
            'draft_picks': self.draft_picks_made,
            'free_agent_signings': self.free_agent_signings,
            'coaching_changes': len(self.coaching_changes),
        }
