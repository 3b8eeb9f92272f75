"""
Offseason Processor

Runs the eight offseason stages in their fixed order, threading one
LeagueState through all of them:

progression -> retirement -> contract expiration -> coaching changes ->
draft -> free agency -> roster maintenance -> finances
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from league_state.league_state import LeagueState
from offseason.coaching_changes import process_coaching_changes
from offseason.contract_expiration import process_contract_expirations
from offseason.draft_manager import process_ai_draft
from offseason.free_agency_manager import process_free_agency
from offseason.offseason_models import OffseasonContext, OffseasonResult, StageReport, StageResult
from offseason.offseason_phases import OffseasonStage
from offseason.player_progression import process_player_progression
from offseason.retirement import process_retirements
from offseason.roster_manager import process_roster_maintenance
from offseason.team_finances import process_finance_update


StageFunction = Callable[[LeagueState, OffseasonContext], StageResult]

DEFAULT_STAGES: Tuple[Tuple[OffseasonStage, StageFunction], ...] = (
    (OffseasonStage.PROGRESSION, process_player_progression),
    (OffseasonStage.RETIREMENT, process_retirements),
    (OffseasonStage.CONTRACT_EXPIRATION, process_contract_expirations),
    (OffseasonStage.COACHING_CHANGES, process_coaching_changes),
    (OffseasonStage.DRAFT, process_ai_draft),
    (OffseasonStage.FREE_AGENCY, process_free_agency),
    (OffseasonStage.ROSTER_MAINTENANCE, process_roster_maintenance),
    (OffseasonStage.FINANCES, process_finance_update),
)


class OffseasonProcessor:
    """
    Orchestrates a full offseason.

    Usage:
        processor = OffseasonProcessor()
        context = OffseasonContext(year=2025, rng=rng, draft_order=order)
        result = processor.process_offseason(state, context)
        result.summary()
    """

    def __init__(
        self,
        stages: Sequence[Tuple[OffseasonStage, StageFunction]] = DEFAULT_STAGES,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize offseason processor.

        Args:
            stages: (stage, function) pairs in execution order
            logger: Optional logger (defaults to module logger)
        """
        self.stages = tuple(stages)
        self.logger = logger or logging.getLogger(__name__)

    def run_stage(
        self,
        stage: OffseasonStage,
        state: LeagueState,
        context: OffseasonContext
    ) -> StageResult:
        """Run a single named stage."""
        for candidate, function in self.stages:
            if candidate == stage:
                return function(state, context)
        raise ValueError(f"Stage {stage} is not configured on this processor")

    def process_offseason(self, state: LeagueState, context: OffseasonContext) -> OffseasonResult:
        """
        Run every stage in order.

        Args:
            state: League state right after the season (state.year = season played)
            context: Shared inputs for the offseason

        Returns:
            OffseasonResult with the final state and one report per stage
        """
        reports: List[StageReport] = []
        for stage, function in self.stages:
            result = function(state, context)
            state = result.state
            reports.append(result.report)
            self.logger.debug(f"{context.year} offseason: {stage} "
                              f"({result.report.count} players affected)")

        offseason = OffseasonResult(state=state, reports=tuple(reports))
        self.logger.info(f"{context.year} offseason complete: {offseason.summary()}")
        return offseason
