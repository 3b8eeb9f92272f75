"""
Offseason Simulation Module

Automated offseason between one season and the next:
- Draft order (primary rules plus reconciliation)
- Player progression and retirements
- Contract expirations
- Coaching changes
- AI draft, free agency and roster maintenance
- Team finance update

Main Components:
- OffseasonProcessor: Runs the eight stages in order
- OffseasonContext: Inputs shared by every stage
- OffseasonStage: Enum of the stages in execution order
- TeamNeedsAnalyzer: Positional deficits used by AI decisions
"""

from offseason.offseason_phases import OffseasonStage
from offseason.offseason_models import (
    CoachingChange,
    CoachingChangeReason,
    DraftSelection,
    OffseasonContext,
    OffseasonResult,
    Signing,
    StageReport,
    StageResult,
)
from offseason.draft_order_service import (
    DraftOrderResult,
    PartialDraftOrder,
    build_draft_picks,
    calculate_draft_order,
    compute_primary,
    reconcile,
)
from offseason.team_needs_analyzer import TeamNeedsAnalyzer
from offseason.team_finances import enforce_cap_compliance
from offseason.offseason_processor import OffseasonProcessor

__all__ = [
    'OffseasonStage',
    'CoachingChange',
    'CoachingChangeReason',
    'DraftSelection',
    'OffseasonContext',
    'OffseasonResult',
    'Signing',
    'StageReport',
    'StageResult',
    'DraftOrderResult',
    'PartialDraftOrder',
    'build_draft_picks',
    'calculate_draft_order',
    'compute_primary',
    'reconcile',
    'TeamNeedsAnalyzer',
    'enforce_cap_compliance',
    'OffseasonProcessor',
]
