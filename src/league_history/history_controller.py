"""
League History Controller - Qt bridge for the history simulation.

Handles:
- Relaying per-year progress as Qt signals
- Cooperative cancellation from the UI (checked at year boundaries)
- Reporting completion and failures as signals instead of exceptions
"""

from typing import Optional
import logging

from PySide6.QtCore import QCoreApplication, QObject, Signal

from league_history.history_exceptions import SimulationCancelledException
from league_history.history_models import HistorySimulationResult
from league_history.league_history_simulator import LeagueHistorySimulator
from league_state.league_state import LeagueState
from shared.exceptions import LeagueSimException


class LeagueHistoryController(QObject):
    """
    Runs a history simulation and reports through signals.

    Signals:
        progress_updated: (year_index, total_years, phase) at every boundary
        simulation_complete: HistorySimulationResult when the run finishes
        simulation_cancelled: Emitted when cancel() stopped the run
        error_occurred: Error message when the run fails
    """

    # Signals
    progress_updated = Signal(int, int, str)
    simulation_complete = Signal(object)
    simulation_cancelled = Signal()
    error_occurred = Signal(str)

    def __init__(
        self,
        simulator: Optional[LeagueHistorySimulator] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialize league history controller.

        Args:
            simulator: History simulator (a default one when omitted)
            parent: Optional Qt parent object
        """
        super().__init__(parent)

        self._simulator = simulator or LeagueHistorySimulator()
        self._logger = logging.getLogger(__name__)

        # State
        self._is_running = False
        self._cancel_requested = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    def cancel(self) -> None:
        """Request cancellation; takes effect at the next year boundary."""
        if self._is_running:
            self._cancel_requested = True
            self._logger.info("History simulation cancel requested")

    def run(
        self,
        state: LeagueState,
        years: int,
        start_year: Optional[int] = None
    ) -> Optional[HistorySimulationResult]:
        """
        Run the simulation synchronously.

        Returns:
            The result, or None when cancelled or failed (see signals)
        """
        if self._is_running:
            self._logger.warning("Cannot start history simulation - already running")
            return None

        self._is_running = True
        self._cancel_requested = False
        try:
            result = self._simulator.simulate_history(
                state,
                years,
                start_year=start_year,
                progress_callback=self._on_progress,
                should_cancel=self._should_cancel,
            )
        except SimulationCancelledException:
            self.simulation_cancelled.emit()
            return None
        except LeagueSimException as e:
            self._logger.error(f"History simulation failed: {e.message}", exc_info=True)
            self.error_occurred.emit(e.message)
            return None
        finally:
            self._is_running = False

        self.simulation_complete.emit(result)
        return result

    def _on_progress(self, year_index: int, total_years: int, phase: str) -> None:
        self.progress_updated.emit(year_index, total_years, phase)

    def _should_cancel(self) -> bool:
        # Let queued UI events (e.g. a cancel button) run between years
        if QCoreApplication.instance() is not None:
            QCoreApplication.processEvents()
        return self._cancel_requested
