"""
Solve Worker Module

Provides a background QThread that runs one engine solve off the caller's
thread. Communicates with the host via Qt signals.

The engine is not thread-safe: while the worker runs, the host must not
touch the engine it was given.
"""

import logging
import time
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from src.manifold import ManifoldEngine, SolveStats


# Configure module logger
logger = logging.getLogger(__name__)


class SolveWorker(QThread):
    """
    Background worker running ``engine.solve_with_stats()``.

    Signals:
        status_changed(str): Emitted when worker status changes
        solve_finished(object, object, float): (SolveStats, grid snapshot,
            elapsed milliseconds) when the search ends
        error_occurred(str): Emitted when the solve raises

    Example:
        worker = SolveWorker(engine)
        worker.solve_finished.connect(on_finished)
        worker.start()
        # ...
        worker.wait()
    """

    status_changed = pyqtSignal(str)
    solve_finished = pyqtSignal(object, object, float)
    error_occurred = pyqtSignal(str)

    def __init__(self, engine: ManifoldEngine):
        """
        Initialize the solve worker.

        Args:
            engine: Engine to solve; owned by the worker until it finishes
        """
        super().__init__()
        self._engine = engine
        self._stats: Optional[SolveStats] = None
        self._elapsed_ms: float = 0.0

    @property
    def stats(self) -> Optional[SolveStats]:
        """Result of the last run, None before it finishes."""
        return self._stats

    @property
    def elapsed_ms(self) -> float:
        """Wall time of the last run in milliseconds."""
        return self._elapsed_ms

    def run(self):
        """
        Worker body. Called when thread starts.

        Times the solve from the host side; the engine itself only
        reports counters.
        """
        logger.info(f"Solve worker started ({self._engine.cell_count} cells)")
        self.status_changed.emit("Solving")

        start = time.perf_counter()
        try:
            stats = self._engine.solve_with_stats()
        except Exception as e:
            logger.exception("Error in solve worker")
            self.status_changed.emit("Error")
            self.error_occurred.emit(str(e))
            return

        self._elapsed_ms = (time.perf_counter() - start) * 1000
        self._stats = stats

        logger.info(f"Solve worker finished in {self._elapsed_ms:.1f}ms: {stats.summary()}")
        self.status_changed.emit("Solved" if stats.success else "No solution")
        self.solve_finished.emit(stats, self._engine.get_grid(), self._elapsed_ms)
