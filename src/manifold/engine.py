"""
Manifold Engine Module - Mutable puzzle state behind a constraint graph.

The engine owns the cell values, the fixed mask and the constraint graph
for one topology instance. Every write goes through ``set_cell``; bad
input is reported with a False return, never an exception.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .factory import Topology, build_topology
from .solver import BacktrackingSolver, find_conflicts
from .stats import SolveStats
from .topology import EMPTY, FACE_CELLS, MAX_VALUE

logger = logging.getLogger(__name__)


class ManifoldEngine:
    """
    Grid state and solver for one topology.

    Not safe for concurrent use; callers serialize access.

    Example:
        engine = ManifoldEngine(Topology.CLASSIC_9X9)
        engine.load_puzzle(values)
        if engine.set_cell(10, 4):
            ...
        stats = engine.solve_with_stats()
    """

    def __init__(self, topology: Topology = Topology.CLASSIC_9X9):
        """
        Build the constraint graph and an empty, unfixed grid.

        Args:
            topology: Topology selector

        Raises:
            ValueError: If the topology has no registered recipe
        """
        data = build_topology(topology)

        self._topology = topology
        self._face_count = data.face_count
        self._neighbors = data.neighbors
        self._neighbor_arrays = [np.asarray(n, dtype=np.intp) for n in data.neighbors]

        self._cells = np.array(data.cells, dtype=np.uint8)
        self._fixed = np.zeros(len(self._cells), dtype=bool)

        self._solver = BacktrackingSolver(self._neighbor_arrays)
        self._last_stats = SolveStats()

        logger.debug(f"Engine created: {topology.value}, {self.cell_count} cells")

    @property
    def topology(self) -> Topology:
        """Topology this engine was built for."""
        return self._topology

    @property
    def cell_count(self) -> int:
        """Total number of cells."""
        return len(self._cells)

    @property
    def face_count(self) -> int:
        """Number of 9x9 faces."""
        return self._face_count

    @property
    def last_stats(self) -> SolveStats:
        """Statistics of the most recent solve (zeroed before the first)."""
        return self._last_stats

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._cells)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_grid(self) -> List[int]:
        """Snapshot of cell values."""
        return self._cells.tolist()

    def get_fixed_cells(self) -> List[int]:
        """Snapshot of the fixed mask as 0/1 flags."""
        return self._fixed.astype(np.uint8).tolist()

    def get_cell(self, index: int) -> int:
        """Value at index, 0 if out of range."""
        if not self._in_range(index):
            return EMPTY
        return int(self._cells[index])

    def is_fixed(self, index: int) -> bool:
        """True if the cell is a given, False if not or out of range."""
        if not self._in_range(index):
            return False
        return bool(self._fixed[index])

    def neighbors(self, index: int) -> Tuple[int, ...]:
        """Cells sharing a constraint with index (empty if out of range)."""
        if not self._in_range(index):
            return ()
        return self._neighbors[index]

    def is_safe(self, index: int, value: int) -> bool:
        """
        Check that no neighbor currently holds value.

        The cell's own value is ignored.

        Args:
            index: Cell index
            value: Candidate value

        Returns:
            True if value does not clash with any neighbor
        """
        if not self._in_range(index):
            return False
        mates = self._neighbor_arrays[index]
        return not bool(np.any(self._cells[mates] == value))

    def find_conflicts(self) -> List[Tuple[int, int]]:
        """
        List constrained pairs holding the same nonzero value.

        Returns:
            Sorted (i, j) pairs with i < j
        """
        return find_conflicts(self._cells, self._neighbor_arrays)

    def is_complete(self) -> bool:
        """True if every cell is filled and no constraint is violated."""
        return bool(np.all(self._cells != EMPTY)) and not self.find_conflicts()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def load_puzzle(self, values: Sequence[int]) -> bool:
        """
        Replace the grid with a puzzle; nonzero values become fixed.

        A single 81-cell face is accepted on multi-face topologies: it
        fills the first face and clears the others.

        Args:
            values: Flat sequence of 0-9

        Returns:
            False (state unchanged) on a bad length or value
        """
        size = len(values)
        if size != self.cell_count and not (self._face_count > 1 and size == FACE_CELLS):
            logger.debug(f"Rejected puzzle: length {size}, expected {self.cell_count}")
            return False

        if any(not 0 <= v <= MAX_VALUE for v in values):
            logger.debug("Rejected puzzle: value outside 0-9")
            return False

        cells = np.zeros(self.cell_count, dtype=np.uint8)
        cells[:size] = list(values)

        self._cells = cells
        self._fixed = cells != EMPTY
        self._last_stats = SolveStats()

        logger.info(f"Puzzle loaded: {int(self._fixed.sum())} givens in {self.cell_count} cells")
        return True

    def set_cell(self, index: int, value: int) -> bool:
        """
        Write a value through the fixed guard and the safety check.

        Value 0 clears any non-fixed cell without checking.

        Args:
            index: Cell index
            value: 0-9

        Returns:
            True if the cell now holds value
        """
        if not self._in_range(index) or not 0 <= value <= MAX_VALUE:
            logger.debug(f"Rejected set_cell({index}, {value}): out of range")
            return False

        if self._fixed[index]:
            logger.debug(f"Rejected set_cell({index}, {value}): fixed cell")
            return False

        if value != EMPTY and not self.is_safe(index, value):
            logger.debug(f"Rejected set_cell({index}, {value}): constraint violation")
            return False

        self._cells[index] = value
        return True

    def reset(self) -> None:
        """Clear every non-fixed cell."""
        self._cells[~self._fixed] = EMPTY

    def release_fixed(self) -> None:
        """Mark every cell editable, keeping current values."""
        self._fixed[:] = False

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------

    def solve(self) -> bool:
        """
        Complete the grid by backtracking.

        Returns:
            True if solved; on False the grid is unchanged
        """
        return self.solve_with_stats().success

    def solve_with_stats(self) -> SolveStats:
        """
        Complete the grid by backtracking and report search counters.

        A grid that already violates a constraint fails without searching.

        Returns:
            SolveStats for this call (also kept in last_stats)
        """
        conflicts = self.find_conflicts()
        if conflicts:
            logger.info(f"Solve refused: {len(conflicts)} conflicting pairs, first {conflicts[0]}")
            self._last_stats = SolveStats()
            return self._last_stats

        before = self._cells.copy()
        stats = self._solver.solve(self._cells)

        if not stats.success:
            self._cells[:] = before

        self._last_stats = stats
        logger.info(f"Solve finished: {stats.summary()}")
        return stats
